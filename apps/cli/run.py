# apps/cli/run.py
"""
CLI entry point for wordscramble autoplay runs.

This script:
  1) Validates the start-word list (prints counts + SHA, flags bad lines).
  2) Loads the start list and the vocabulary, builds the dictionary.
  3) Autoplays every (or a sampled subset of) root word, guessing each
     vocabulary word spellable from it, and writes:
       - CSV:  per-root score, accepted count, best word, rejection counts
       - JSON: manifest with config, start-list hash, git commit, totals
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import List

from wordscramble.datasets import (
    DEFAULT_DICTIONARY_WORDS,
    DEFAULT_START_WORDS,
    WordListError,
    load_start_words,
    load_words,
    pretty_summary,
    validate_start_words,
)
from wordscramble.engine import DEFAULT_LOCALE
from wordscramble.harness import run_batch, write_csv, write_manifest
from wordscramble.harness.io import timestamp_id, git_commit_or_unknown

from apps.cli.play import build_dictionary

logger = logging.getLogger("apps.cli.run")


def main(argv: List[str] | None = None):
    """
    Parse CLI args, validate the start list, run the batch, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble: autoplay root words")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="path to start-word list (roots to play)")
    ap.add_argument("--words", default=str(DEFAULT_DICTIONARY_WORDS),
                    help="newline-delimited vocabulary used as guesses (default: bundled words.txt)")
    ap.add_argument("--dictionary", choices=["wordlist", "wordfreq"], default="wordlist",
                    help="dictionary used for the 'real word' check (wordlist uses --words)")
    ap.add_argument("--min-zipf", type=float, default=0.0,
                    help="wordfreq: minimum Zipf frequency for a word to count as real")
    ap.add_argument("--locale", default=DEFAULT_LOCALE, help="dictionary language code")
    ap.add_argument("--sample", type=int,
                    help="play only K randomly chosen roots (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    if args.sample is not None and args.sample < 0:
        ap.error("--sample must be >= 0")

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate the start list and print a one-liner summary
    rep = validate_start_words(args.start_words)
    print(pretty_summary(rep))

    # 2) Load data (missing or empty word lists are fatal)
    try:
        roots = load_start_words(args.start_words)
        vocabulary = load_words(args.words, "word")
        dictionary = build_dictionary(args.dictionary, args.words, args.locale, args.min_zipf)
    except WordListError as e:
        raise SystemExit(f"error: {e}") from e

    # 3) Choose roots (deterministic sample by seed, without replacement)
    if args.sample is not None:
        pool = list(roots)
        random.Random(args.seed).shuffle(pool)
        roots = pool[: args.sample]

    # 4) Run batch
    results = run_batch(roots, vocabulary, dictionary, locale=args.locale,
                        seed=args.seed, progress=not args.no_progress)
    total_score = sum(r["score"] for r in results)
    logger.info("Played %d roots, total score %d", len(results), total_score)

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "start_words": rep,
        "num_rounds": len(results),
        "total_score": total_score,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
