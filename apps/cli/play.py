# apps/cli/play.py
"""
Interactive terminal front-end for wordscramble.

This script:
  1) Loads the start-word list and the dictionary word list (aborts if
     either is missing or empty).
  2) Builds the dictionary collaborator (bundled English word list by
     default, or the wordfreq corpus on request).
  3) Runs the read-submit-render loop until the player quits.

Commands at the prompt:
  <word>   submit a word
  :new     start a new round with a fresh root word
  :hint    show a few playable words from the word list
  :quit    exit (end of input also exits)
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from wordscramble.datasets import (
    DEFAULT_DICTIONARY_WORDS,
    WordListError,
    load_dictionary,
    load_start_words,
    load_words,
)
from wordscramble.engine import (
    DEFAULT_LOCALE,
    Dictionary,
    WordfreqDictionary,
    describe,
)
from wordscramble.session import GameSession

HINT_LIMIT = 5


def build_dictionary(kind: str, words_path: Optional[str], locale: str,
                     min_zipf: float = 0.0) -> Dictionary:
    """
    Factory: instantiate the dictionary collaborator by name.

    "wordlist" reads `words_path` (bundled English list when None); "wordfreq"
    counts any sufficiently frequent corpus token as a word and is opt-in.
    """
    if kind == "wordlist":
        return load_dictionary(words_path, locale=locale)
    if kind == "wordfreq":
        return WordfreqDictionary(min_zipf=min_zipf)
    raise ValueError(f"Unknown dictionary: {kind}. Available: ['wordfreq', 'wordlist']")


def render_round(session: GameSession) -> None:
    print()
    print(f"== {session.root_word} ==")
    print(f"Score: {session.score}")


def render_used_words(session: GameSession) -> None:
    for w in session.used_words:
        print(f"  ({len(w)}) {w}")
    print(f"Score: {session.score}")


def main(argv: List[str] | None = None):
    """
    Parse CLI args, load data, and run the interactive loop.
    """
    ap = argparse.ArgumentParser(description="wordscramble: make words from the root word")
    ap.add_argument("--start-words", help="path to start-word list (default: bundled start.txt)")
    ap.add_argument("--dictionary", choices=["wordlist", "wordfreq"], default="wordlist",
                    help="dictionary used for the 'real word' check")
    ap.add_argument("--words", help="newline-delimited word list for the dictionary and hints "
                                    "(default: bundled words.txt)")
    ap.add_argument("--min-zipf", type=float, default=0.0,
                    help="wordfreq: minimum Zipf frequency for a word to count as real")
    ap.add_argument("--locale", default=DEFAULT_LOCALE, help="dictionary language code")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Missing or empty data files abort startup
    try:
        start_words = load_start_words(args.start_words)
        vocabulary = load_words(args.words or DEFAULT_DICTIONARY_WORDS, "word")
        dictionary = build_dictionary(args.dictionary, args.words, args.locale, args.min_zipf)
    except WordListError as e:
        raise SystemExit(f"error: {e}") from e

    session = GameSession(dictionary, locale=args.locale, seed=args.seed)
    session.start_new_round(start_words)
    render_round(session)

    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            break

        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":new":
            session.start_new_round(start_words)
            render_round(session)
            continue
        if cmd == ":hint":
            hints = session.hint(vocabulary, limit=HINT_LIMIT)
            print(", ".join(hints) if hints else "No words left to find.")
            continue

        result = session.submit(line)
        alert = describe(result, session.root_word)
        if alert is not None:
            title, message = alert
            print(f"{title}: {message}")
        else:
            render_used_words(session)

    print(f"Final score: {session.score}")


if __name__ == "__main__":
    main()
