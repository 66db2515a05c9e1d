"""
I/O utilities for autoplay runs.

Responsibilities:
- write_csv:     flatten per-round results into a tidy CSV (one row per root).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from wordscramble.engine import Rejection

CSV_FIELDS = ["root", "score", "num_accepted", "best_word", "time_ms"] + [
    f"rejected_{r.value}" for r in Rejection
]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of round results to CSV.

    Schema (columns):
      root, score, num_accepted, best_word, time_ms,
      rejected_<reason> for every rejection reason

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            accepted = r.get("accepted", [])
            row = {
                "root": r["root"],
                "score": r["score"],
                "num_accepted": len(accepted),
                # longest word; ties go to the earliest accepted
                "best_word": max(reversed(accepted), key=len) if accepted else "",
                "time_ms": round(float(r.get("time_ms", 0.0)), 3),
            }
            rejections = r.get("rejections", {})
            for reason in Rejection:
                row[f"rejected_{reason.value}"] = rejections.get(reason.name, 0)

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and start-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - start_words: output of datasets.validate_start_words(...)
      - num_rounds, total_score
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
