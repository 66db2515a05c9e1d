"""
Start-list validator for wordscramble.

What this module does:
- Validate a start-word list (the pool root words are drawn from).
- Enforce formatting rules (lowercase, a–z only, no whitespace, one per line,
  at least `min_length` letters).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordscramble.engine.validation import MIN_WORD_LENGTH


@dataclass
class StartListReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered (blank lines included)
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    min_length: int
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    A trailing newline at end of file does not count as a blank line.

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.rstrip("\r\n")
            if w == w.lower() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_start_words(path: str, *, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a start-word list.

    Returns a JSON-serializable dictionary (see StartListReport) whose
    `passed` flag is strict: non-empty, no invalid lines, no duplicates.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"start words file not found: {path}")
        rep = StartListReport(path, False, 0, 0, 0, "", min_length, False, issues)
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    if not words:
        issues.append("start words file contains 0 valid words")
    if invalid:
        issues.append(f"start words has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("start words contains duplicate lines")

    rep = StartListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        min_length=min_length,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=data/start.txt | words=120 (uniq=120, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"start={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, invalid={report['invalid_lines']}, sha={sha}) "
        f"| {status}"
    )
