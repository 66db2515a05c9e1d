from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordscramble.engine.dictionary import WordListDictionary

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"

# Bundled start list (one root word per line)
DEFAULT_START_WORDS = DATA_DIR / "start.txt"
# Bundled English word list: default dictionary and hint vocabulary
DEFAULT_DICTIONARY_WORDS = DATA_DIR / "words.txt"


class WordListError(RuntimeError):
    """A required word list is missing or empty. Fatal at startup."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def clean_words(lines: Iterable[str]) -> List[str]:
    """Strip, lowercase and drop blank entries (order preserved)."""
    return [w.strip().lower() for w in lines if w.strip()]


def load_words(p: Path | str, kind: str = "word") -> List[str]:
    """
    Load a required newline-delimited word list (cleaned, order preserved).

    A missing file or a file with no words raises WordListError: the game
    cannot run without it.
    """
    p = Path(p)
    try:
        words = clean_words(read_lines(p))
    except FileNotFoundError as e:
        raise WordListError(f"Could not load {kind} list from {p}") from e

    if not words:
        raise WordListError(f"The {kind} list is empty: {p}")

    logger.info("Loaded %d %s entries from %s", len(words), kind, p)
    return words


def load_start_words(p: Path | str | None = None) -> List[str]:
    """Load the start-word list used to pick root words (default: bundled `data/start.txt`)."""
    return load_words(p if p is not None else DEFAULT_START_WORDS, "start word")


def load_dictionary(p: Path | str | None = None, *, locale: str = "en") -> WordListDictionary:
    """
    Build the closed-world dictionary from a word list (default: bundled
    `data/words.txt`, an English list). Raises WordListError like load_words.
    """
    words = load_words(p if p is not None else DEFAULT_DICTIONARY_WORDS, "dictionary")
    return WordListDictionary(words, locale=locale)
