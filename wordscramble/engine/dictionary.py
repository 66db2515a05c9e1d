"""
Dictionary collaborators for the "is this a real word?" check.

Anything with an `is_correctly_spelled(word, locale) -> bool` method can be
handed to the validator. Two implementations ship here:
  - WordListDictionary : closed-world set of words (a list file or any iterable)
  - WordfreqDictionary : open-world lookup backed by the `wordfreq` corpus
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol, Set

from wordfreq import zipf_frequency

logger = logging.getLogger(__name__)


class Dictionary(Protocol):
    def is_correctly_spelled(self, word: str, locale: str) -> bool:
        ...


class WordListDictionary:
    """In-memory word set for a single locale. Lookups are case-insensitive."""

    def __init__(self, words: Iterable[str], *, locale: str = "en"):
        self.locale = locale
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Path | str, *, locale: str = "en") -> "WordListDictionary":
        """
        Load a newline-delimited word list.
        Raises FileNotFoundError if the path doesn't exist.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(p)
        words = p.read_text(encoding="utf-8").splitlines()
        d = cls(words, locale=locale)
        logger.info("Loaded %d dictionary words from %s", len(d), p)
        return d

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return word.strip().lower() in self._words

    def is_correctly_spelled(self, word: str, locale: str) -> bool:
        if locale != self.locale:
            return False
        return word in self


class WordfreqDictionary:
    """
    Treat any word the `wordfreq` corpus has seen (Zipf frequency above
    `min_zipf`) as correctly spelled. Raising `min_zipf` filters out rare
    tokens, e.g. min_zipf=2.0 keeps words seen at least once per 10M words.
    """

    def __init__(self, *, min_zipf: float = 0.0):
        self.min_zipf = float(min_zipf)

    def is_correctly_spelled(self, word: str, locale: str) -> bool:
        w = word.strip().lower()
        # wordfreq tokenizes free text; only single alphabetic tokens are words here
        if not w.isalpha():
            return False
        freq = zipf_frequency(w, locale)
        logger.debug("zipf_frequency(%r, %r) = %.2f", w, locale, freq)
        return freq > self.min_zipf
