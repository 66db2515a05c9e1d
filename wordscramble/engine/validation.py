"""
Candidate-word validation.

This module answers the question: "Can this word be accepted right now?"
A candidate (already normalized by the caller) is accepted iff, checked in
this order:
  1) it has at least MIN_WORD_LENGTH letters
  2) it is not the root word itself
  3) it has not been accepted already this round
  4) it can be spelled from the root's letters (each letter used at most as
     many times as it appears in the root)
  5) the dictionary recognizes it as a correctly spelled word

The first failing check decides the rejection reason; later checks are not
consulted. Rejections are returned as values, never raised.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .dictionary import Dictionary

MIN_WORD_LENGTH = 3
DEFAULT_LOCALE = "en"


class Rejection(Enum):
    TOO_SHORT = "too_short"
    MATCHES_ROOT = "matches_root"
    ALREADY_USED = "already_used"
    NOT_SPELLABLE = "not_spellable"
    NOT_A_REAL_WORD = "not_a_real_word"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate. `reason` is None when accepted."""
    word: str
    reason: Optional[Rejection] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @classmethod
    def ok(cls, word: str) -> "ValidationResult":
        return cls(word=word)

    @classmethod
    def reject(cls, word: str, reason: Rejection) -> "ValidationResult":
        return cls(word=word, reason=reason)


def normalize(candidate: str) -> str:
    """Lowercase and trim surrounding whitespace (tabs/newlines included)."""
    return candidate.strip().lower()


def is_long_enough(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH


def is_original(word: str, used: Iterable[str]) -> bool:
    return word not in used


def is_spellable(word: str, root: str) -> bool:
    """
    Multiset subset test: can `word` be built from the letters of `root`?

    Each matched letter is consumed from a working copy of the root's letter
    counts, so a letter repeated in `word` must be repeated in `root` too.

    Examples:
      is_spellable("abb", "aabb")  -> True
      is_spellable("abbb", "aabb") -> False
    """
    remaining = Counter(root)
    for letter in word:
        if remaining[letter] <= 0:
            return False
        remaining[letter] -= 1  # consume one instance
    return True


def is_real(word: str, dictionary: Dictionary, locale: str = DEFAULT_LOCALE) -> bool:
    return dictionary.is_correctly_spelled(word.lower(), locale)


def validate(
        candidate: str,
        root: str,
        used: Iterable[str],
        dictionary: Dictionary,
        *,
        locale: str = DEFAULT_LOCALE,
) -> ValidationResult:
    """
    Run the ordered checks on an already-normalized `candidate`.

    Args:
      candidate  : word to check (see `normalize`)
      root       : the round's root word
      used       : words already accepted this round
      dictionary : spell-check collaborator
      locale     : language passed to the dictionary

    Returns:
      ValidationResult.ok(candidate) or a rejection carrying the first failed check.
    """
    if not is_long_enough(candidate):
        return ValidationResult.reject(candidate, Rejection.TOO_SHORT)

    if candidate == root:
        return ValidationResult.reject(candidate, Rejection.MATCHES_ROOT)

    if not is_original(candidate, used):
        return ValidationResult.reject(candidate, Rejection.ALREADY_USED)

    if not is_spellable(candidate, root):
        return ValidationResult.reject(candidate, Rejection.NOT_SPELLABLE)

    if not is_real(candidate, dictionary, locale):
        return ValidationResult.reject(candidate, Rejection.NOT_A_REAL_WORD)

    return ValidationResult.ok(candidate)
