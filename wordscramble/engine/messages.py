"""
Display text for rejections: each reason maps to a (title, message) pair
that a front-end shows in an alert or prints to the terminal.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .validation import Rejection, ValidationResult

_ALERTS = {
    Rejection.TOO_SHORT: ("Word too short", "Word should be greater than two letters"),
    Rejection.MATCHES_ROOT: ("Stop cheating bro", "You can't type the same word as the root word.."),
    Rejection.ALREADY_USED: ("Word used already", "Be more original"),
    Rejection.NOT_SPELLABLE: ("Word not possible", "You can't spell that word from '{root}'"),
    Rejection.NOT_A_REAL_WORD: ("Word not recognized", "You can't create words.."),
}


def describe(result: ValidationResult, root: str) -> Optional[Tuple[str, str]]:
    """
    Return (title, message) for a rejected result, or None if it was accepted.

    Example:
      describe(ValidationResult.reject("xyz", Rejection.NOT_SPELLABLE), "listen")
        -> ("Word not possible", "You can't spell that word from 'listen'")
    """
    if result.accepted:
        return None

    title, message = _ALERTS[result.reason]
    return title, message.format(root=root)
