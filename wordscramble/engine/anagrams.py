"""
Enumerate the vocabulary words playable from a root.

Given:
  - a root word
  - a vocabulary (e.g., a dictionary word list)

Return:
  - every distinct vocabulary word that clears the length, identity and
    spellability checks for that root.

Dictionary membership is implied by drawing from the vocabulary, so no
dictionary lookup is done here. Used for hints and by the batch harness.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .validation import is_long_enough, is_spellable, normalize


def possible_words(root: str, vocabulary: Iterable[str]) -> List[str]:
    """
    Args:
      root       : normalized root word
      vocabulary : iterable of candidate words (any case, may contain blanks)

    Returns:
      List[str] of playable words (order preserved as in `vocabulary`).
    """
    out: List[str] = []
    seen: Set[str] = set()

    for w in vocabulary:
        w = normalize(w)

        # Basic hygiene: skip blanks, duplicates and the root itself
        if not w or w in seen or w == root:
            continue
        if len(w) > len(root) or not is_long_enough(w):
            continue

        if is_spellable(w, root):
            seen.add(w)
            out.append(w)

    return out
