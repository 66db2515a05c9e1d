"""
Game session: the single owner of round state.

- start_new_round: pick a random root word and reset used words / score.
- submit:          normalize + validate a candidate, record it if accepted.

All mutable state (root word, used words, score, last result, pending input)
lives here and changes only through those two operations, so a CLI, a test
or any other front-end can render it through the read-only properties.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from wordscramble.datasets.io import WordListError, clean_words
from wordscramble.engine import (
    DEFAULT_LOCALE,
    Dictionary,
    ValidationResult,
    normalize,
    possible_words,
    validate,
)

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, dictionary: Dictionary, *, locale: str = DEFAULT_LOCALE,
                 seed: int | None = None):
        self.dictionary = dictionary
        self.locale = locale
        self.rng = random.Random(seed)

        self._root_word: str = ""
        self._used_words: List[str] = []  # most recent first
        self._score: int = 0
        self._current_input: str = ""
        self._last_result: Optional[ValidationResult] = None
        self._round_number: int = 0

    # ---- read-only views ----

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used_words)

    @property
    def score(self) -> int:
        return self._score

    @property
    def current_input(self) -> str:
        return self._current_input

    @property
    def last_result(self) -> Optional[ValidationResult]:
        return self._last_result

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def active(self) -> bool:
        return self._round_number > 0

    # ---- operations ----

    def start_new_round(self, word_list: Optional[Sequence[str]]) -> str:
        """
        Reset the round and draw a root word uniformly at random.

        Entries are stripped and lowercased; blank entries are ignored.
        Raises WordListError if `word_list` is None or has no words.
        Returns the new root word.
        """
        words = clean_words(word_list) if word_list is not None else []
        if not words:
            raise WordListError("Cannot start a round: word list is empty or missing")

        self._current_input = ""
        self._used_words.clear()
        self._score = 0
        self._last_result = None
        self._root_word = self.rng.choice(words)
        self._round_number += 1

        logger.info("Round %d started with root %r", self._round_number, self._root_word)
        return self._root_word

    def submit(self, candidate: str) -> ValidationResult:
        """
        Normalize and validate `candidate` against the current round.

        On acceptance the word is prepended to `used_words` and its length is
        added to `score`. The result is returned unchanged for the caller to
        render.
        """
        if not self.active:
            raise RuntimeError("No active round; call start_new_round() first")

        self._current_input = candidate
        word = normalize(candidate)
        result = validate(word, self._root_word, self._used_words, self.dictionary,
                          locale=self.locale)
        self._last_result = result

        if result.accepted:
            self._used_words.insert(0, word)
            self._score += len(word)
            self._current_input = ""
            logger.debug("Accepted %r (+%d, score=%d)", word, len(word), self._score)
        else:
            logger.debug("Rejected %r: %s", word, result.reason.name)

        return result

    def hint(self, vocabulary: Iterable[str], limit: int | None = None) -> List[str]:
        """Playable vocabulary words for the current root not yet used this round."""
        if not self.active:
            raise RuntimeError("No active round; call start_new_round() first")
        used = set(self._used_words)
        words = [w for w in possible_words(self._root_word, vocabulary) if w not in used]
        return words if limit is None else words[:limit]
