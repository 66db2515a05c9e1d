from .validation import (
    MIN_WORD_LENGTH,
    DEFAULT_LOCALE,
    Rejection,
    ValidationResult,
    normalize,
    is_spellable,
    validate,
)
from .dictionary import Dictionary, WordListDictionary, WordfreqDictionary
from .messages import describe
from .anagrams import possible_words

__all__ = [
    "MIN_WORD_LENGTH", "DEFAULT_LOCALE", "Rejection", "ValidationResult",
    "normalize", "is_spellable", "validate",
    "Dictionary", "WordListDictionary", "WordfreqDictionary",
    "describe", "possible_words",
]
