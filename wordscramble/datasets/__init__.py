from .validator import validate_start_words, pretty_summary
from .io import (
    DEFAULT_START_WORDS,
    DEFAULT_DICTIONARY_WORDS,
    WordListError,
    read_lines,
    write_lines,
    clean_words,
    load_words,
    load_start_words,
    load_dictionary,
)

__all__ = [
    "validate_start_words", "pretty_summary",
    "DEFAULT_START_WORDS", "DEFAULT_DICTIONARY_WORDS", "WordListError",
    "read_lines", "write_lines", "clean_words",
    "load_words", "load_start_words", "load_dictionary",
]
