import pytest
from wordscramble.engine import WordListDictionary

WORDS = [
    "silent", "tinsel", "enlist", "inlets", "lets", "list", "lint", "line",
    "lines", "tile", "tiles", "sine", "site", "nest", "net", "ten", "tin",
    "sit", "lie", "listen", "xyz", "bab", "abb",
]


@pytest.fixture
def dictionary():
    return WordListDictionary(WORDS)
