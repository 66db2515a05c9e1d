import pytest
from wordscramble.datasets import load_dictionary
from wordscramble.engine import (
    Rejection,
    ValidationResult,
    WordListDictionary,
    WordfreqDictionary,
    describe,
    is_spellable,
    normalize,
    possible_words,
    validate,
)


@pytest.mark.parametrize("word,root,expected", [
    ("abb", "aabb", True),
    ("abbb", "aabb", False),
    ("silent", "listen", True),
    ("listens", "listen", False),
    ("tent", "listen", False),
    ("", "listen", True),
])
def test_is_spellable_respects_multiplicity(word, root, expected):
    assert is_spellable(word, root) is expected


def test_normalize_trims_and_lowercases():
    assert normalize("  SiLent\n") == "silent"
    assert normalize("\tab ") == "ab"


@pytest.mark.parametrize("candidate", ["", "a", "ab", "xy"])
def test_short_words_are_too_short(candidate, dictionary):
    r = validate(candidate, "listen", [], dictionary)
    assert r.reason is Rejection.TOO_SHORT
    assert not r.accepted


def test_root_word_matches_root(dictionary):
    # even though "listen" is in the dictionary and spellable
    assert validate("listen", "listen", [], dictionary).reason is Rejection.MATCHES_ROOT
    assert validate("listen", "listen", ["listen"], dictionary).reason is Rejection.MATCHES_ROOT


def test_used_word_is_already_used_regardless_of_other_checks(dictionary):
    # "qqq" is neither spellable nor real, but originality is checked first
    assert validate("qqq", "listen", ["qqq"], dictionary).reason is Rejection.ALREADY_USED
    assert validate("silent", "listen", ["silent"], dictionary).reason is Rejection.ALREADY_USED


def test_spellability_checked_before_dictionary(dictionary):
    # "xyz" is in the dictionary but not spellable from the root
    assert validate("xyz", "listen", [], dictionary).reason is Rejection.NOT_SPELLABLE
    # "abbb" is neither spellable nor real: spellability wins
    assert validate("abbb", "aabb", [], dictionary).reason is Rejection.NOT_SPELLABLE


def test_spellable_but_unknown_word_is_not_real(dictionary):
    # "tines" is spellable from "listen" but missing from the fixture dictionary
    assert validate("tines", "listen", [], dictionary).reason is Rejection.NOT_A_REAL_WORD


def test_accepted_word(dictionary):
    r = validate("silent", "listen", [], dictionary)
    assert r == ValidationResult.ok("silent")
    assert r.accepted and r.reason is None


def test_dictionary_locale_is_fixed():
    d = WordListDictionary(["Silent"], locale="en")
    assert d.is_correctly_spelled("silent", "en") is True
    assert d.is_correctly_spelled("SILENT", "en") is True
    assert d.is_correctly_spelled("silent", "fr") is False
    assert validate("silent", "listen", [], d, locale="fr").reason is Rejection.NOT_A_REAL_WORD


def test_dictionary_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("Silent\n\ntinsel\n", encoding="utf-8")
    d = WordListDictionary.from_file(p)
    assert len(d) == 2
    assert "silent" in d and "tinsel" in d


def test_dictionary_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        WordListDictionary.from_file(tmp_path / "nope.txt")


def test_describe_messages():
    assert describe(ValidationResult.ok("silent"), "listen") is None

    title, message = describe(ValidationResult.reject("xyz", Rejection.NOT_SPELLABLE), "listen")
    assert title == "Word not possible"
    assert message == "You can't spell that word from 'listen'"

    titles = {describe(ValidationResult.reject("w", r), "root")[0] for r in Rejection}
    assert len(titles) == len(Rejection)


def test_possible_words_filters_and_dedupes():
    vocab = ["Silent", "silent", "listen", "no", "tent", "lets", "", "enlists"]
    assert possible_words("listen", vocab) == ["silent", "lets"]


def test_wordfreq_dictionary():
    d = WordfreqDictionary()
    assert d.is_correctly_spelled("silent", "en") is True
    assert d.is_correctly_spelled("Silent", "en") is True
    assert d.is_correctly_spelled("xqzvtk", "en") is False
    # multi-token input is never a single word
    assert d.is_correctly_spelled("silent night", "en") is False


@pytest.mark.parametrize("reason,title,message", [
    (Rejection.TOO_SHORT, "Word too short", "Word should be greater than two letters"),
    (Rejection.MATCHES_ROOT, "Stop cheating bro", "You can't type the same word as the root word.."),
    (Rejection.ALREADY_USED, "Word used already", "Be more original"),
    (Rejection.NOT_A_REAL_WORD, "Word not recognized", "You can't create words.."),
])
def test_describe_alert_text(reason, title, message):
    assert describe(ValidationResult.reject("w", reason), "listen") == (title, message)


def test_default_dictionary_rejects_gibberish():
    d = load_dictionary()
    for junk in ["stl", "lst", "tsl", "nsl", "ntl", "sle", "eln", "tse", "nse", "lsn", "etn", "ilt"]:
        assert d.is_correctly_spelled(junk, "en") is False, junk
        assert validate(junk, "listen", [], d).reason is Rejection.NOT_A_REAL_WORD
    for word in ["silent", "tinsel", "inlets", "enlist", "lets", "tile"]:
        assert validate(word, "listen", [], d).accepted, word
