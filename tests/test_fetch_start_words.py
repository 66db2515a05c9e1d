from script.fetch_start_words import extract_words


def test_extract_words_keeps_unique_tokens_of_length():
    text = "Alphabet baseball, ALPHABET calendar-day 12345678 listen"
    assert extract_words(text, 8) == ["alphabet", "baseball", "calendar"]
