"""Tests for UTF-16 offset conversion and character boundary checks."""

from geosearch.shared.utils.text import (
    index_to_utf16,
    grapheme_boundaries,
    is_character_boundary,
    utf16_length,
    utf16_to_index,
)

EMOJI = "a\U0001F600b"


def test_utf16_length() -> None:
    assert utf16_length("") == 0
    assert utf16_length("Sheridan") == 8
    assert utf16_length(EMOJI) == 4


def test_utf16_to_index() -> None:
    assert utf16_to_index(EMOJI, 0) == 0
    assert utf16_to_index(EMOJI, 1) == 1
    assert utf16_to_index(EMOJI, 2) is None
    assert utf16_to_index(EMOJI, 3) == 2
    assert utf16_to_index(EMOJI, 4) == 3
    assert utf16_to_index(EMOJI, 5) is None
    assert utf16_to_index(EMOJI, -1) is None
    assert utf16_to_index("", 0) == 0


def test_index_to_utf16() -> None:
    assert index_to_utf16(EMOJI, 2) == 3
    assert index_to_utf16(EMOJI, 3) == 4


def test_string_ends_are_boundaries() -> None:
    assert is_character_boundary("abc", 0)
    assert is_character_boundary("abc", 3)
    assert not is_character_boundary("abc", 4)
    assert not is_character_boundary("abc", -1)


def test_attached_characters_are_not_boundaries() -> None:
    assert not is_character_boundary("e\u0301", 1)
    assert not is_character_boundary("\u2764\ufe0f", 1)
    assert not is_character_boundary("\U0001F44D\U0001F3FD", 1)
    assert not is_character_boundary("\U0001F469\u200d\U0001F4BB", 1)
    assert not is_character_boundary("\U0001F469\u200d\U0001F4BB", 2)
    assert not is_character_boundary("\r\n", 1)
    assert is_character_boundary("\n\r", 1)
    assert is_character_boundary("ab", 1)


def test_flags_jamo_and_zwj_before_letter() -> None:
    assert not is_character_boundary("\U0001F1FA\U0001F1F8", 1)
    assert is_character_boundary("\U0001F1FA\U0001F1F8\U0001F1EC\U0001F1E7", 2)
    assert not is_character_boundary("\u1100\u1161\u11a8", 1)
    assert is_character_boundary("a\u200db", 2)
    assert not is_character_boundary("a\u200db", 1)


def test_grapheme_boundaries() -> None:
    assert grapheme_boundaries("") == {0}
    assert grapheme_boundaries("e\u0301x") == {0, 2, 3}
