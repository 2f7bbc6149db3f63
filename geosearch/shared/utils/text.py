"""Text index helpers for provider-reported highlight ranges.

Providers report highlight ranges in UTF-16 code units (the unit used by
JavaScript and NSString based APIs). Python strings index by code point,
so offsets are converted here and rejected when they land inside a
character.
"""

import regex

_GRAPHEME = regex.compile(r"\X")


def _utf16_width(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def utf16_length(text: str) -> int:
    """Return the length of text in UTF-16 code units."""
    return sum(_utf16_width(ch) for ch in text)


def utf16_to_index(text: str, units: int) -> int | None:
    """Map a UTF-16 offset to a code point index.

    Returns None when the offset is negative, past the end of text, or
    falls between the two halves of a surrogate pair.
    """
    if units < 0:
        return None
    consumed = 0
    for index, ch in enumerate(text):
        if consumed == units:
            return index
        consumed += _utf16_width(ch)
        if consumed > units:
            return None
    return len(text) if consumed == units else None


def index_to_utf16(text: str, index: int) -> int:
    """Return the UTF-16 offset of code point index in text."""
    return utf16_length(text[:index])


def grapheme_boundaries(text: str) -> set[int]:
    """Code point indices that start or end an extended grapheme cluster."""
    boundaries = {0}
    boundaries.update(match.end() for match in _GRAPHEME.finditer(text))
    return boundaries


def is_character_boundary(text: str, index: int) -> bool:
    """Whether index sits between two user-perceived characters.

    Uses Unicode extended grapheme cluster segmentation, so combining
    sequences, emoji ZWJ sequences, flags, Hangul jamo and CR LF are never
    split. Both ends of the string are always boundaries.
    """
    if index < 0 or index > len(text):
        return False
    return index in grapheme_boundaries(text)
