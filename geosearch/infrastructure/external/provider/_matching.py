"""Highlight-range computation shared by the bundled providers."""

from geosearch.shared.utils.text import index_to_utf16, utf16_length


def highlight_ranges(text: str, query: str) -> tuple[tuple[int, int], ...]:
    """Case-insensitive first match of query in text as a UTF-16 (offset, length) pair.

    Returns () when there is no match, or when lowercasing changes the
    string length (so indices would not line up with text).
    """
    needle = query.strip().lower()
    haystack = text.lower()
    if not needle or len(haystack) != len(text):
        return ()
    start = haystack.find(needle)
    if start == -1:
        return ()
    stop = start + len(needle)
    return ((index_to_utf16(text, start), utf16_length(text[start:stop])),)


def matches(query: str, *fields: str) -> bool:
    """Whether query occurs case-insensitively in any of fields."""
    needle = query.strip().casefold()
    return bool(needle) and any(needle in f.casefold() for f in fields)
