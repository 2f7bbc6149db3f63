"""Domain value objects for location search.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass

from geosearch.shared.utils.text import is_character_boundary, utf16_to_index


@dataclass(frozen=True)
class HighlightSpan:
    """Matched substring reported by the provider for a title or subtitle.

    Offset and length are UTF-16 code units relative to the exact string the
    provider matched. A span carries no guarantee of validity on its own;
    to_range checks it against a specific string at the point of use.
    """

    _offset: int
    _length: int

    @classmethod
    def from_pair(cls, pair: tuple[int, int]) -> "HighlightSpan":
        """Build a span from a provider (offset, length) pair."""
        offset, length = pair
        return cls(offset, length)

    def to_range(self, text: str) -> range | None:
        """Return the span as a range of indices into text, or None if it does not fit.

        None is returned (never raised) when the span starts or ends past the
        end of text, or when either end splits a character (a surrogate pair,
        a combining sequence, an emoji sequence). A zero-length span at a
        valid offset yields an empty range, so test the result with `is None`.
        """
        if self._length < 0:
            return None
        start = utf16_to_index(text, self._offset)
        if start is None:
            return None
        stop = utf16_to_index(text, self._offset + self._length)
        if stop is None:
            return None
        if not is_character_boundary(text, start) or not is_character_boundary(text, stop):
            return None
        return range(start, stop)


@dataclass(frozen=True)
class Coordinate:
    """WGS84 coordinate in decimal degrees. Compared exactly (no tolerance)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate ranges.

        Raises:
            ValueError: If latitude is outside [-90, 90] or longitude outside [-180, 180].
        """
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude must be between -90 and 90, got: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(
                f"Longitude must be between -180 and 180, got: {self.longitude}"
            )
