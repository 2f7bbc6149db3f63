"""Domain value objects and shared value types."""

from geosearch.domain.value_objects.core import Coordinate, HighlightSpan

__all__ = [
    "Coordinate",
    "HighlightSpan",
]
