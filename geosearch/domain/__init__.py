"""Domain layer: entities, value objects, and exceptions.

No dependencies on infrastructure. Used by application and infrastructure
layers.
"""

from geosearch.domain.entities import DetailRecord, SearchResult
from geosearch.domain.exceptions import (
    DebouncedException,
    DuplicateQueryException,
    InvalidCriteriaException,
    LocationSearchException,
    ProviderException,
    SearchFailedException,
)
from geosearch.domain.value_objects import Coordinate, HighlightSpan

__all__ = [
    # Entities
    "DetailRecord",
    "SearchResult",
    # Exceptions
    "DebouncedException",
    "DuplicateQueryException",
    "InvalidCriteriaException",
    "LocationSearchException",
    "ProviderException",
    "SearchFailedException",
    # Value objects
    "Coordinate",
    "HighlightSpan",
]
