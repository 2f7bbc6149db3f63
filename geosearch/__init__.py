"""Debounced, cancellation-safe location search over a callback-style provider.

Public API:
    SearchCoordinator: search(text) / resolve_detail(result)
    SearchResult, DetailRecord, HighlightSpan, Coordinate
    Error taxonomy: DebouncedException, DuplicateQueryException,
    InvalidCriteriaException, SearchFailedException, ProviderException
"""

from geosearch.application.use_cases import DetailResolver, SearchCoordinator
from geosearch.domain import (
    Coordinate,
    DebouncedException,
    DetailRecord,
    DuplicateQueryException,
    HighlightSpan,
    InvalidCriteriaException,
    LocationSearchException,
    ProviderException,
    SearchFailedException,
    SearchResult,
)

__version__ = "1.0.0"

__all__ = [
    "Coordinate",
    "DebouncedException",
    "DetailRecord",
    "DetailResolver",
    "DuplicateQueryException",
    "HighlightSpan",
    "InvalidCriteriaException",
    "LocationSearchException",
    "ProviderException",
    "SearchCoordinator",
    "SearchFailedException",
    "SearchResult",
]
