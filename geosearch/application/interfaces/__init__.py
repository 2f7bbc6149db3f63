"""Application interfaces (ports): search provider protocols and records."""

from geosearch.application.interfaces.provider import (
    CompletionRecord,
    DetailCallback,
    DetailResponse,
    IDetailLookup,
    ISearchCompleter,
    ISearchCompleterDelegate,
    ISearchProvider,
    PlaceRecord,
    ProviderError,
)

__all__ = [
    "CompletionRecord",
    "DetailCallback",
    "DetailResponse",
    "IDetailLookup",
    "ISearchCompleter",
    "ISearchCompleterDelegate",
    "ISearchProvider",
    "PlaceRecord",
    "ProviderError",
]
