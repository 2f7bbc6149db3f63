"""Search providers: Nominatim (HTTP) and in-memory catalogue, plus factory."""

from geosearch.infrastructure.external.provider.factory import ProviderFactory
from geosearch.infrastructure.external.provider.memory import (
    CatalogueEntry,
    InMemorySearchProvider,
)
from geosearch.infrastructure.external.provider.nominatim import NominatimSearchProvider

__all__ = [
    "CatalogueEntry",
    "InMemorySearchProvider",
    "NominatimSearchProvider",
    "ProviderFactory",
]
