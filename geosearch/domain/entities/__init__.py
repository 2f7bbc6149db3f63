"""Domain entities: search results and resolved detail records."""

from geosearch.domain.entities.detail_record import DetailRecord
from geosearch.domain.entities.search_result import SearchResult

__all__ = [
    "DetailRecord",
    "SearchResult",
]
