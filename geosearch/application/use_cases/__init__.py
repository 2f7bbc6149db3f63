"""Use cases: location search coordination and detail resolution."""

from geosearch.application.use_cases.detail_resolver import DetailResolver
from geosearch.application.use_cases.location_search import SearchCoordinator

__all__ = ["DetailResolver", "SearchCoordinator"]
