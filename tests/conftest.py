"""Pytest configuration and fixtures for geosearch.

Coordinator tests use a short debounce delay so they run fast; the fake
provider in tests.fakes lets each test decide when and how the provider
answers.
"""

import pytest

from geosearch.application.interfaces.provider import CompletionRecord, PlaceRecord
from geosearch.application.use_cases.location_search import SearchCoordinator
from geosearch.core.config import get_settings
from tests.fakes import FakeSearchProvider

DEBOUNCE = 0.02

SHERIDAN = CompletionRecord(
    title="Sheridan, IN",
    subtitle="United States",
    title_highlight_ranges=((0, 8),),
)
SHERIDAN_WY = CompletionRecord(title="Sheridan, WY", subtitle="United States")

SHERIDAN_PLACE = PlaceRecord(
    latitude=40.1350,
    longitude=-86.2205,
    name="Sheridan",
    locality="Sheridan",
    administrative_area="IN",
    sub_administrative_area="Hamilton County",
    postal_code="46069",
    iso_country_code="US",
    country="United States",
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached per process; tests that set env need a fresh instance."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def provider() -> FakeSearchProvider:
    """Fake provider with a canned answer for 'Sheridan'."""
    return FakeSearchProvider(canned={"Sheridan": [SHERIDAN, SHERIDAN_WY]})


@pytest.fixture
def coordinator(provider: FakeSearchProvider) -> SearchCoordinator:
    """Coordinator over the fake provider (min length 5, short debounce)."""
    return SearchCoordinator(provider, min_query_length=5, debounce_delay=DEBOUNCE)
