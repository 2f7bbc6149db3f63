"""Tests for domain exceptions (error_code, message, details)."""

import pytest

from geosearch.domain.exceptions import (
    DebouncedException,
    DuplicateQueryException,
    InvalidCriteriaException,
    LocationSearchException,
    ProviderException,
    SearchFailedException,
)


def test_base_exception_default_error_code() -> None:
    """Base LocationSearchException uses class name as error_code when not provided."""
    exc = LocationSearchException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "LocationSearchException"
    assert exc.details == {}


def test_base_exception_custom_error_code_and_details() -> None:
    exc = LocationSearchException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}
    assert str(exc) == "Oops"


def test_debounced() -> None:
    exc = DebouncedException()
    assert exc.error_code == "DEBOUNCED"
    assert exc.details == {}


def test_duplicate_query_carries_query() -> None:
    exc = DuplicateQueryException("Sheridan")
    assert exc.error_code == "DUPLICATE_QUERY"
    assert exc.details == {"query": "Sheridan"}


def test_invalid_criteria_carries_lengths() -> None:
    exc = InvalidCriteriaException(1, 5)
    assert exc.error_code == "INVALID_CRITERIA"
    assert exc.details == {"query_length": 1, "min_length": 5}
    assert "minimum" in exc.message


def test_search_failed_reason_optional() -> None:
    assert SearchFailedException().details == {}
    exc = SearchFailedException("no response")
    assert exc.error_code == "SEARCH_FAILED"
    assert exc.details == {"reason": "no response"}


def test_provider_exception_carries_code_and_status() -> None:
    exc = ProviderException("http_429", "Too Many Requests", 429)
    assert exc.error_code == "PROVIDER_ERROR"
    assert exc.code == "http_429"
    assert exc.details == {"code": "http_429", "reason": "Too Many Requests", "status_code": 429}
    assert exc.message == "Provider error: http_429: Too Many Requests"


def test_provider_exception_without_status() -> None:
    exc = ProviderException("network", "unreachable")
    assert "status_code" not in exc.details


@pytest.mark.parametrize(
    "exc",
    [
        DebouncedException(),
        DuplicateQueryException("q"),
        InvalidCriteriaException(0, 5),
        SearchFailedException(),
        ProviderException("timeout", "slow"),
    ],
)
def test_all_derive_from_base(exc: LocationSearchException) -> None:
    assert isinstance(exc, LocationSearchException)
