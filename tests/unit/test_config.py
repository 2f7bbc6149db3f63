"""Settings tests: defaults, GEOSEARCH_ environment, range validation."""

import pytest
from pydantic import ValidationError

from geosearch.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.min_query_length == 5
    assert settings.debounce_delay_ms == 300
    assert settings.debounce_delay == 0.3
    assert settings.provider_backend == "nominatim"
    assert settings.telemetry_enabled is False


def test_environment_uses_prefix(monkeypatch) -> None:
    monkeypatch.setenv("GEOSEARCH_MIN_QUERY_LENGTH", "3")
    monkeypatch.setenv("GEOSEARCH_DEBOUNCE_DELAY_MS", "150")
    monkeypatch.setenv("MIN_QUERY_LENGTH", "9")
    settings = get_settings()
    assert settings.min_query_length == 3
    assert settings.debounce_delay == 0.15


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("min_query_length", -1),
        ("debounce_delay_ms", -5),
        ("result_limit", 0),
        ("http_timeout_seconds", 0),
        ("telemetry_sample_rate", 1.5),
        ("provider_backend", "mapkit"),
    ],
)
def test_invalid_values_rejected(field: str, value) -> None:
    with pytest.raises(ValidationError, match=field):
        Settings(**{field: value})


def test_zero_delay_and_length_allowed() -> None:
    settings = Settings(min_query_length=0, debounce_delay_ms=0)
    assert settings.debounce_delay == 0.0
