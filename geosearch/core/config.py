"""Library configuration (settings and environment).

Single source of truth for coordinator and provider configuration. Uses
pydantic-settings with .env support; every variable is prefixed with
GEOSEARCH_ (e.g. GEOSEARCH_DEBOUNCE_DELAY_MS=150).
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env.

    All settings have defaults; validate_ranges rejects values the
    coordinator cannot work with (negative delays, non-positive limits,
    unknown provider backend).
    """

    # App
    app_name: str = "geosearch"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str | None = None

    # Coordinator
    min_query_length: int = 5
    debounce_delay_ms: int = 300

    # Provider: "nominatim" (OSM over HTTP) or "memory" (in-process catalogue)
    provider_backend: str = "nominatim"
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    # Nominatim usage policy requires an identifying User-Agent.
    nominatim_user_agent: str = "geosearch/1.0"
    nominatim_email: str | None = None
    accept_language: str | None = None
    # JSON catalogue for the memory backend (list of title/subtitle/place objects)
    memory_catalogue_path: str | None = None
    result_limit: int = 10
    http_timeout_seconds: float = 10.0

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_prefix="GEOSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_ranges(self) -> "Settings":
        """Validate numeric ranges and provider backend."""
        if self.min_query_length < 0:
            raise ValueError(
                f"min_query_length must be >= 0, got: {self.min_query_length}"
            )
        if self.debounce_delay_ms < 0:
            raise ValueError(
                f"debounce_delay_ms must be >= 0, got: {self.debounce_delay_ms}"
            )
        if self.result_limit <= 0:
            raise ValueError(f"result_limit must be > 0, got: {self.result_limit}")
        if self.http_timeout_seconds <= 0:
            raise ValueError(
                f"http_timeout_seconds must be > 0, got: {self.http_timeout_seconds}"
            )
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError(
                "telemetry_sample_rate must be between 0.0 and 1.0, "
                f"got: {self.telemetry_sample_rate}"
            )
        if self.provider_backend.lower() not in ("nominatim", "memory"):
            raise ValueError(
                f"Invalid provider_backend '{self.provider_backend}'. "
                "Must be one of: 'nominatim', 'memory'"
            )
        return self

    @property
    def debounce_delay(self) -> float:
        """Debounce delay in seconds."""
        return self.debounce_delay_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
