"""Search provider factory: creates the Nominatim or in-memory backend from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geosearch.application.interfaces.provider import ISearchProvider

if TYPE_CHECKING:
    from geosearch.core.config import Settings


class ProviderFactory:
    """Factory for search provider instances based on configuration."""

    @staticmethod
    def create_provider(settings: "Settings | None" = None) -> ISearchProvider:
        """Create a search provider from settings.

        Args:
            settings: Settings; if None, uses get_settings().

        Returns:
            NominatimSearchProvider or InMemorySearchProvider.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from geosearch.core.config import get_settings

        s = settings or get_settings()
        backend = s.provider_backend.lower()

        if backend == "nominatim":
            from geosearch.infrastructure.external.provider.nominatim import (
                NominatimSearchProvider,
            )

            if not s.nominatim_base_url:
                raise ValueError("NOMINATIM_BASE_URL required for nominatim backend")
            return NominatimSearchProvider(
                base_url=s.nominatim_base_url,
                user_agent=s.nominatim_user_agent,
                email=s.nominatim_email,
                accept_language=s.accept_language,
                limit=s.result_limit,
                timeout=s.http_timeout_seconds,
            )
        if backend == "memory":
            from geosearch.infrastructure.external.provider.memory import (
                InMemorySearchProvider,
            )

            if s.memory_catalogue_path:
                return InMemorySearchProvider.from_json(
                    s.memory_catalogue_path, limit=s.result_limit
                )
            return InMemorySearchProvider(limit=s.result_limit)
        raise ValueError(
            f"Unknown provider backend: {backend}. Supported: 'nominatim', 'memory'"
        )
