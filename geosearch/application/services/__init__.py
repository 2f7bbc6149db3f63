"""Application services: provider session adapter."""

from geosearch.application.services.provider_session import ProviderSession

__all__ = ["ProviderSession"]
