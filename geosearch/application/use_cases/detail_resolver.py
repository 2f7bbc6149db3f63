"""Resolve a selected search result into a full address record."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from geosearch.application.interfaces.provider import DetailResponse, ProviderError
from geosearch.application.mappers import to_detail_record
from geosearch.domain.entities import DetailRecord, SearchResult
from geosearch.domain.exceptions import (
    LocationSearchException,
    ProviderException,
    SearchFailedException,
)
from geosearch.shared.telemetry import get_logger, traced
from geosearch.shared.utils.callbacks import OneShotBridge

if TYPE_CHECKING:
    from geosearch.application.interfaces.provider import ISearchProvider

logger = get_logger(__name__)


def detail_query(result: SearchResult) -> str:
    """Natural-language query for a result: title and subtitle joined by a space."""
    return f"{result.title} {result.subtitle}".strip()


class DetailResolver:
    """One-shot detail lookup for a search result. Results are not cached."""

    def __init__(self, provider: "ISearchProvider") -> None:
        self.provider = provider

    @traced("detail_resolver.resolve")
    async def resolve(self, result: SearchResult) -> DetailRecord | None:
        """Look up result and return its first matching place.

        Returns:
            DetailRecord for the first place, or None when the provider
            succeeded with zero places.

        Raises:
            ProviderException: Provider reported a structured error.
            SearchFailedException: Provider failed otherwise, or answered with
                neither an error nor a response.
        """
        query = detail_query(result)
        bridge: OneShotBridge[tuple[DetailResponse | None, BaseException | None]] = (
            OneShotBridge()
        )

        def on_complete(
            response: DetailResponse | None, error: BaseException | None
        ) -> None:
            if not bridge.resolve((response, error)):
                logger.debug("Dropping repeated detail callback for %s", result)

        lookup = self.provider.make_detail_lookup()
        lookup.start(query, on_complete)
        try:
            response, error = await bridge.wait()
        except asyncio.CancelledError:
            lookup.cancel()
            raise

        if error is not None:
            if isinstance(error, ProviderError):
                logger.error("Provider error resolving %s: %s", result, error)
                raise ProviderException(
                    error.code, error.message, error.status_code
                ) from error
            if isinstance(error, LocationSearchException):
                raise error
            logger.error("Detail lookup failed for %s: %s", result, error)
            raise SearchFailedException(str(error)) from error
        if response is None:
            # Both missing should not happen; treat it as a failure, not "no match".
            logger.error("Error was None and response is None: %s", result)
            raise SearchFailedException("provider returned neither error nor response")
        if not response.items:
            logger.debug("No places found for %s", result)
            return None
        try:
            return to_detail_record(response.items[0])
        except ValueError as e:
            logger.error("Invalid place for %s: %s", result, e)
            raise SearchFailedException(str(e)) from e
