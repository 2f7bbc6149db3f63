"""Search-as-you-type coordination over a single-operation search provider.

SearchCoordinator is meant to be called on every keystroke. It debounces
calls, rejects duplicate and too-short queries before touching the
provider, keeps at most one provider call in flight, and gives every call
exactly one outcome: results, an empty list, a domain exception, or
asyncio.CancelledError.

All state is confined to the event loop the coordinator is first used on;
concurrent callers are serialized by the loop, not by locks.

Example:
    coordinator = SearchCoordinator(provider)
    try:
        results = await coordinator.search("Coffee shops")
        if results:
            detail = await coordinator.resolve_detail(results[0])
    except DebouncedException:
        pass  # a newer keystroke superseded this one
    except ProviderException as e:
        ...  # e.code: network, timeout, http_429, ...
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from geosearch.application.interfaces.provider import ProviderError
from geosearch.application.services.provider_session import ProviderSession
from geosearch.application.use_cases.detail_resolver import DetailResolver
from geosearch.domain.entities import DetailRecord, SearchResult
from geosearch.domain.exceptions import (
    DebouncedException,
    DuplicateQueryException,
    InvalidCriteriaException,
    LocationSearchException,
    ProviderException,
    SearchFailedException,
)
from geosearch.shared.telemetry import add_span_attributes, get_logger, traced

if TYPE_CHECKING:
    from geosearch.application.interfaces.provider import ISearchProvider
    from geosearch.core.config import Settings

logger = get_logger(__name__)

DEFAULT_MIN_QUERY_LENGTH = 5
DEFAULT_DEBOUNCE_DELAY = 0.3


class _DebounceWait:
    """Pending debounce delay: True when it elapses, False when superseded."""

    def __init__(self, delay: float) -> None:
        loop = asyncio.get_running_loop()
        self._future: asyncio.Future[bool] = loop.create_future()
        self._timer = loop.call_later(delay, self._finish, True)

    def _finish(self, elapsed: bool) -> None:
        if not self._future.done():
            self._future.set_result(elapsed)

    def supersede(self) -> None:
        self._timer.cancel()
        self._finish(False)

    async def wait(self) -> bool:
        try:
            return await self._future
        finally:
            self._timer.cancel()


class SearchCoordinator:
    """Debounced, preempting location search over an ISearchProvider.

    Each provider call runs in a fresh ProviderSession with its own
    completer, so a callback can only ever reach the call that started it.
    """

    def __init__(
        self,
        provider: "ISearchProvider",
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
    ) -> None:
        """Initialize the coordinator.

        Args:
            provider: Source of completers and detail lookups.
            min_query_length: Characters required before the provider is called.
            debounce_delay: Seconds to wait for typing to pause.

        Raises:
            ValueError: If min_query_length or debounce_delay is negative.
        """
        if min_query_length < 0:
            raise ValueError(f"min_query_length must be >= 0, got: {min_query_length}")
        if debounce_delay < 0:
            raise ValueError(f"debounce_delay must be >= 0, got: {debounce_delay}")
        self.provider = provider
        self.min_query_length = min_query_length
        self.debounce_delay = debounce_delay
        self._detail_resolver = DetailResolver(provider)
        self._last_query: str | None = None
        self._results: list[SearchResult] = []
        self._search_task: asyncio.Task[list[SearchResult]] | None = None
        self._debounce: _DebounceWait | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @classmethod
    def from_settings(
        cls,
        settings: "Settings | None" = None,
        provider: "ISearchProvider | None" = None,
    ) -> "SearchCoordinator":
        """Build a coordinator from settings.

        Args:
            settings: Settings; if None, uses get_settings().
            provider: Provider to use; if None, one is created by ProviderFactory.
        """
        from geosearch.core.config import get_settings

        s = settings or get_settings()
        if provider is None:
            from geosearch.infrastructure.external.provider.factory import (
                ProviderFactory,
            )

            provider = ProviderFactory.create_provider(s)
        return cls(
            provider,
            min_query_length=s.min_query_length,
            debounce_delay=s.debounce_delay,
        )

    @property
    def last_query(self) -> str | None:
        """Most recent query that passed debounce and duplicate checks."""
        return self._last_query

    @property
    def current_results(self) -> list[SearchResult]:
        """Results of the latest successful search ([] after clearing)."""
        return list(self._results)

    def _bind_loop(self) -> None:
        loop = asyncio.get_running_loop()
        if self._loop is None:
            self._loop = loop
        elif self._loop is not loop:
            raise RuntimeError("SearchCoordinator used from more than one event loop")

    def _cancel_active_search(self) -> None:
        task = self._search_task
        if task is not None and not task.done():
            logger.debug("Cancelling in-flight search")
            task.cancel()
        self._search_task = None

    @traced("search_coordinator.search")
    async def search(self, text: str) -> list[SearchResult]:
        """Search for locations matching text.

        Call on every change of the text field. Only the latest call survives
        the debounce delay, and starting a provider call cancels the previous
        one.

        Returns:
            Matching results; [] for empty text (which also clears
            current_results).

        Raises:
            DebouncedException: A newer call arrived during the debounce delay.
            DuplicateQueryException: text equals the previous query.
            InvalidCriteriaException: text is shorter than min_query_length.
            ProviderException: Provider reported a structured error.
            SearchFailedException: Provider failed otherwise.
            asyncio.CancelledError: This call was cancelled or preempted by a
                newer search; its results are never stored.
        """
        self._bind_loop()
        add_span_attributes(query_length=len(text))

        if self._debounce is not None:
            self._debounce.supersede()
        debounce = _DebounceWait(self.debounce_delay)
        self._debounce = debounce
        logger.debug("Starting debounce")
        try:
            elapsed = await debounce.wait()
        finally:
            if self._debounce is debounce:
                self._debounce = None
        if not elapsed:
            logger.debug("Debounce superseded: %s", text)
            raise DebouncedException()
        logger.debug("Completed debounce, starting search")

        if text == self._last_query:
            logger.debug("Query hasn't changed, not searching")
            raise DuplicateQueryException(text)
        self._last_query = text

        if not text:
            logger.debug("Query is empty, clearing results")
            self._cancel_active_search()
            self._results = []
            return []

        if len(text) < self.min_query_length:
            logger.debug("Not enough characters to search")
            raise InvalidCriteriaException(len(text), self.min_query_length)

        self._cancel_active_search()

        session = ProviderSession(self.provider.make_completer())
        task = asyncio.create_task(session.run(text))
        self._search_task = task
        try:
            results = await task
            if self._search_task is not task:
                # Finished, but a newer search started before we resumed.
                logger.debug("Discarding superseded results for %s", text)
                raise asyncio.CancelledError()
        except ProviderError as e:
            logger.error("Failed to search %s: %s", text, e)
            raise ProviderException(e.code, e.message, e.status_code) from e
        except (asyncio.CancelledError, LocationSearchException):
            raise
        except Exception as e:
            logger.error("Failed to search %s: %s", text, e)
            raise SearchFailedException(str(e)) from e
        finally:
            if self._search_task is task:
                self._search_task = None

        self._results = results
        return list(results)

    async def resolve_detail(self, result: SearchResult) -> DetailRecord | None:
        """Resolve result into a full address record.

        Returns:
            DetailRecord, or None when the provider found no place.

        Raises:
            ProviderException: Provider reported a structured error.
            SearchFailedException: Provider failed otherwise, or returned
                neither an error nor a response.
        """
        return await self._detail_resolver.resolve(result)

    def reset(self) -> None:
        """Drop all state: supersede the pending debounce, cancel the
        in-flight search, and forget the last query and results.

        After reset the same text can be searched again (e.g. to retry after
        a provider failure).
        """
        if self._debounce is not None:
            self._debounce.supersede()
            self._debounce = None
        self._cancel_active_search()
        self._last_query = None
        self._results = []
