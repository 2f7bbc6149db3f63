"""Single-use adapter from a delegate-style completer to one awaitable search.

A completer has exactly one delegate slot. Sharing one completer between
concurrent searches would make it ambiguous which caller a callback belongs
to, so every logical search gets its own session wrapping its own completer,
and both are discarded afterwards.
"""

from __future__ import annotations

import asyncio

from geosearch.application.interfaces.provider import ISearchCompleter
from geosearch.application.mappers import to_search_result
from geosearch.domain.entities import SearchResult
from geosearch.shared.telemetry import add_span_attributes, get_logger, traced
from geosearch.shared.utils.callbacks import OneShotBridge

logger = get_logger(__name__)


class ProviderSession:
    """One completer, one pending result, one resolution.

    Acts as the completer's delegate. Only the first delegate callback
    resolves run(); repeats are dropped. Cancelling run() tells the completer
    to stop work and re-raises the cancellation.
    """

    def __init__(self, completer: ISearchCompleter) -> None:
        self._completer = completer
        self._bridge: OneShotBridge[list[SearchResult]] | None = None
        self._started = False

    # ISearchCompleterDelegate

    def completer_did_update_results(self, completer: ISearchCompleter) -> None:
        if self._bridge is None:
            return
        if self._bridge.fired:
            logger.debug("Dropping repeated completion callback")
            return
        try:
            results = [to_search_result(record) for record in completer.results]
        except Exception as e:
            logger.debug("Could not map completions: %s", e)
            self._bridge.fail(e)
            return
        if not self._bridge.resolve(results):
            logger.debug("Dropping repeated completion callback")

    def completer_did_fail(
        self, completer: ISearchCompleter, error: BaseException
    ) -> None:
        if self._bridge is None:
            return
        logger.debug("Completer failed: %s", error)
        if not self._bridge.fail(error):
            logger.debug("Dropping repeated failure callback")

    @traced("provider_session.run")
    async def run(self, query: str) -> list[SearchResult]:
        """Search query on the wrapped completer and wait for its single outcome.

        Raises:
            RuntimeError: If the session was already used.
            asyncio.CancelledError: If cancelled; the completer is cancelled too.
            Exception: Whatever error the provider reported, unchanged.
        """
        if self._started:
            raise RuntimeError("ProviderSession is single-use")
        self._started = True
        add_span_attributes(query_length=len(query))
        self._bridge = OneShotBridge()
        self._completer.delegate = self
        try:
            logger.debug("Searching: %s", query)
            self._completer.start(query)
            results = await self._bridge.wait()
        except asyncio.CancelledError:
            logger.debug("Search cancelled, stopping completer: %s", query)
            self._completer.cancel()
            raise
        finally:
            self._completer.delegate = None
        logger.debug("Successfully searched %s (%d results)", query, len(results))
        return results
