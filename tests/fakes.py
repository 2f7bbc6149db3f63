"""Scriptable fake search provider for coordinator and resolver tests.

Completers and lookups never answer on their own unless the provider was
given canned responses; tests drive them with succeed()/fail()/respond().
"""

from __future__ import annotations

import asyncio

from geosearch.application.interfaces.provider import (
    CompletionRecord,
    DetailCallback,
    DetailResponse,
    ISearchCompleterDelegate,
)


class FakeCompleter:
    """Completer that records its lifecycle and answers when told to."""

    def __init__(self, canned: dict[str, list[CompletionRecord]]) -> None:
        self.delegate: ISearchCompleterDelegate | None = None
        self.query: str | None = None
        self.cancelled = False
        self._canned = canned
        self._results: list[CompletionRecord] = []

    @property
    def results(self) -> list[CompletionRecord]:
        return list(self._results)

    def start(self, query_fragment: str) -> None:
        self.query = query_fragment
        if query_fragment in self._canned:
            records = self._canned[query_fragment]
            asyncio.get_running_loop().call_soon(self.succeed, records)

    def cancel(self) -> None:
        self.cancelled = True

    def succeed(self, records: list[CompletionRecord]) -> None:
        self._results = list(records)
        if self.delegate is not None:
            self.delegate.completer_did_update_results(self)

    def fail(self, error: BaseException) -> None:
        if self.delegate is not None:
            self.delegate.completer_did_fail(self, error)


class FakeDetailLookup:
    """Detail lookup that records its query and answers when told to."""

    def __init__(self) -> None:
        self.query: str | None = None
        self.cancelled = False
        self._callback: DetailCallback | None = None

    def start(self, query: str, callback: DetailCallback) -> None:
        self.query = query
        self._callback = callback

    def cancel(self) -> None:
        self.cancelled = True

    def respond(
        self,
        response: DetailResponse | None = None,
        error: BaseException | None = None,
    ) -> None:
        assert self._callback is not None, "lookup was not started"
        self._callback(response, error)


class FakeSearchProvider:
    """ISearchProvider handing out fresh fakes and remembering each one."""

    def __init__(self, canned: dict[str, list[CompletionRecord]] | None = None) -> None:
        self.canned = canned or {}
        self.completers: list[FakeCompleter] = []
        self.lookups: list[FakeDetailLookup] = []
        self.closed = False

    def make_completer(self) -> FakeCompleter:
        completer = FakeCompleter(self.canned)
        self.completers.append(completer)
        return completer

    def make_detail_lookup(self) -> FakeDetailLookup:
        lookup = FakeDetailLookup()
        self.lookups.append(lookup)
        return lookup

    async def aclose(self) -> None:
        self.closed = True

    @property
    def queries(self) -> list[str | None]:
        return [c.query for c in self.completers]


async def wait_until(predicate, timeout: float = 1.0) -> None:
    """Yield to the loop until predicate() is true."""
    async with asyncio.timeout(timeout):
        while not predicate():
            await asyncio.sleep(0.001)
