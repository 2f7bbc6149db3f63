"""In-process catalogue provider for development, demos and tests.

Behaves like a remote completer: results arrive through the delegate on a
later loop iteration (after an optional latency), and cancel() stops a
pending delivery.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from geosearch.application.interfaces.provider import (
    CompletionRecord,
    DetailCallback,
    DetailResponse,
    ISearchCompleterDelegate,
    PlaceRecord,
)
from geosearch.infrastructure.external.provider._matching import (
    highlight_ranges,
    matches,
)
from geosearch.shared.telemetry import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CatalogueEntry:
    """A suggestion (title, subtitle) and the place it resolves to."""

    title: str
    subtitle: str
    place: PlaceRecord

    @property
    def query(self) -> str:
        return f"{self.title} {self.subtitle}".strip()


class InMemorySearchProvider:
    """ISearchProvider over a fixed list of catalogue entries."""

    def __init__(
        self,
        entries: Iterable[CatalogueEntry] = (),
        *,
        latency: float = 0.0,
        limit: int = 10,
    ) -> None:
        self.entries = list(entries)
        self.latency = latency
        self.limit = limit

    @classmethod
    def from_json(cls, path: str | Path, **kwargs) -> "InMemorySearchProvider":
        """Load entries from a JSON array of objects.

        Each object needs title, latitude and longitude; subtitle and the
        PlaceRecord address fields are optional.

        Raises:
            ValueError: If the file is not a JSON array or an entry is incomplete.
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"Catalogue must be a JSON array: {path}")
        entries = []
        for item in raw:
            try:
                fields = dict(item)
                title = fields.pop("title")
                subtitle = fields.pop("subtitle", "")
                place = PlaceRecord(**fields)
            except (KeyError, TypeError) as e:
                raise ValueError(f"Invalid catalogue entry {item!r}: {e}") from e
            entries.append(CatalogueEntry(title=title, subtitle=subtitle, place=place))
        logger.info("Loaded %d catalogue entries from %s", len(entries), path)
        return cls(entries, **kwargs)

    def make_completer(self) -> "InMemoryCompleter":
        return InMemoryCompleter(self)

    def make_detail_lookup(self) -> "InMemoryDetailLookup":
        return InMemoryDetailLookup(self)

    async def aclose(self) -> None:
        return None

    def complete(self, query: str) -> list[CompletionRecord]:
        """Entries whose title or subtitle contain query, as completions."""
        return [
            CompletionRecord(
                title=entry.title,
                subtitle=entry.subtitle,
                title_highlight_ranges=highlight_ranges(entry.title, query),
                subtitle_highlight_ranges=highlight_ranges(entry.subtitle, query),
            )
            for entry in self.entries
            if matches(query, entry.title, entry.subtitle)
        ][: self.limit]

    def lookup(self, query: str) -> tuple[PlaceRecord, ...]:
        """Places whose entry query equals query, then those that contain it."""
        needle = query.strip().casefold()
        exact = [e.place for e in self.entries if e.query.casefold() == needle]
        partial = [
            e.place
            for e in self.entries
            if e.query.casefold() != needle and matches(query, e.query)
        ]
        return tuple(exact + partial)


class InMemoryCompleter:
    """Completer that answers from the catalogue after the provider latency."""

    def __init__(self, provider: InMemorySearchProvider) -> None:
        self.delegate: ISearchCompleterDelegate | None = None
        self._provider = provider
        self._results: list[CompletionRecord] = []
        self._handle: asyncio.TimerHandle | None = None

    @property
    def results(self) -> list[CompletionRecord]:
        return list(self._results)

    def start(self, query_fragment: str) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._provider.latency, self._deliver, query_fragment)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _deliver(self, query: str) -> None:
        self._handle = None
        self._results = self._provider.complete(query)
        if self.delegate is not None:
            self.delegate.completer_did_update_results(self)


class InMemoryDetailLookup:
    """Detail lookup answering from the catalogue after the provider latency."""

    def __init__(self, provider: InMemorySearchProvider) -> None:
        self._provider = provider
        self._handle: asyncio.TimerHandle | None = None

    def start(self, query: str, callback: DetailCallback) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self._provider.latency, self._deliver, query, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _deliver(self, query: str, callback: DetailCallback) -> None:
        self._handle = None
        callback(DetailResponse(items=self._provider.lookup(query)), None)
