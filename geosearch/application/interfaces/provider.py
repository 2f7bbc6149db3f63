"""Search provider interfaces (ports) and provider-native records.

The provider is a callback/delegate style API: a completer instance has a
single delegate slot and reports results through it, and a detail lookup
reports through a one-shot callback. Implementations live under
geosearch.infrastructure.external.provider.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class CompletionRecord:
    """Provider-native completion suggestion.

    Highlight ranges are (offset, length) pairs in UTF-16 code units.
    """

    title: str
    subtitle: str
    title_highlight_ranges: tuple[tuple[int, int], ...] = ()
    subtitle_highlight_ranges: tuple[tuple[int, int], ...] = ()


@dataclass(frozen=True)
class PlaceRecord:
    """Provider-native resolved place (coordinate plus address components)."""

    latitude: float
    longitude: float
    name: str | None = None
    thoroughfare: str | None = None
    sub_thoroughfare: str | None = None
    locality: str | None = None
    sub_locality: str | None = None
    administrative_area: str | None = None
    sub_administrative_area: str | None = None
    postal_code: str | None = None
    iso_country_code: str | None = None
    country: str | None = None


@dataclass(frozen=True)
class DetailResponse:
    """Successful detail lookup: zero or more candidate places, best first."""

    items: tuple[PlaceRecord, ...] = field(default_factory=tuple)


class ProviderError(Exception):
    """Structured failure reported by a provider (network, quota, HTTP status)."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"{code}: {message}")


DetailCallback = Callable[[DetailResponse | None, BaseException | None], None]


class ISearchCompleterDelegate(Protocol):
    """Receives the outcome of a completer search."""

    def completer_did_update_results(self, completer: ISearchCompleter) -> None:
        """Called when completer.results holds a fresh batch."""

    def completer_did_fail(
        self, completer: ISearchCompleter, error: BaseException
    ) -> None:
        """Called when the search failed."""


class ISearchCompleter(Protocol):
    """Stateful search-as-you-type completer with a single delegate slot.

    start() returns immediately; the outcome arrives later through the
    delegate, possibly on another thread. Implementations give no guarantee
    that the delegate is called only once per start().
    """

    delegate: ISearchCompleterDelegate | None

    @property
    def results(self) -> list[CompletionRecord]:
        """Latest completions."""
        ...

    def start(self, query_fragment: str) -> None:
        """Begin searching for query_fragment."""
        ...

    def cancel(self) -> None:
        """Stop any in-flight work. No delegate call is required afterwards."""
        ...


class IDetailLookup(Protocol):
    """One-shot natural-language place lookup."""

    def start(self, query: str, callback: DetailCallback) -> None:
        """Begin the lookup; callback receives (response, error)."""
        ...

    def cancel(self) -> None:
        """Stop the lookup if it is still running."""
        ...


class ISearchProvider(Protocol):
    """Factory for single-use completers and detail lookups."""

    def make_completer(self) -> ISearchCompleter:
        """Return a new completer instance."""
        ...

    def make_detail_lookup(self) -> IDetailLookup:
        """Return a new detail lookup instance."""
        ...

    async def aclose(self) -> None:
        """Release provider resources (HTTP clients)."""
        ...
