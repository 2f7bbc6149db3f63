"""OpenStreetMap Nominatim provider over httpx.

Completer and detail lookup both use GET /search (format=jsonv2,
addressdetails=1). HTTP and transport failures are reported as
ProviderError with codes: timeout, network, decode, http_<status>.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from geosearch.application.interfaces.provider import (
    CompletionRecord,
    DetailCallback,
    DetailResponse,
    ISearchCompleterDelegate,
    PlaceRecord,
    ProviderError,
)
from geosearch.infrastructure.external.provider._matching import highlight_ranges
from geosearch.shared.telemetry import get_logger

logger = get_logger(__name__)

_LOCALITY_KEYS = ("city", "town", "village", "hamlet", "municipality")
_SUB_LOCALITY_KEYS = ("suburb", "neighbourhood", "quarter", "city_district")
_STREET_KEYS = ("road", "pedestrian", "footway", "street")


def _first(address: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = address.get(key)
        if value:
            return str(value)
    return None


def completion_from_hit(hit: dict[str, Any], query: str) -> CompletionRecord:
    """Split display_name into title (first component) and subtitle (the rest)."""
    parts = [p.strip() for p in str(hit.get("display_name", "")).split(",")]
    title = parts[0] if parts else ""
    subtitle = ", ".join(p for p in parts[1:] if p)
    return CompletionRecord(
        title=title,
        subtitle=subtitle,
        title_highlight_ranges=highlight_ranges(title, query),
        subtitle_highlight_ranges=highlight_ranges(subtitle, query),
    )


def place_from_hit(hit: dict[str, Any]) -> PlaceRecord:
    """Map a jsonv2 hit with addressdetails into a PlaceRecord.

    Raises:
        ProviderError: If lat/lon are missing or not numbers.
    """
    try:
        latitude = float(hit["lat"])
        longitude = float(hit["lon"])
    except (KeyError, TypeError, ValueError) as e:
        raise ProviderError("decode", f"Invalid coordinate in response: {e}") from e
    address = hit.get("address") or {}
    country_code = address.get("country_code")
    return PlaceRecord(
        latitude=latitude,
        longitude=longitude,
        name=hit.get("name") or None,
        thoroughfare=_first(address, _STREET_KEYS),
        sub_thoroughfare=address.get("house_number"),
        locality=_first(address, _LOCALITY_KEYS),
        sub_locality=_first(address, _SUB_LOCALITY_KEYS),
        administrative_area=address.get("state"),
        sub_administrative_area=address.get("county"),
        postal_code=address.get("postcode"),
        iso_country_code=country_code.upper() if country_code else None,
        country=address.get("country"),
    )


class NominatimSearchProvider:
    """ISearchProvider backed by a Nominatim server.

    Pass http_client to share a connection pool; otherwise the provider
    owns a client and aclose() closes it.
    """

    def __init__(
        self,
        base_url: str = "https://nominatim.openstreetmap.org",
        user_agent: str = "geosearch/1.0",
        *,
        email: str | None = None,
        accept_language: str | None = None,
        limit: int = 10,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._search_url = f"{base_url.rstrip('/')}/search"
        self._headers = {"User-Agent": user_agent}
        self._email = email
        self._accept_language = accept_language
        self.limit = limit
        self._owns_client = http_client is None
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)

    def make_completer(self) -> "NominatimCompleter":
        return NominatimCompleter(self)

    def make_detail_lookup(self) -> "NominatimDetailLookup":
        return NominatimDetailLookup(self)

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._http.aclose()

    async def fetch(self, query: str, limit: int) -> list[dict[str, Any]]:
        """GET /search for query.

        Raises:
            ProviderError: Transport failure, non-200 status, or bad payload.
        """
        params: dict[str, Any] = {
            "q": query,
            "format": "jsonv2",
            "addressdetails": 1,
            "limit": limit,
        }
        if self._email:
            params["email"] = self._email
        if self._accept_language:
            params["accept-language"] = self._accept_language
        try:
            resp = await self._http.get(self._search_url, params=params, headers=self._headers)
        except httpx.TimeoutException as e:
            raise ProviderError("timeout", str(e) or "Request timed out") from e
        except httpx.HTTPError as e:
            raise ProviderError("network", str(e) or e.__class__.__name__) from e
        if resp.status_code != 200:
            raise ProviderError(
                f"http_{resp.status_code}",
                resp.reason_phrase or "Unexpected status",
                resp.status_code,
            )
        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError("decode", f"Invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise ProviderError("decode", "Expected a JSON array of results")
        return data


class NominatimCompleter:
    """Completer running one Nominatim request at a time.

    start() replaces any running request. The delegate is called on the
    event loop the request runs on.
    """

    def __init__(self, provider: NominatimSearchProvider) -> None:
        self.delegate: ISearchCompleterDelegate | None = None
        self._provider = provider
        self._results: list[CompletionRecord] = []
        self._task: asyncio.Task[None] | None = None

    @property
    def results(self) -> list[CompletionRecord]:
        return list(self._results)

    def start(self, query_fragment: str) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(query_fragment))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, query: str) -> None:
        try:
            hits = await self._provider.fetch(query, self._provider.limit)
            self._results = [completion_from_hit(hit, query) for hit in hits]
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error("Nominatim search failed: %s", e)
            if self.delegate is not None:
                self.delegate.completer_did_fail(self, e)
            return
        if self.delegate is not None:
            self.delegate.completer_did_update_results(self)


class NominatimDetailLookup:
    """One-shot place lookup (first hit only)."""

    def __init__(self, provider: NominatimSearchProvider) -> None:
        self._provider = provider
        self._task: asyncio.Task[None] | None = None

    def start(self, query: str, callback: DetailCallback) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(query, callback))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, query: str, callback: DetailCallback) -> None:
        try:
            hits = await self._provider.fetch(query, 1)
            items = tuple(place_from_hit(hit) for hit in hits)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error("Nominatim lookup failed: %s", e)
            callback(None, e)
            return
        callback(DetailResponse(items=items), None)
