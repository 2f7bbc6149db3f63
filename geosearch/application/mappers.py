"""Conversions from provider-native records to domain entities."""

from geosearch.application.interfaces.provider import CompletionRecord, PlaceRecord
from geosearch.domain.entities import DetailRecord, SearchResult
from geosearch.domain.value_objects import Coordinate, HighlightSpan


def _first_span(ranges: tuple[tuple[int, int], ...]) -> HighlightSpan | None:
    return HighlightSpan.from_pair(ranges[0]) if ranges else None


def to_search_result(record: CompletionRecord) -> SearchResult:
    """Build a SearchResult from a provider completion (first highlight range only)."""
    return SearchResult(
        title=record.title,
        subtitle=record.subtitle,
        title_highlight=_first_span(record.title_highlight_ranges),
        subtitle_highlight=_first_span(record.subtitle_highlight_ranges),
    )


def to_detail_record(place: PlaceRecord) -> DetailRecord:
    """Build a DetailRecord from a provider place."""
    return DetailRecord(
        coordinate=Coordinate(latitude=place.latitude, longitude=place.longitude),
        name=place.name,
        street=place.thoroughfare,
        sub_street=place.sub_thoroughfare,
        city=place.locality,
        sub_city=place.sub_locality,
        region=place.administrative_area,
        sub_region=place.sub_administrative_area,
        postal_code=place.postal_code,
        country_code=place.iso_country_code,
        country_name=place.country,
    )
