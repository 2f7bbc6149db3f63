"""Detail record domain entity.

A resolved place for a selected search result. Real-world address data is
frequently incomplete, so everything except the coordinate is optional.
"""

from dataclasses import dataclass

from geosearch.domain.value_objects.core import Coordinate


@dataclass(frozen=True)
class DetailRecord:
    """Resolved address and coordinate.

    Holds no reference to the SearchResult it was resolved from. Equality
    compares coordinates exactly.

    Attributes:
        coordinate: Location of the place.
        name: Point of interest or landmark name.
        street: Street name.
        sub_street: Building or unit number.
        city: City.
        sub_city: Neighborhood or district within the city.
        region: State or province.
        sub_region: County within the region.
        postal_code: Postal (ZIP) code.
        country_code: ISO 3166-1 alpha-2 country code.
        country_name: Full country name.
    """

    coordinate: Coordinate
    name: str | None = None
    street: str | None = None
    sub_street: str | None = None
    city: str | None = None
    sub_city: str | None = None
    region: str | None = None
    sub_region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    country_name: str | None = None

    def to_address_dict(self) -> dict[str, str | float | None]:
        """Return the record as a provider-style address dictionary."""
        return {
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
            "name": self.name,
            "thoroughfare": self.street,
            "subThoroughfare": self.sub_street,
            "locality": self.city,
            "subLocality": self.sub_city,
            "administrativeArea": self.region,
            "subAdministrativeArea": self.sub_region,
            "postalCode": self.postal_code,
            "countryCode": self.country_code,
            "country": self.country_name,
        }

    def region_bounds(self, span_degrees: float = 0.2) -> tuple[float, float, float, float]:
        """Bounding box centred on the coordinate, for map display.

        Args:
            span_degrees: Total latitude/longitude extent of the box.

        Returns:
            (south, west, north, east), clamped to valid coordinate ranges.

        Raises:
            ValueError: If span_degrees is negative.
        """
        if span_degrees < 0:
            raise ValueError(f"span_degrees must be >= 0, got: {span_degrees}")
        half = span_degrees / 2
        lat, lon = self.coordinate.latitude, self.coordinate.longitude
        return (
            max(lat - half, -90.0),
            max(lon - half, -180.0),
            min(lat + half, 90.0),
            min(lon + half, 180.0),
        )
