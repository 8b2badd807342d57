"""Normalized airport search results."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Any


def _coordinate(value: Any) -> float:
    """Coerce a coordinate to float, 0.0 when absent or malformed."""
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class AirportRecord:
    """Airport from a text search, keyed by IATA code."""
    code: str
    name: Optional[str]
    city: str
    country: Optional[str]
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def from_raw(cls, raw: Any) -> Optional['AirportRecord']:
        """
        Parse an AeroDataBox airport search item.

        Returns None for items without an IATA code.
        """
        if not isinstance(raw, Mapping) or not raw.get('iata'):
            return None

        location = raw.get('location')
        if not isinstance(location, Mapping):
            location = {}

        return cls(
            code=raw['iata'],
            name=raw.get('name'),
            city=raw.get('municipalityName') or raw.get('shortName') or 'Unknown',
            country=raw.get('countryCode'),
            latitude=_coordinate(location.get('lat')),
            longitude=_coordinate(location.get('lon')),
        )

    @property
    def coordinates(self):
        return (self.latitude, self.longitude)

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'name': self.name,
            'city': self.city,
            'country': self.country,
            'coordinates': {
                'lat': self.latitude,
                'lon': self.longitude,
            },
        }
