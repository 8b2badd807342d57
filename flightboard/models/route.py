"""Synthetic route estimates."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class RouteEstimate:
    """
    Direct route approximation between two airports.

    No route-network data is queried: distance is great-circle and
    duration assumes a constant cruise speed.
    """
    origin: str
    destination: str
    distance_km: int
    duration_minutes: int
    type: str = 'Direct'
    stops: int = 0
    airlines: List[str] = field(default_factory=lambda: ['Multiple carriers'])

    @property
    def path(self) -> str:
        return f'{self.origin} → {self.destination}'

    def to_dict(self) -> dict:
        return {
            'type': self.type,
            'path': self.path,
            'distance_km': self.distance_km,
            'duration_minutes': self.duration_minutes,
            'stops': self.stops,
            'airlines': list(self.airlines),
        }
