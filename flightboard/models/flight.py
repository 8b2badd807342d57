"""
Normalized flight board records.

AeroDataBox board entry format (relevant fields only):
    number                      - Flight number, e.g. "AA 100"
    status                      - Expected, Scheduled, Active, Landed, ...
    airline.name                - Operating airline
    aircraft.model              - e.g. "Boeing 777-300ER"
    movement.airport.iata/icao  - The other end of the flight
    movement.airport.name
    movement.scheduledTime.local - "2024-05-01 14:30+01:00"
    movement.terminal
    movement.gate
"""

import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, asdict, replace
from datetime import datetime
from typing import Optional, Any

logger = logging.getLogger(__name__)

NO_TIME = '--:--'

# Raw upstream status -> display status
STATUS_MAP = {
    'Expected': 'On Time',
    'Scheduled': 'On Time',
    'Active': 'Boarding',
    'Landed': 'Departed',
    'Departed': 'Departed',
    'Cancelled': 'Cancelled',
    'Delayed': 'Delayed',
}


def format_local_time(value: Optional[str]) -> str:
    """
    Extract 'HH:MM' from an ISO timestamp as written (airport local time).

    Returns the '--:--' sentinel when the value is absent or unparseable.
    """
    if not value or not isinstance(value, str):
        return NO_TIME
    try:
        parsed = datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
    except ValueError:
        return NO_TIME
    return parsed.strftime('%H:%M')


def _text(value: Any) -> Optional[str]:
    """Render a scalar upstream value as text, None when empty."""
    if value is None or value == '':
        return None
    if isinstance(value, (Mapping, list)):
        raise TypeError(f'expected scalar, got {type(value).__name__}')
    return str(value)


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return a nested mapping, {} when missing, TypeError when malformed."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise TypeError(f'{key} is {type(value).__name__}, expected mapping')
    return value


@dataclass(frozen=True)
class FlightRecord:
    """
    A single departure or arrival, normalized for display.

    Every field is always populated; missing upstream values fall back
    to display placeholders ('N/A', 'Unknown', 'TBA', '--:--').
    """
    id: str
    flight_number: str
    airline: str
    destination: str
    destination_name: str
    scheduled_time: str
    gate: str
    terminal: str
    status: str
    aircraft: str

    # Populated by the flight locator only
    origin_code: Optional[str] = None
    origin_name: Optional[str] = None
    arrival_time: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> Optional['FlightRecord']:
        """
        Normalize a raw AeroDataBox board entry.

        Never raises. Returns None if the record is malformed.
        """
        if not isinstance(raw, Mapping):
            return None

        try:
            movement = _section(raw, 'movement')
            airport = _section(movement, 'airport')
            scheduled = _section(movement, 'scheduledTime')
            airline = _section(raw, 'airline')
            aircraft = _section(raw, 'aircraft')

            terminal = _text(movement.get('terminal'))
            gate = _text(movement.get('gate'))
            if not gate:
                gate = f'T{terminal}' if terminal else 'TBA'

            raw_status = _text(raw.get('status'))
            number = _text(raw.get('number'))

            return cls(
                id=number or f'FL{uuid.uuid4().hex[:6].upper()}',
                flight_number=number or 'N/A',
                airline=_text(airline.get('name')) or 'Unknown',
                destination=_text(airport.get('iata')) or _text(airport.get('icao')) or 'N/A',
                destination_name=_text(airport.get('name')) or 'Unknown',
                scheduled_time=format_local_time(scheduled.get('local')),
                gate=gate,
                terminal=terminal or 'N/A',
                status=STATUS_MAP.get(raw_status) or raw_status or 'On Time',
                aircraft=_text(aircraft.get('model')) or 'N/A',
            )
        except (TypeError, AttributeError) as e:
            logger.warning(f'Dropping malformed flight record: {e}')
            return None

    def located_at(
        self,
        origin_code: str,
        origin_name: str,
        arrival_time: str,
    ) -> 'FlightRecord':
        """Return a copy annotated with origin and estimated arrival."""
        return replace(
            self,
            origin_code=origin_code,
            origin_name=origin_name,
            arrival_time=arrival_time,
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        data = asdict(self)
        if self.origin_code is None:
            for key in ('origin_code', 'origin_name', 'arrival_time'):
                data.pop(key)
        return data
