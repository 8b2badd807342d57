"""
Data models for FlightBoard.

Normalized, immutable records produced from raw AeroDataBox payloads,
plus the tagged Result type returned by the services.
"""

from flightboard.models.flight import FlightRecord, STATUS_MAP, NO_TIME, format_local_time
from flightboard.models.airport import AirportRecord
from flightboard.models.route import RouteEstimate
from flightboard.models.result import Result

__all__ = [
    'FlightRecord',
    'STATUS_MAP',
    'NO_TIME',
    'format_local_time',
    'AirportRecord',
    'RouteEstimate',
    'Result',
]
