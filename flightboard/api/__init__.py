"""
API module for FlightBoard.

Provides REST endpoints for:
- Departure/arrival boards and flight lookup
- Airport search and route estimates
- API usage and cache control
"""

from flightboard.api.flights import flights_bp
from flightboard.api.airports import airports_bp
from flightboard.api.metrics import metrics_bp

__all__ = ['flights_bp', 'airports_bp', 'metrics_bp']
