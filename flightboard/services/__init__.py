"""
Flight data services.

Cache-then-fetch access to AeroDataBox boards, airport search and route
estimates, plus the flight-number locator built on top of them.
"""

from flightboard.services.flight_data import FlightDataService
from flightboard.services.flight_locator import FlightLocator

__all__ = ['FlightDataService', 'FlightLocator']
