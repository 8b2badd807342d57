"""
FlightBoard Backend Package.

Flight information dashboard backend built with Flask and requests on top
of the AeroDataBox aviation API.

Modules:
    api/         REST endpoints for boards, airport search, routes and usage
    models/      Normalized records (FlightRecord, AirportRecord, RouteEstimate, Result)
    ingestion/   AeroDataBox HTTP client with timeouts and usage tracking
    services/    Cache-then-fetch orchestration and the flight-number locator
    cache.py     Namespaced in-memory TTL cache
    config.py    Centralized configuration from environment variables
    geo.py       Great-circle distance helpers
    usage.py     API call counter against a soft usage limit
"""

__version__ = '1.0.0'
