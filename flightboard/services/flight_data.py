"""
Flight data service - cache-then-fetch access to boards, airports and routes.

Wraps the AeroDataBox client with:
- A namespaced TTL cache to stay within the API plan's call budget
- Normalization of raw payloads into FlightRecord / AirportRecord
- Tagged Result values instead of exceptions at the public boundary

Failure kinds:
- validation: bad input, rejected before any network call
- transport:  timeout, network error, non-2xx status
- empty:      well-formed response with nothing usable in it
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from flightboard.cache import TTLCache, FLIGHTS, AIRPORTS
from flightboard.config import config
from flightboard.errors import FlightBoardError, ValidationError, EmptyResultError
from flightboard.geo import haversine_distance, round_half_up
from flightboard.ingestion.aerodatabox_client import AeroDataBoxClient
from flightboard.models import FlightRecord, AirportRecord, RouteEstimate, Result
from flightboard.usage import UsageCounter

logger = logging.getLogger(__name__)

BOARD_TYPES = ('departures', 'arrivals')


class FlightDataService:
    """
    Service to fetch boards, airport searches and route estimates.

    The cache and the client (with its usage counter) are injected so
    that no state is hidden at module level.
    """

    def __init__(
        self,
        client: AeroDataBoxClient,
        cache: Optional[TTLCache] = None,
        window_hours: int = 12,
        max_flights: int = 50,
        airport_search_limit: int = 20,
        cruise_speed_kmh: float = 800.0,
    ):
        self.client = client
        self.cache = cache if cache is not None else TTLCache()
        self.window_hours = window_hours
        self.max_flights = max_flights
        self.airport_search_limit = airport_search_limit
        self.cruise_speed_kmh = cruise_speed_kmh

    @classmethod
    def from_config(
        cls,
        client: Optional[AeroDataBoxClient] = None,
        cache: Optional[TTLCache] = None,
    ) -> 'FlightDataService':
        """Create service from application configuration."""
        return cls(
            client=client or AeroDataBoxClient.from_config(),
            cache=cache if cache is not None else TTLCache.from_config(),
            window_hours=config.board.window_hours,
            max_flights=config.board.max_flights,
            airport_search_limit=config.board.airport_search_limit,
            cruise_speed_kmh=config.route.cruise_speed_kmh,
        )

    @property
    def usage(self) -> UsageCounter:
        return self.client.usage

    # -------------------------------------------------------------------------
    # Boards
    # -------------------------------------------------------------------------

    def fetch_board(self, airport_code: str, board_type: str = 'departures') -> Result:
        """
        Get the departures or arrivals board for an airport.

        Returns cached data if available, otherwise fetches the next
        `window_hours` of movements. At most `max_flights` records are
        returned; `total_available` carries the upstream count.
        """
        try:
            code = _clean_code(airport_code)
            if not code:
                raise ValidationError('Enter an airport code')
            if board_type not in BOARD_TYPES:
                raise ValidationError(
                    f'Unknown board type "{board_type}" (expected departures or arrivals)'
                )

            key = f'{code}-{board_type}'
            cached = self.cache.get(FLIGHTS, key)
            if cached is not None:
                logger.debug(f'Board cache hit for {key}')
                return cached

            data = self.client.get_board(code, window_hours=self.window_hours)
            raw_flights = data.get(board_type) or []

            if not raw_flights:
                raise EmptyResultError(f'No {board_type} in next {self.window_hours}h')

            flights = tuple(
                record for record in map(FlightRecord.from_raw, raw_flights)
                if record is not None
            )[:self.max_flights]

            result = Result.ok(flights, total_available=len(raw_flights))
            self.cache.put(FLIGHTS, key, result)

            logger.info(f'Loaded {len(flights)}/{len(raw_flights)} {board_type} for {code}')
            return result

        except FlightBoardError as e:
            logger.info(f'Board lookup for {airport_code!r} failed: {e.message}')
            return Result.from_error(e)
        except Exception as e:
            logger.exception(f'Unexpected error loading board for {airport_code!r}')
            return Result.fail(f'Failed: {e}')

    # -------------------------------------------------------------------------
    # Airports
    # -------------------------------------------------------------------------

    def search_airports(self, query: str) -> Result:
        """
        Free-text airport search.

        Items without an IATA code are discarded; a search that leaves
        nothing is an empty result rather than an error.
        """
        try:
            key = (query or '').strip().upper()
            if not key:
                raise ValidationError('Enter an airport name or code')

            cached = self.cache.get(AIRPORTS, key)
            if cached is not None:
                logger.debug(f'Airport cache hit for {key}')
                return cached

            items = self.client.search_airports(query.strip(), limit=self.airport_search_limit)
            if not items:
                raise EmptyResultError(f'No airports for "{query}"')

            airports = tuple(
                airport for airport in map(AirportRecord.from_raw, items)
                if airport is not None
            )
            if not airports:
                raise EmptyResultError('No valid IATA codes')

            result = Result.ok(airports)
            self.cache.put(AIRPORTS, key, result)
            return result

        except FlightBoardError as e:
            logger.info(f'Airport search for {query!r} failed: {e.message}')
            return Result.from_error(e)
        except Exception as e:
            logger.exception(f'Unexpected error searching airports for {query!r}')
            return Result.fail(f'Failed: {e}')

    # -------------------------------------------------------------------------
    # Routes
    # -------------------------------------------------------------------------

    def estimate_route(self, origin_code: str, dest_code: str) -> Result:
        """
        Estimate a direct route between two airports.

        Both airports are resolved concurrently; if either lookup fails
        the whole estimate fails. Distance is great-circle, duration
        assumes a constant cruise speed.
        """
        try:
            origin = _clean_code(origin_code)
            dest = _clean_code(dest_code)
            if not origin or not dest:
                raise ValidationError('Enter both origin and destination codes')

            with ThreadPoolExecutor(max_workers=2) as pool:
                origin_future = pool.submit(self.search_airports, origin)
                dest_future = pool.submit(self.search_airports, dest)
                origin_result = origin_future.result()
                dest_result = dest_future.result()

            if not origin_result.success or not dest_result.success:
                raise EmptyResultError('Airports not found')

            origin_airport = _find_code(origin_result.data, origin)
            dest_airport = _find_code(dest_result.data, dest)
            if origin_airport is None or dest_airport is None:
                raise EmptyResultError('Invalid codes')

            distance = round_half_up(haversine_distance(
                origin_airport.latitude, origin_airport.longitude,
                dest_airport.latitude, dest_airport.longitude,
            ))
            duration = round_half_up(distance / self.cruise_speed_kmh * 60)

            logger.info(f'Estimated {origin} -> {dest}: {distance} km, {duration} min')
            return Result.ok([RouteEstimate(
                origin=origin,
                destination=dest,
                distance_km=distance,
                duration_minutes=duration,
            )])

        except FlightBoardError as e:
            logger.info(f'Route estimate {origin_code!r} -> {dest_code!r} failed: {e.message}')
            return Result.from_error(e)
        except Exception as e:
            logger.exception('Unexpected error estimating route')
            return Result.fail(f'Failed: {e}')

    def clear_cache(self) -> None:
        """Drop every cached board and airport search."""
        self.cache.clear()

    @property
    def stats(self) -> dict:
        """Get service statistics."""
        return {
            'usage': self.usage.stats,
            'cache': self.cache.stats,
        }


def _clean_code(code: Optional[str]) -> str:
    return (code or '').strip().upper()


def _find_code(airports, code: str) -> Optional[AirportRecord]:
    return next((a for a in airports if a.code == code), None)
