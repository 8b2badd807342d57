"""
Flight locator - finds a flight by number across major airports.

There is no flight-number endpoint on the plan in use, so the locator
walks the departure boards of a fixed list of hub airports in order and
returns the first record whose number matches. Boards come through the
FlightDataService, so repeated searches within the cache TTL are free.

Matching is deliberately permissive to absorb formatting differences
("AA 100" vs "AA100" vs "AA-100"):
- exact match on the cleaned number
- substring containment in either direction
- equality after stripping all non-alphanumerics
"""

import logging
import re
import time
from typing import Any, Callable, Dict, Iterable, Optional

from flightboard.config import config
from flightboard.errors import FlightBoardError, ValidationError, EmptyResultError
from flightboard.models import FlightRecord, Result, NO_TIME
from flightboard.services.flight_data import FlightDataService

logger = logging.getLogger(__name__)

# Display names for airports the locator may report as origin
KNOWN_AIRPORT_NAMES = {
    'JFK': "John F. Kennedy Int'l",
    'LHR': 'London Heathrow',
    'DXB': 'Dubai International',
    'LAX': "Los Angeles Int'l",
    'CDG': 'Paris Charles de Gaulle',
    'FRA': 'Frankfurt Airport',
    'SIN': 'Singapore Changi',
    'HND': 'Tokyo Haneda',
    'ORD': "Chicago O'Hare",
    'ATL': 'Atlanta Hartsfield',
}

_WHITESPACE = re.compile(r'\s')
_NON_ALNUM = re.compile(r'[^A-Z0-9]')


def clean_flight_number(value: Any) -> str:
    """Uppercase, trim and drop all whitespace: ' aa 100 ' -> 'AA100'."""
    text = '' if value is None else str(value)
    return _WHITESPACE.sub('', text.upper().strip())


def flight_numbers_match(candidate: Any, target: str) -> bool:
    """Check a board flight number against a cleaned target number."""
    if not candidate:
        return False

    number = clean_flight_number(candidate)
    return (
        number == target or
        target in number or
        number in target or
        _NON_ALNUM.sub('', number) == _NON_ALNUM.sub('', target)
    )


def estimate_arrival_time(departure: str, flight_minutes: int = 360) -> str:
    """
    Add an assumed flight duration to an 'HH:MM' departure time.

    Wraps around midnight. Returns 'N/A' for missing or bad times.
    """
    if not departure or departure == NO_TIME:
        return 'N/A'
    try:
        hours, minutes = (int(part) for part in departure.split(':'))
    except ValueError:
        return 'N/A'

    total = hours * 60 + minutes + flight_minutes
    return f'{(total // 60) % 24:02d}:{total % 60:02d}'


class FlightLocator:
    """
    Sequential, paced search for a flight number across hub airports.

    Airports are checked strictly in order with a pause between them;
    the first match wins and no ranking is done across airports.
    """

    def __init__(
        self,
        service: FlightDataService,
        airports: Iterable[str] = ('JFK', 'LHR', 'DXB', 'LAX', 'CDG'),
        pacing_seconds: float = 0.3,
        assumed_flight_minutes: int = 360,
        airport_names: Optional[Dict[str, str]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.service = service
        self.airports = tuple(airports)
        self.pacing_seconds = pacing_seconds
        self.assumed_flight_minutes = assumed_flight_minutes
        self.airport_names = airport_names if airport_names is not None else KNOWN_AIRPORT_NAMES
        self._sleep = sleep

    @classmethod
    def from_config(cls, service: FlightDataService) -> 'FlightLocator':
        """Create locator from application configuration."""
        return cls(
            service=service,
            airports=config.locator.airports,
            pacing_seconds=config.locator.pacing_seconds,
            assumed_flight_minutes=config.locator.assumed_flight_minutes,
        )

    def airport_name(self, code: str) -> str:
        return self.airport_names.get(code, code)

    def locate(self, flight_number: str) -> Result:
        """
        Find a flight by number.

        Returns a Result whose data is a copy of the matching board
        record annotated with origin code/name and an estimated arrival.
        A board that fails to load is skipped, not fatal.
        """
        try:
            target = clean_flight_number(flight_number)
            if len(target) < 2:
                raise ValidationError('Flight number too short (e.g., AA100, EK215)')

            logger.info(f'Searching for flight {target} across {len(self.airports)} airports')

            for index, airport in enumerate(self.airports):
                if index and self.pacing_seconds > 0:
                    self._sleep(self.pacing_seconds)

                found = self._search_airport(airport, target)
                if found is not None:
                    return Result.ok(found)

            logger.info(f'Flight {target} not found at any airport')
            raise EmptyResultError(
                f'Flight {target} not found. '
                'Try loading Flight Board first to see available flights.'
            )

        except FlightBoardError as e:
            return Result.from_error(e)
        except Exception as e:
            logger.exception(f'Unexpected error locating flight {flight_number!r}')
            return Result.fail(f'Search failed: {e}')

    def _search_airport(self, airport: str, target: str) -> Optional[FlightRecord]:
        """Scan one airport's departures board for the target number."""
        board = self.service.fetch_board(airport, 'departures')
        if not board.success:
            logger.info(f'No flights at {airport}: {board.error}')
            return None

        logger.debug(f'Checking {len(board.data)} departures at {airport}')

        for record in board.data:
            if flight_numbers_match(record.flight_number, target):
                logger.info(f'Matched {record.flight_number!r} to {target} at {airport}')
                return record.located_at(
                    origin_code=airport,
                    origin_name=self.airport_name(airport),
                    arrival_time=estimate_arrival_time(
                        record.scheduled_time,
                        self.assumed_flight_minutes,
                    ),
                )
        return None
