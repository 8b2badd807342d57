"""
AeroDataBox API client (via RapidAPI).

Handles communication with the AeroDataBox REST API, including:
- RapidAPI key/host headers
- Airport board queries over a time window
- Airport free-text search
- Timeouts and transport error mapping
- Usage tracking against the plan's soft call limit

Endpoints used:
    GET /flights/airports/iata/{code}/{from}/{to}
    GET /airports/search/term?q={query}&limit={n}

Board window times are formatted 'YYYY-MM-DDTHH:MM'.

The configured timeout is passed to requests as-is, so it bounds the
connect and each socket read separately. It is not a total deadline: a
response that keeps trickling in bytes can take longer overall.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Any, Dict

import requests

from flightboard.config import config
from flightboard.errors import TransportError
from flightboard.usage import UsageCounter

logger = logging.getLogger(__name__)

WINDOW_FORMAT = '%Y-%m-%dT%H:%M'

# Board query flags sent with every board request
BOARD_PARAMS = {
    'withLeg': 'false',
    'withCancelled': 'true',
    'withCodeshared': 'true',
    'withCargo': 'false',
    'withPrivate': 'false',
}


class AeroDataBoxClient:
    """
    Client for the AeroDataBox API.

    Handles:
    - GET requests with RapidAPI headers and a hard timeout
    - Counting every response received against the usage counter
    - Converting requests failures into TransportError
    """

    def __init__(
        self,
        api_key: str = '',
        host: str = 'aerodatabox.p.rapidapi.com',
        base_url: str = 'https://aerodatabox.p.rapidapi.com',
        timeout: float = 15.0,
        usage: Optional[UsageCounter] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.usage = usage if usage is not None else UsageCounter()

        if not api_key:
            logger.warning('AeroDataBox API key not configured - requests will be rejected upstream')

        self.session = session or requests.Session()
        self.session.headers.update({
            'X-RapidAPI-Key': api_key,
            'X-RapidAPI-Host': host,
            'Accept': 'application/json',
        })

    @classmethod
    def from_config(cls, usage: Optional[UsageCounter] = None) -> 'AeroDataBoxClient':
        """Create client from application configuration."""
        return cls(
            api_key=config.aerodatabox.api_key,
            host=config.aerodatabox.host,
            base_url=config.aerodatabox.base_url,
            timeout=config.aerodatabox.timeout_seconds,
            usage=usage if usage is not None else UsageCounter(limit=config.aerodatabox.usage_limit),
        )

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        GET a path and decode the JSON body.

        Raises:
            TransportError on timeout, network failure, non-2xx status
            or an undecodable body.
        """
        url = f'{self.base_url}{path}'
        logger.debug(f'GET {url} params={params}')

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.error(f'AeroDataBox timeout after {self.timeout}s: {path}')
            raise TransportError(f'Failed: request timed out after {self.timeout:g}s')
        except requests.exceptions.RequestException as e:
            logger.error(f'AeroDataBox request failed: {e}')
            raise TransportError(f'Failed: {e}')

        self.usage.track()

        if not response.ok:
            body = response.text
            logger.error(f'AeroDataBox API error: {response.status_code}')
            raise TransportError(
                f'Failed: API Error {response.status_code}: {body}',
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f'AeroDataBox returned invalid JSON: {e}')
            raise TransportError('Failed: invalid JSON in response')

    def get_board(
        self,
        airport_code: str,
        window_hours: int = 12,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Fetch departures and arrivals for an airport.

        The window starts at `now` (UTC by default) and spans
        `window_hours`. Returns the raw payload with 'departures' and/or
        'arrivals' arrays.

        Raises:
            TransportError on request failure or when the payload has
            neither array.
        """
        start = now or datetime.now(timezone.utc)
        end = start + timedelta(hours=window_hours)
        path = (
            f'/flights/airports/iata/{airport_code}'
            f'/{start.strftime(WINDOW_FORMAT)}/{end.strftime(WINDOW_FORMAT)}'
        )

        logger.info(f'Fetching board for {airport_code} ({window_hours}h window)')
        data = self._get(path, params=dict(BOARD_PARAMS))

        # Empty arrays are a valid empty board; missing ones are not
        if not isinstance(data, dict) or (
            data.get('departures') is None and data.get('arrivals') is None
        ):
            raise TransportError('Failed: No flight data')

        return data

    def search_airports(self, query: str, limit: int = 20) -> list:
        """
        Free-text airport search.

        Returns the raw 'items' list (possibly empty).
        """
        logger.info(f'Searching airports for "{query}"')
        data = self._get('/airports/search/term', params={'q': query, 'limit': limit})

        if not isinstance(data, dict):
            return []
        return data.get('items') or []
