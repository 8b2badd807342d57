"""
Configuration management for FlightBoard.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

load_dotenv()


def _parse_codes(value: str) -> Tuple[str, ...]:
    """Parse 'JFK,LHR,...' string into a tuple of uppercased codes."""
    return tuple(
        code.strip().upper()
        for code in value.split(',')
        if code.strip()
    )


@dataclass(frozen=True)
class AeroDataBoxConfig:
    """AeroDataBox (RapidAPI) configuration."""
    api_key: str = os.getenv('AERODATABOX_API_KEY', '')
    host: str = os.getenv('AERODATABOX_HOST', 'aerodatabox.p.rapidapi.com')
    base_url: str = os.getenv('AERODATABOX_BASE_URL', 'https://aerodatabox.p.rapidapi.com')
    timeout_seconds: float = float(os.getenv('REQUEST_TIMEOUT_SECONDS', '15'))

    # Soft ceiling, displayed only - never blocks calls
    usage_limit: int = int(os.getenv('API_USAGE_LIMIT', '2500'))

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class CacheConfig:
    """In-memory cache settings."""
    ttl_seconds: float = float(os.getenv('CACHE_TTL_SECONDS', '120'))


@dataclass(frozen=True)
class BoardConfig:
    """Departure/arrival board query settings."""
    window_hours: int = 12
    max_flights: int = 50
    airport_search_limit: int = 20


@dataclass(frozen=True)
class LocatorConfig:
    """Flight-number locator settings."""
    airports: Tuple[str, ...] = _parse_codes(
        os.getenv('LOCATOR_AIRPORTS', 'JFK,LHR,DXB,LAX,CDG')
    )
    pacing_seconds: float = float(os.getenv('LOCATOR_PACING_SECONDS', '0.3'))
    assumed_flight_minutes: int = 360


@dataclass(frozen=True)
class RouteConfig:
    """Route estimation settings."""
    cruise_speed_kmh: float = float(os.getenv('CRUISE_SPEED_KMH', '800'))


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    aerodatabox: AeroDataBoxConfig
    cache: CacheConfig
    board: BoardConfig
    locator: LocatorConfig
    route: RouteConfig

    # Flask settings
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    return AppConfig(
        aerodatabox=AeroDataBoxConfig(),
        cache=CacheConfig(),
        board=BoardConfig(),
        locator=LocatorConfig(),
        route=RouteConfig(),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
