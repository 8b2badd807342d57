"""
In-memory TTL cache for upstream API responses.

Two independent namespaces are used:
- flights:  keyed by '<airportCode>-<boardType>'
- airports: keyed by uppercased, trimmed search query

Entries are never evicted by size. A read treats an entry older than the
TTL as a miss; the stale entry stays in place until the next put for the
same key overwrites it, or clear() empties everything.
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from flightboard.config import config

logger = logging.getLogger(__name__)

T = TypeVar('T')

FLIGHTS = 'flights'
AIRPORTS = 'airports'


@dataclass
class CacheEntry(Generic[T]):
    """Cached payload with its capture timestamp."""
    value: T
    timestamp: float = field(default_factory=time.time)


class TTLCache:
    """
    Namespaced key/value cache with per-entry expiry.

    Guarded by a lock because route estimation issues its two airport
    lookups from worker threads.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else config.cache.ttl_seconds
        self._clock = clock

        self._namespaces: Dict[str, Dict[str, CacheEntry]] = {
            FLIGHTS: {},
            AIRPORTS: {},
        }
        self._lock = threading.RLock()

        # Statistics
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_config(cls) -> 'TTLCache':
        """Create cache from application configuration."""
        return cls(ttl_seconds=config.cache.ttl_seconds)

    def get(self, namespace: str, key: str) -> Optional[Any]:
        """
        Get a cached value.

        Returns None if not cached or expired.
        """
        with self._lock:
            entry = self._namespaces.setdefault(namespace, {}).get(key)
            if entry is not None and self._clock() - entry.timestamp < self.ttl_seconds:
                self._hits += 1
                return entry.value
            self._misses += 1
        return None

    def put(self, namespace: str, key: str, value: Any) -> None:
        """Store a value, overwriting any previous entry for the key."""
        with self._lock:
            self._namespaces.setdefault(namespace, {})[key] = CacheEntry(
                value=value,
                timestamp=self._clock(),
            )

    def clear(self) -> None:
        """Clear every namespace."""
        with self._lock:
            for entries in self._namespaces.values():
                entries.clear()
        logger.info('Cache cleared')

    def __len__(self) -> int:
        with self._lock:
            return sum(len(entries) for entries in self._namespaces.values())

    @property
    def stats(self) -> dict:
        """Get cache statistics."""
        with self._lock:
            lookups = self._hits + self._misses
            return {
                'entries': {name: len(entries) for name, entries in self._namespaces.items()},
                'ttl_seconds': self.ttl_seconds,
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': self._hits / lookups if lookups > 0 else 0,
            }
