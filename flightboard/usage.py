"""Session-wide API usage tracking."""

import logging
import threading
from typing import Optional

from flightboard.config import config

logger = logging.getLogger(__name__)


class UsageCounter:
    """
    Monotonic count of real network calls made this session.

    The limit is a soft ceiling for display: exceeding it logs a
    warning but never blocks further calls.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit if limit is not None else config.aerodatabox.usage_limit
        self._calls = 0
        self._lock = threading.Lock()

    def track(self) -> int:
        """Record one API call and return the new total."""
        with self._lock:
            self._calls += 1
            calls = self._calls

        logger.info(f'API calls: {calls}/{self.limit}')
        if calls == self.limit + 1:
            logger.warning(f'API usage soft limit of {self.limit} calls exceeded')
        return calls

    @property
    def calls(self) -> int:
        return self._calls

    @property
    def remaining(self) -> int:
        return max(0, self.limit - self._calls)

    @property
    def over_limit(self) -> bool:
        return self._calls > self.limit

    @property
    def stats(self) -> dict:
        return {
            'calls': self.calls,
            'limit': self.limit,
            'remaining': self.remaining,
            'over_limit': self.over_limit,
        }
