"""
Error taxonomy for the flight data pipeline.

Errors are raised inside the client and services, then converted into
failure results at the public service boundary. Callers of the services
never see these exceptions.
"""

from typing import Optional


class FlightBoardError(Exception):
    """Base class for pipeline errors."""
    kind = 'error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FlightBoardError):
    """Bad or missing input, detected before any network call."""
    kind = 'validation'


class TransportError(FlightBoardError):
    """Timeout, network failure, non-2xx status or undecodable payload."""
    kind = 'transport'

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EmptyResultError(FlightBoardError):
    """Well-formed response with zero usable records."""
    kind = 'empty'
