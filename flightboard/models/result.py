"""Tagged success/failure results returned across service boundaries."""

from dataclasses import dataclass
from typing import Optional, Any

from flightboard.errors import FlightBoardError


@dataclass(frozen=True)
class Result:
    """
    Outcome of a pipeline operation.

    Failures carry a human-readable message and the error kind
    ('validation', 'transport', 'empty'); successes carry data.
    """
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    total_available: Optional[int] = None

    @classmethod
    def ok(cls, data: Any, total_available: Optional[int] = None) -> 'Result':
        return cls(success=True, data=data, total_available=total_available)

    @classmethod
    def fail(cls, message: str, kind: str = 'error') -> 'Result':
        return cls(success=False, error=message, error_kind=kind)

    @classmethod
    def from_error(cls, error: FlightBoardError) -> 'Result':
        return cls.fail(error.message, kind=error.kind)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict for API responses."""
        if not self.success:
            return {
                'success': False,
                'error': self.error,
                'error_kind': self.error_kind,
            }

        result = {'success': True, 'data': _serialize(self.data)}
        if self.total_available is not None:
            result['total_available'] = self.total_available
        return result


def _serialize(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    return value
