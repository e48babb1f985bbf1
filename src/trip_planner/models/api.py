# File: src/trip_planner/models/api.py
"""
Data models for validation failures and bridge responses.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from .enums import BridgeErrorType, ErrorKind
from .events import BaseEvent
from .serialization import event_to_dict

T = TypeVar('T')


@dataclass(frozen=True)
class ValidationError:
    """Represents a single violated rule."""
    field: str
    message: str
    kind: ErrorKind

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.field}: {self.message}"

    def to_dict(self) -> dict:
        return {'field': self.field, 'message': self.message, 'kind': self.kind.value}


@dataclass(frozen=True)
class BridgeError:
    """Error half of the bridge envelope."""
    type: BridgeErrorType
    message: str
    field: Optional[str] = None
    code: Optional[str] = None

    def to_dict(self) -> dict:
        result = {'type': self.type.value, 'message': self.message}
        if self.field is not None:
            result['field'] = self.field
        if self.code is not None:
            result['code'] = self.code
        return result


@dataclass(frozen=True)
class BridgeResult(Generic[T]):
    """Uniform success/failure envelope returned by the domain bridge."""
    success: bool
    data: Optional[T] = None
    error: Optional[BridgeError] = None

    @classmethod
    def ok(cls, data: T) -> 'BridgeResult[T]':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: BridgeError) -> 'BridgeResult[T]':
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        """Convert to the JSON envelope shape."""
        if not self.success:
            return {'success': False, 'error': self.error.to_dict() if self.error else None}
        return {'success': True, 'data': _jsonable(self.data)}


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseEvent):
        return event_to_dict(value)
    return value
