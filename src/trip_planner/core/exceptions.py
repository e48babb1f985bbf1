# File: src/trip_planner/core/exceptions.py
"""
Exceptions raised by the scheduling core.
"""

from typing import List

from trip_planner.models.api import ValidationError
from trip_planner.models.enums import ErrorKind


class EventValidationError(ValueError):
    """Raised when a candidate event breaks a business rule.

    ``kind``, ``field`` and ``message`` describe the first violated rule;
    ``violations`` lists every rule that failed.
    """

    def __init__(self, violations: List[ValidationError]):
        if not violations:
            raise ValueError("EventValidationError needs at least one violation")
        self.violations = list(violations)
        first = self.violations[0]
        self.kind: ErrorKind = first.kind
        self.field: str = first.field
        self.message: str = first.message
        super().__init__(first.message)

    @classmethod
    def single(cls, kind: ErrorKind, field: str, message: str) -> 'EventValidationError':
        return cls([ValidationError(field=field, message=message, kind=kind)])

    def has_kind(self, kind: ErrorKind) -> bool:
        return any(v.kind is kind for v in self.violations)

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'field': self.field,
            'message': self.message,
            'violations': [v.to_dict() for v in self.violations],
        }

    def __repr__(self) -> str:
        return f"EventValidationError(kind={self.kind.value!r}, field={self.field!r}, message={self.message!r})"


def invalid_kind(message: str, field: str = 'kind') -> EventValidationError:
    return EventValidationError.single(ErrorKind.INVALID_KIND, field, message)
