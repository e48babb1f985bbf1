# File: src/trip_planner/models/trip.py
"""
The trip that owns a set of events.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

import pytz

from trip_planner.core.config_manager import Config
from trip_planner.core.exceptions import EventValidationError

from .api import ValidationError
from .common import format_iso, parse_iso_date, parse_iso_datetime
from .enums import ErrorKind
from .events import AllDayEvent, TimedEvent, TripEvent


@dataclass(frozen=True, kw_only=True)
class Trip:
    """Represents a trip; its timezone drives how its events are displayed."""
    id: str
    workspace_id: str
    name: str
    share_slug: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    timezone: str = Config.DEFAULT_TRIP_TIMEZONE
    is_public: bool = False

    def __post_init__(self):
        """Validate trip data."""
        violations: List[ValidationError] = []

        for field_name in ('id', 'workspace_id', 'created_at', 'updated_at'):
            if getattr(self, field_name) is None:
                violations.append(ValidationError(
                    field=field_name, message=f"{field_name} is required", kind=ErrorKind.MISSING_FIELD,
                ))

        if not self.name:
            violations.append(ValidationError(
                field='name', message="Trip name is required", kind=ErrorKind.LENGTH_VIOLATION,
            ))
        elif len(self.name) > Config.TRIP_NAME_MAX_LENGTH:
            violations.append(ValidationError(
                field='name',
                message=f"Trip name must be {Config.TRIP_NAME_MAX_LENGTH} characters or less",
                kind=ErrorKind.LENGTH_VIOLATION,
            ))

        if self.description is not None and len(self.description) > Config.TRIP_DESCRIPTION_MAX_LENGTH:
            violations.append(ValidationError(
                field='description',
                message=f"Description must be {Config.TRIP_DESCRIPTION_MAX_LENGTH} characters or less",
                kind=ErrorKind.LENGTH_VIOLATION,
            ))

        if not self.share_slug:
            violations.append(ValidationError(
                field='share_slug', message="Share slug is required", kind=ErrorKind.LENGTH_VIOLATION,
            ))

        if self.start_date and self.end_date and self.end_date < self.start_date:
            violations.append(ValidationError(
                field='end_date',
                message="End date must be after or equal to start date",
                kind=ErrorKind.INVALID_ORDER,
            ))

        if violations:
            raise EventValidationError(violations)

        if self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {self.timezone}")

    def _local_date(self, value: datetime) -> date:
        if value.tzinfo is None:
            return value.date()
        return value.astimezone(pytz.timezone(self.timezone)).date()

    def contains(self, event: TripEvent) -> bool:
        """Check whether an event's scheduled days fall inside the trip window."""
        if isinstance(event, AllDayEvent):
            first, last = event.start_date, event.resolved_end_date
        elif isinstance(event, TimedEvent):
            first = self._local_date(event.start_datetime)
            last = self._local_date(event.end_datetime)
        else:
            return True

        if self.start_date and first < self.start_date:
            return False
        if self.end_date and last > self.end_date:
            return False
        return True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Trip':
        """Create Trip from its wire dictionary (camelCase keys)."""
        return cls(
            id=data.get('id'),
            workspace_id=data.get('workspaceId'),
            name=data.get('name', ''),
            share_slug=data.get('shareSlug', ''),
            created_at=parse_iso_datetime(data.get('createdAt')),
            updated_at=parse_iso_datetime(data.get('updatedAt')),
            description=data.get('description'),
            start_date=parse_iso_date(data.get('startDate')),
            end_date=parse_iso_date(data.get('endDate')),
            timezone=data.get("timezone") or Config.DEFAULT_TRIP_TIMEZONE,
            is_public=bool(data.get('isPublic', False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary."""
        return {
            'id': self.id,
            'workspaceId': self.workspace_id,
            'name': self.name,
            'description': self.description,
            'startDate': format_iso(self.start_date),
            'endDate': format_iso(self.end_date),
            'timezone': self.timezone,
            'isPublic': self.is_public,
            'shareSlug': self.share_slug,
            'createdAt': format_iso(self.created_at),
            'updatedAt': format_iso(self.updated_at),
        }
