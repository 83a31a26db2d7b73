"""Event-related data models."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calendar_api.models.event_file import EventFile
from calendar_api.models.event_note import EventNote

DEFAULT_PRIORITY = "medium"

# Columns an update may touch, in table order.
MUTABLE_EVENT_FIELDS = (
    "title",
    "description",
    "course",
    "event_type",
    "start_time",
    "end_time",
    "location",
    "instructor",
    "priority",
)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Interpret naive timestamps as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Event(BaseModel):
    """Event row as stored in the events table."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: Optional[str] = None
    course: Optional[str] = None
    event_type: str
    start_time: datetime
    end_time: datetime
    location: Optional[str] = None
    instructor: Optional[str] = None
    priority: str = DEFAULT_PRIORITY
    created_at: datetime
    updated_at: datetime


class CreateEventRequest(BaseModel):
    """Payload for creating an event."""

    title: str = Field(..., min_length=1, description="Event title")
    description: Optional[str] = None
    course: Optional[str] = None
    event_type: str = Field(..., description="Free-form category, e.g. exam or lecture")
    start_time: datetime = Field(..., description="ISO-8601 start timestamp")
    end_time: datetime = Field(..., description="ISO-8601 end timestamp")
    location: Optional[str] = None
    instructor: Optional[str] = None
    priority: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timezone(cls, value):
        return ensure_utc(value)

    def resolved_priority(self) -> str:
        return self.priority or DEFAULT_PRIORITY


class UpdateEventRequest(BaseModel):
    """Partial update: only fields supplied with a value are changed."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    course: Optional[str] = None
    event_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    location: Optional[str] = None
    instructor: Optional[str] = None
    priority: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timezone(cls, value):
        return ensure_utc(value)

    def changes(self) -> Dict[str, Any]:
        """Fields to merge into the stored event.

        Explicit nulls count as absent, so a stored value can never be cleared
        through an update.
        """
        supplied = self.model_dump(exclude_unset=True)
        return {
            field: supplied[field]
            for field in MUTABLE_EVENT_FIELDS
            if supplied.get(field) is not None
        }


class EventWithDetails(Event):
    """An event together with its files (newest first) and notes (oldest first)."""

    files: List[EventFile] = Field(default_factory=list)
    notes: List[EventNote] = Field(default_factory=list)

    @classmethod
    def from_parts(cls, event: Event, files: List[EventFile], notes: List[EventNote]) -> "EventWithDetails":
        return cls(**event.model_dump(), files=files, notes=notes)


class EventsQuery(BaseModel):
    """Filter shape for event listings. Not wired to any route yet."""

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    event_type: Optional[str] = None
    course: Optional[str] = None
    search: Optional[str] = None


class RecurrencePattern(BaseModel):
    """Recurrence rule sent by the web client. Stored nowhere; not expanded."""

    frequency: str = Field(..., description="daily, weekly, ...")
    days_of_week: Optional[List[int]] = Field(None, description="0=Sunday .. 6=Saturday")
    interval: Optional[int] = Field(None, ge=1, description="Every N days/weeks")

    @field_validator("days_of_week")
    @classmethod
    def check_days(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        if value is not None and any(day < 0 or day > 6 for day in value):
            raise ValueError("days_of_week entries must be between 0 and 6")
        return value
