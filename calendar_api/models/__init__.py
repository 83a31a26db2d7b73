"""Data models for the calendar API."""

from .config import CalendarConfig
from .event import (
    CreateEventRequest,
    Event,
    EventsQuery,
    EventWithDetails,
    RecurrencePattern,
    UpdateEventRequest,
)
from .event_file import EventFile, FileUploadResponse
from .event_note import CreateNoteRequest, EventNote
from .responses import ApiResponse

__all__ = [
    "ApiResponse",
    "CalendarConfig",
    "CreateEventRequest",
    "CreateNoteRequest",
    "Event",
    "EventFile",
    "EventNote",
    "EventsQuery",
    "EventWithDetails",
    "FileUploadResponse",
    "RecurrencePattern",
    "UpdateEventRequest",
]
