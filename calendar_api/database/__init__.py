"""Database package for the calendar API."""

from .connections import DatabaseManager
from .repositories import EventRepository, EventFileRepository, EventNoteRepository
from .schema import ensure_schema

__all__ = [
    "DatabaseManager",
    "EventRepository",
    "EventFileRepository",
    "EventNoteRepository",
    "ensure_schema"
]
