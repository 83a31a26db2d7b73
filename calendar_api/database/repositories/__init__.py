"""Database repositories for data access layer."""

from .base import BaseRepository
from .event_repository import EventRepository
from .event_file_repository import EventFileRepository
from .event_note_repository import EventNoteRepository

__all__ = [
    "BaseRepository",
    "EventRepository",
    "EventFileRepository",
    "EventNoteRepository"
]
