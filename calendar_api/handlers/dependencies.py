"""FastAPI dependencies exposing the process-scoped handles to handlers."""

from fastapi import Depends, Request

from calendar_api.database.connections import DatabaseManager
from calendar_api.database.repositories import (
    EventFileRepository,
    EventNoteRepository,
    EventRepository,
)
from calendar_api.storage import FileStorage


def get_db_manager(request: Request) -> DatabaseManager:
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        raise RuntimeError("Database manager not initialized")
    return db_manager


def get_file_storage(request: Request) -> FileStorage:
    storage = getattr(request.app.state, "file_storage", None)
    if storage is None:
        raise RuntimeError("File storage not initialized")
    return storage


def get_event_repository(db_manager: DatabaseManager = Depends(get_db_manager)) -> EventRepository:
    return EventRepository(db_manager)


def get_event_file_repository(db_manager: DatabaseManager = Depends(get_db_manager)) -> EventFileRepository:
    return EventFileRepository(db_manager)


def get_event_note_repository(db_manager: DatabaseManager = Depends(get_db_manager)) -> EventNoteRepository:
    return EventNoteRepository(db_manager)
