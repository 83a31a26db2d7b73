"""Repository for event notes."""

from datetime import datetime, timezone
from typing import List
from uuid import UUID, uuid4

import asyncpg
import structlog

from calendar_api.database.repositories.base import BaseRepository
from calendar_api.database.connections import DatabaseManager
from calendar_api.models.event_note import CreateNoteRequest, EventNote


logger = structlog.get_logger(__name__)


class EventNoteRepository(BaseRepository[EventNote]):
    """Notes form a per-event thread in posting order."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager, "event_notes")
        self.logger = logger.bind(component="event_note_repository")

    def _row_to_model(self, row: asyncpg.Record) -> EventNote:
        return EventNote(
            id=row['id'],
            event_id=row['event_id'],
            author_name=row['author_name'],
            content=row['content'],
            created_at=row['created_at'],
            updated_at=row['updated_at']
        )

    async def create(self, event_id: UUID, request: CreateNoteRequest) -> EventNote:
        query = """
            INSERT INTO event_notes (id, event_id, author_name, content, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5, $5)
            RETURNING *
        """
        note = await self._fetchrow(
            "create note",
            query,
            uuid4(),
            event_id,
            request.author_name,
            request.content,
            datetime.now(timezone.utc),
        )
        self.logger.info("Note created", id=str(note.id), event_id=str(event_id))
        return note

    async def find_by_event(self, event_id: UUID) -> List[EventNote]:
        """Notes for an event, oldest first."""
        return await self._fetch(
            "list event notes",
            "SELECT * FROM event_notes WHERE event_id = $1 ORDER BY created_at ASC, id ASC",
            event_id,
        )
