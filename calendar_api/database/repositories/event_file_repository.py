"""Repository for file attachment metadata."""

from typing import List
from uuid import UUID

import asyncpg
import structlog

from calendar_api.database.repositories.base import BaseRepository
from calendar_api.database.connections import DatabaseManager
from calendar_api.models.event_file import EventFile


logger = structlog.get_logger(__name__)


class EventFileRepository(BaseRepository[EventFile]):
    """Stores one metadata row per uploaded blob."""

    def __init__(self, db_manager: DatabaseManager):
        super().__init__(db_manager, "event_files")
        self.logger = logger.bind(component="event_file_repository")

    def _row_to_model(self, row: asyncpg.Record) -> EventFile:
        return EventFile(
            id=row['id'],
            event_id=row['event_id'],
            filename=row['filename'],
            original_filename=row['original_filename'],
            file_size=row['file_size'],
            mime_type=row['mime_type'],
            uploaded_by=row['uploaded_by'],
            created_at=row['created_at']
        )

    async def create(self,
                     file_id: UUID,
                     event_id: UUID,
                     filename: str,
                     original_filename: str,
                     file_size: int,
                     mime_type: str,
                     uploaded_by: str) -> EventFile:
        """Insert metadata for a blob that has already been written."""
        query = """
            INSERT INTO event_files (id, event_id, filename, original_filename,
                                     file_size, mime_type, uploaded_by, created_at)
            VALUES ($1, $2, $3, $4, $5, $6, $7, NOW())
            RETURNING *
        """
        event_file = await self._fetchrow(
            "save file record",
            query,
            file_id,
            event_id,
            filename,
            original_filename,
            file_size,
            mime_type,
            uploaded_by,
        )
        self.logger.info("File record saved", id=str(file_id), event_id=str(event_id), size=file_size)
        return event_file

    async def find_by_event(self, event_id: UUID) -> List[EventFile]:
        """Files attached to an event, newest first."""
        return await self._fetch(
            "list event files",
            "SELECT * FROM event_files WHERE event_id = $1 ORDER BY created_at DESC, id DESC",
            event_id,
        )
