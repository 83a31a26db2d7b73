"""Event repository for managing event data."""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

import asyncpg
import structlog

from calendar_api.database.repositories.base import BaseRepository
from calendar_api.database.connections import DatabaseManager
from calendar_api.models.event import CreateEventRequest, Event, UpdateEventRequest


logger = structlog.get_logger(__name__)


class EventRepository(BaseRepository[Event]):
    """Repository for managing event data in PostgreSQL."""

    def __init__(self, db_manager: DatabaseManager):
        """Initialize event repository."""
        super().__init__(db_manager, "events")
        self.logger = logger.bind(component="event_repository")

    def _row_to_model(self, row: asyncpg.Record) -> Event:
        """Convert database row to Event model."""
        return Event(
            id=row['id'],
            title=row['title'],
            description=row['description'],
            course=row['course'],
            event_type=row['event_type'],
            start_time=row['start_time'],
            end_time=row['end_time'],
            location=row['location'],
            instructor=row['instructor'],
            priority=row['priority'],
            created_at=row['created_at'],
            updated_at=row['updated_at']
        )

    async def create(self, request: CreateEventRequest) -> Event:
        """
        Insert a new event.

        The id is generated here and both timestamps share one value, so a
        fresh event always has created_at == updated_at.
        """
        now = datetime.now(timezone.utc)
        query = """
            INSERT INTO events (id, title, description, course, event_type, start_time, end_time,
                                location, instructor, priority, created_at, updated_at)
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $11)
            RETURNING *
        """
        event = await self._fetchrow(
            "create event",
            query,
            uuid4(),
            request.title,
            request.description,
            request.course,
            request.event_type,
            request.start_time,
            request.end_time,
            request.location,
            request.instructor,
            request.resolved_priority(),
            now,
        )
        self.logger.info("Event created", id=str(event.id), title=event.title)
        return event

    async def find_all(self) -> List[Event]:
        """All events by start time; ties are broken by id so the order is stable."""
        return await self._fetch(
            "list events",
            "SELECT * FROM events ORDER BY start_time ASC, id ASC",
        )

    async def update(self, event_id: UUID, patch: UpdateEventRequest) -> Optional[Event]:
        """
        Merge the supplied fields into an event.

        Args:
            event_id: Event to update
            patch: Partial update; fields it leaves out keep their stored value

        Returns:
            The updated event, or None if no event has this id
        """
        changes = patch.changes()
        changes['updated_at'] = datetime.now(timezone.utc)

        set_clauses = [f"{column} = ${i + 2}" for i, column in enumerate(changes)]
        query = f"""
            UPDATE events
            SET {', '.join(set_clauses)}
            WHERE id = $1
            RETURNING *
        """

        event = await self._fetchrow("update event", query, event_id, *changes.values())
        if event:
            self.logger.info("Event updated", id=str(event_id), fields=sorted(changes))
        return event
