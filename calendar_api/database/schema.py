"""Table definitions for events, event files and event notes."""

import structlog

from calendar_api.database.connections import DatabaseManager

logger = structlog.get_logger(__name__)

# Files and notes are owned by their event; deleting an event removes them.
SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS events (
        id UUID PRIMARY KEY,
        title TEXT NOT NULL,
        description TEXT,
        course TEXT,
        event_type TEXT NOT NULL,
        start_time TIMESTAMPTZ NOT NULL,
        end_time TIMESTAMPTZ NOT NULL,
        location TEXT,
        instructor TEXT,
        priority TEXT NOT NULL DEFAULT 'medium',
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_events_start_time ON events(start_time)
    """,
    """
    CREATE TABLE IF NOT EXISTS event_files (
        id UUID PRIMARY KEY,
        event_id UUID NOT NULL REFERENCES events(id) ON DELETE CASCADE,
        filename TEXT NOT NULL UNIQUE,
        original_filename TEXT NOT NULL,
        file_size BIGINT NOT NULL,
        mime_type TEXT NOT NULL,
        uploaded_by TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_event_files_event ON event_files(event_id, created_at)
    """,
    """
    CREATE TABLE IF NOT EXISTS event_notes (
        id UUID PRIMARY KEY,
        event_id UUID NOT NULL REFERENCES events(id) ON DELETE CASCADE,
        author_name TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
        updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_event_notes_event ON event_notes(event_id, created_at)
    """,
)


async def ensure_schema(db_manager: DatabaseManager) -> None:
    """Create missing tables and indexes. Safe to run on every startup."""
    async with db_manager.get_postgres_transaction() as conn:
        for statement in SCHEMA_STATEMENTS:
            await conn.execute(statement)
    logger.info("Database schema ensured", tables=["events", "event_files", "event_notes"])
