"""Base repository class for common database operations."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generic, List, Optional, TypeVar
from uuid import UUID

import asyncpg
import structlog

from calendar_api.database.connections import DatabaseManager
from calendar_api.errors import NotFoundError, StorageError


logger = structlog.get_logger(__name__)

T = TypeVar('T')

DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class BaseRepository(ABC, Generic[T]):
    """Base repository class providing common database operations."""

    def __init__(self, db_manager: DatabaseManager, table_name: str):
        """
        Initialize base repository.

        Args:
            db_manager: Database manager instance
            table_name: Name of the database table
        """
        self.db_manager = db_manager
        self.table_name = table_name
        self.logger = logger.bind(component=f"{table_name}_repository")

    @abstractmethod
    def _row_to_model(self, row: asyncpg.Record) -> T:
        """Convert database row to model instance."""
        pass

    @contextmanager
    def _storage_errors(self, action: str, **context: Any):
        """Log driver failures and surface them as StorageError."""
        try:
            yield
        except asyncpg.exceptions.ForeignKeyViolationError as e:
            self.logger.warning(f"Referenced row missing while trying to {action}",
                                table=self.table_name, error=str(e), **context)
            raise NotFoundError("Event not found") from e
        except DRIVER_ERRORS as e:
            self.logger.error(f"Failed to {action}",
                              table=self.table_name, error=str(e), **context)
            raise StorageError(f"Failed to {action}") from e

    async def _fetchrow(self, action: str, query: str, *args: Any) -> Optional[T]:
        with self._storage_errors(action):
            async with self.db_manager.get_postgres_connection() as conn:
                row = await conn.fetchrow(query, *args)
        return self._row_to_model(row) if row else None

    async def _fetch(self, action: str, query: str, *args: Any) -> List[T]:
        with self._storage_errors(action):
            async with self.db_manager.get_postgres_connection() as conn:
                rows = await conn.fetch(query, *args)
        return [self._row_to_model(row) for row in rows]

    async def find_by_id(self, id_value: UUID) -> Optional[T]:
        """
        Find a record by its ID.

        Args:
            id_value: The ID to search for

        Returns:
            Model instance if found, None otherwise
        """
        return await self._fetchrow(
            f"load {self.table_name} record",
            f"SELECT * FROM {self.table_name} WHERE id = $1",
            id_value,
        )

    async def delete(self, id_value: UUID) -> bool:
        """
        Delete a record by ID.

        Args:
            id_value: ID of the record to delete

        Returns:
            True if record was deleted, False if not found
        """
        with self._storage_errors(f"delete {self.table_name} record", id=str(id_value)):
            async with self.db_manager.get_postgres_connection() as conn:
                result = await conn.execute(f"DELETE FROM {self.table_name} WHERE id = $1", id_value)

        deleted = result.split()[-1] != "0"  # "DELETE 1" or "DELETE 0"
        if deleted:
            self.logger.info("Record deleted", table=self.table_name, id=str(id_value))
        return deleted
