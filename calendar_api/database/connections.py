"""Database connection management for the calendar service."""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import asyncpg
import structlog

from calendar_api.models.config import CalendarConfig


logger = structlog.get_logger(__name__)


class DatabaseManager:
    """Owns the PostgreSQL connection pool shared by all requests."""

    def __init__(self, config: CalendarConfig):
        """
        Initialize database manager with configuration.

        Args:
            config: Application configuration containing database settings
        """
        self.config = config
        self.logger = logger.bind(component="database_manager")

        self._postgres_pool: Optional[asyncpg.Pool] = None

        self._postgres_pool_config = {
            "min_size": max(1, config.db_pool_size // 2),
            "max_size": config.db_pool_size,
            "max_inactive_connection_lifetime": 300,
            "timeout": config.db_pool_timeout,
            "command_timeout": 60,
            "server_settings": {
                "application_name": "calendar_api",
                "timezone": "UTC"
            }
        }

    @property
    def is_initialized(self) -> bool:
        return self._postgres_pool is not None

    async def initialize(self) -> None:
        """Create the pool and verify it answers."""
        try:
            self.logger.info("Creating PostgreSQL connection pool",
                             database_url=self.config.masked_database_url())

            self._postgres_pool = await asyncpg.create_pool(
                self.config.database_url,
                **self._postgres_pool_config
            )

            await self._verify_connection()

            self.logger.info("Database connection established",
                             pool_size=self._postgres_pool.get_size())

        except Exception as e:
            self.logger.error("Failed to initialize database connection", error=str(e))
            await self.cleanup()
            raise

    async def _verify_connection(self) -> None:
        async with self._postgres_pool.acquire() as conn:
            version = await conn.fetchval("SELECT version()")
            self.logger.info("PostgreSQL connection verified", version=version[:50])

    async def cleanup(self) -> None:
        """Close the pool."""
        if self._postgres_pool:
            self.logger.info("Closing PostgreSQL pool")
            try:
                await self._postgres_pool.close()
            except Exception as e:
                self.logger.error("Error closing PostgreSQL pool", error=str(e))
            finally:
                self._postgres_pool = None

    @asynccontextmanager
    async def get_postgres_connection(self):
        """
        Get a PostgreSQL connection from the pool.

        Yields:
            asyncpg.Connection: Database connection
        """
        if not self._postgres_pool:
            raise RuntimeError("PostgreSQL pool not initialized")

        async with self._postgres_pool.acquire() as connection:
            yield connection

    @asynccontextmanager
    async def get_postgres_transaction(self):
        """
        Get a PostgreSQL connection with an open transaction.

        Yields:
            asyncpg.Connection: Database connection with active transaction
        """
        async with self.get_postgres_connection() as conn:
            async with conn.transaction():
                yield conn

    async def get_postgres_pool_stats(self) -> Dict[str, Any]:
        """Get PostgreSQL pool statistics."""
        if not self._postgres_pool:
            return {"status": "not_initialized"}

        return {
            "status": "initialized",
            "size": self._postgres_pool.get_size(),
            "min_size": self._postgres_pool.get_min_size(),
            "max_size": self._postgres_pool.get_max_size(),
            "idle_size": self._postgres_pool.get_idle_size()
        }

    async def health_check(self) -> Dict[str, Any]:
        """Check that the database answers a trivial query."""
        if not self._postgres_pool:
            return {"status": "not_initialized"}

        try:
            async with self.get_postgres_connection() as conn:
                await conn.fetchval("SELECT 1")
            return {"status": "healthy", "pool": await self.get_postgres_pool_stats()}
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            self.logger.warning("Database health check failed", error=str(e))
            return {"status": "unhealthy", "error": str(e)}
