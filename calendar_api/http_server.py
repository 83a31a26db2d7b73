"""HTTP application for the calendar API."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from calendar_api import __version__
from calendar_api.database import DatabaseManager, ensure_schema
from calendar_api.errors import register_exception_handlers
from calendar_api.handlers import events, files, notes, simple_events
from calendar_api.middleware import RequestTracingMiddleware
from calendar_api.models.config import CalendarConfig
from calendar_api.storage import FileStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Open the connection pool and file storage for the life of the process."""
    config: CalendarConfig = app_instance.state.config
    if not config.database_url:
        raise RuntimeError("DATABASE_URL must be set")

    db_manager = DatabaseManager(config)
    await db_manager.initialize()
    try:
        if config.auto_create_schema:
            await ensure_schema(db_manager)

        app_instance.state.db_manager = db_manager
        app_instance.state.file_storage = FileStorage(config.upload_dir)
        logger.info("Calendar API started")
        yield
    finally:
        logger.info("Calendar API shutting down")
        await db_manager.cleanup()
        app_instance.state.db_manager = None


def create_app(config: Optional[CalendarConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or CalendarConfig()

    app_instance = FastAPI(
        title="Calendar API",
        description="Calendar events with file attachments and notes",
        version=__version__,
        lifespan=lifespan,
    )
    app_instance.state.config = config
    app_instance.state.db_manager = None
    app_instance.state.file_storage = None

    register_exception_handlers(app_instance)

    app_instance.add_middleware(RequestTracingMiddleware)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app_instance.get("/health")
    async def health(request: Request):
        """Health check endpoint."""
        db_manager: Optional[DatabaseManager] = request.app.state.db_manager
        database = await db_manager.health_check() if db_manager else {"status": "not_initialized"}
        return {
            "status": "healthy" if database["status"] == "healthy" else "unhealthy",
            "database": database,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    if config.read_only:
        app_instance.include_router(simple_events.router, prefix="/api")
    else:
        app_instance.include_router(events.router, prefix="/api")
        app_instance.include_router(files.router, prefix="/api")
        app_instance.include_router(notes.router, prefix="/api")

    # Static assets take whatever path the API does not.
    if Path(config.static_dir).is_dir():
        app_instance.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        logger.info(f"Static directory {config.static_dir!r} not found; serving API only")

    return app_instance


app = create_app()
