"""Main entry point for the calendar API."""

import argparse
import logging
import sys

import uvicorn
from dotenv import load_dotenv

from calendar_api.models.config import CalendarConfig

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    # uvicorn's access log duplicates the tracing middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the calendar API server")
    parser.add_argument("--host", help="Bind address (default: HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Bind port (default: PORT or 3000)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the HTTP server."""
    load_dotenv()
    args = parse_args(argv)
    config = CalendarConfig()
    configure_logging(config.log_level)

    if not config.database_url:
        logger.error("DATABASE_URL environment variable is required")
        return 1

    host = args.host or config.host
    port = args.port or config.port
    logger.info(f"Starting server on {host}:{port}")

    uvicorn.run(
        "calendar_api.http_server:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=config.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
