"""Error taxonomy for the calendar API and its HTTP mapping."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from calendar_api.models.responses import ApiResponse

logger = logging.getLogger(__name__)


class CalendarError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CalendarError):
    """Malformed or missing request input."""

    status_code = 400


class NotFoundError(CalendarError):
    """No matching row or stored blob."""

    status_code = 404


class StorageError(CalendarError):
    """Database or filesystem failure."""

    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    """Wrap an error message in the standard envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.error(message).model_dump(mode="json"),
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        msg = error.get("msg", "invalid value")
        parts.append(f"{location}: {msg}" if location else msg)
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers so every error leaves the API as an envelope."""

    @app.exception_handler(CalendarError)
    async def calendar_error_handler(request: Request, exc: CalendarError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {message}")
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        return error_response(500, "Internal server error")
