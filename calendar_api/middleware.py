"""
Request tracing middleware.

Logs one line per request and tags the response with a request id so a client
report can be matched to the server log.
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from calendar_api.errors import error_response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that traces every HTTP request
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Time the request and log its outcome

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            HTTP response carrying the request id header
        """
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                f"[{request_id}] {request.method} {request.url.path} raised after {elapsed_ms:.1f}ms"
            )
            # Must be answered inside CORS to keep its headers.
            response = error_response(500, "Internal server error")
        else:
            elapsed_ms = (time.perf_counter() - started) * 1000
            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                f"[{request_id}] {request.method} {request.url.path} "
                f"-> {response.status_code} in {elapsed_ms:.1f}ms"
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
