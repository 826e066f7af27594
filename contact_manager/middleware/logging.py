"""
Contact Manager Backend — Request Logging Middleware
======================================================

What:  One access-log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client address at a level chosen by status class.
Who:   Applied to every request via Starlette middleware.
When:  Inside RequestIDMiddleware, so the correlation ID is already set.

Line format:
    GET /contacts/search 200 4.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are never logged; they carry contact PII.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from contact_manager.middleware.request_id import request_id_var

logger = logging.getLogger("contact_manager.access")

# Probe endpoints polled by orchestrators
QUIET_PATHS = frozenset({"/health", "/contacts/ping"})


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request with its response status and duration in milliseconds.

    Probe paths in QUIET_PATHS are passed through without logging.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
