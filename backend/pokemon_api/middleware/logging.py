"""
Pokemon API — Request Logging Middleware
=========================================

What:  One access-log line per request: method, path, status, duration,
       request id and client address.
Who:   Applied to every request; runs inside RequestIDMiddleware so the id
       is already set.

Example line:
    2024-01-15T12:00:00 [INFO] pokemon_api.access: PUT /api/pokemons/25 200 3.2ms [a1b2c3d4] from 127.0.0.1

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from pokemon_api.middleware.request_id import request_id_var

logger = logging.getLogger("pokemon_api.access")

# Polled every few seconds by orchestrators; logging them drowns real traffic
QUIET_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each completed request at a level chosen by status class.

        5xx → ERROR    (failed write, unexpected error)
        4xx → WARNING  (unknown id, missing fields, bad body)
        else → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            request_id_var.get(""),
            client_ip,
        )
        return response
