"""
Custom middleware for the API.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.utils.context import (
    clear_all_context,
    generate_correlation_id,
    set_correlation_id,
    set_user_id,
)

logger = logging.getLogger(__name__)

# Requests slower than this are logged at WARNING (provider calls included)
SLOW_REQUEST_SECONDS = 2.0


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each HTTP request with its status code and duration, and adds
    timing headers to the response.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_seconds = time.perf_counter() - start_time
        duration_ms = duration_seconds * 1000
        is_slow = duration_seconds > SLOW_REQUEST_SECONDS

        logger.log(
            logging.WARNING if is_slow else logging.INFO,
            f"Request completed: {request.method} {request.url.path} - "
            f"{response.status_code} ({duration_ms:.0f}ms)",
            extra={
                "event": "request_completed",
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": request.client.host if request.client else "unknown",
                "is_slow_request": is_slow,
                "is_error": response.status_code >= 400,
            },
        )

        response.headers["X-Process-Time-Ms"] = f"{duration_ms:.0f}"

        return response


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Sets the request context for the lifetime of a request.

    - Reuses the incoming X-Correlation-ID header or generates one
    - Picks up X-User-ID forwarded by the authenticating gateway
    - Echoes the correlation id in the response headers
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            correlation_id = request.headers.get("X-Correlation-ID")
            if correlation_id:
                set_correlation_id(correlation_id)
            else:
                correlation_id = generate_correlation_id()
            request.state.correlation_id = correlation_id

            user_id = request.headers.get("X-User-ID")
            if user_id:
                set_user_id(user_id)

            response = await call_next(request)
            response.headers["X-Correlation-ID"] = correlation_id

            return response

        finally:
            clear_all_context()
