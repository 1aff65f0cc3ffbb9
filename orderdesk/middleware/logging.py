### Description ###
# OrderDesk - Local-first Order Intake
# - Request Logging Middleware -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Request Logging Middleware

Logs every API request with method, path, status code and response time,
and tags the response with a short request ID.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from orderdesk.utils import setup_logger

request_logger = setup_logger("orderdesk_requests", log_to_console=False)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging all API requests

    Captures:
    - Request ID (UUID prefix, echoed in X-Request-ID)
    - Method and path
    - Response status
    - Response time
    """

    EXCLUDE = (
        "/health",
        "/api/docs",
        "/api/openapi.json",
        "/favicon.ico",
    )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = (time.time() - start_time) * 1000
            request_logger.error(f"[{request_id}] {method} {path} failed after {elapsed_ms:.0f}ms: {e}")
            raise

        elapsed_ms = (time.time() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id

        if not path.startswith(self.EXCLUDE):
            request_logger.info(f"[{request_id}] {method} {path} -> {response.status_code} ({elapsed_ms:.0f}ms)")

        return response
