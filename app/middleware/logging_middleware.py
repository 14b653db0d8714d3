"""Request/Response logging middleware."""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REDACTED_HEADERS = frozenset({"authorization", "cookie"})
QUIET_PATHS = frozenset({"/health", "/favicon.ico"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line when a request starts and one when it finishes.

    Every response carries ``X-Request-ID`` (echoed from the request when the
    client sent one) and ``X-Process-Time`` in seconds.
    """

    def __init__(
        self,
        app: Any,
        log_headers: bool = False,
        exclude_paths: frozenset[str] = QUIET_PATHS,
        slow_request_threshold: float = 2.0,
    ):
        super().__init__(app)
        self.log_headers = log_headers
        self.exclude_paths = exclude_paths
        self.slow_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path in self.exclude_paths or path.endswith(("/docs", "/redoc", "/openapi.json")):
            return await call_next(request)

        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        request.state.request_id = request_id
        context = {"request_id": request_id, "method": request.method, "path": path}

        started = {**context, "client_ip": request.client.host if request.client else None}
        if self.log_headers:
            started["headers"] = redact_headers(request.headers.items())
        logger.info("Request started", extra=started)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request crashed",
                extra={**context, "elapsed": round(time.perf_counter() - start_time, 4)},
            )
            raise

        elapsed = time.perf_counter() - start_time
        finished = {**context, "status_code": response.status_code, "elapsed": round(elapsed, 4)}

        if response.status_code >= 500:
            logger.error("Request finished", extra=finished)
        elif response.status_code >= 400:
            logger.warning("Request finished", extra=finished)
        else:
            logger.info("Request finished", extra=finished)

        if elapsed > self.slow_threshold:
            logger.warning(f"Slow request: {request.method} {path}", extra=finished)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


def redact_headers(headers: Any) -> dict[str, str]:
    """Copy headers, masking credentials."""
    return {
        key: "[REDACTED]" if key.lower() in REDACTED_HEADERS else value for key, value in headers
    }
