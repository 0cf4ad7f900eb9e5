"""Request logging for the Show Vote API.

Each request is logged on arrival and on completion with its elapsed
time. The correlation id (the caller's X-Correlation-ID, or a fresh one)
is echoed in the response headers.
"""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from showvote.infrastructure.observability.correlation import (
    CORRELATION_HEADER,
    correlation_from_headers,
)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        correlation_id = correlation_from_headers(request.headers)
        log = structlog.get_logger().bind(
            method=request.method,
            path=request.url.path,
            has_identity=bool(request.cookies),
        )
        started = time.perf_counter()
        log.info("request_started")

        try:
            response = await call_next(request)
        except Exception:
            log.exception("request_failed", duration_ms=_elapsed_ms(started))
            raise

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
