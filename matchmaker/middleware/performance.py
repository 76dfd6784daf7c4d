"""Request timing middleware: structured access log per request."""

import time
import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp
from structlog import contextvars as structlog_contextvars

logger = structlog.get_logger(__name__)


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Binds a request id to the log context and logs each request's outcome."""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        """
        Initialize performance middleware.

        Args:
            app: ASGI application
            slow_request_threshold: Seconds after which a request is logged as slow
        """
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex

        structlog_contextvars.clear_contextvars()
        structlog_contextvars.bind_contextvars(
            request_id=request_id, method=request.method, path=request.url.path
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                duration_ms=round((time.perf_counter() - start_time) * 1000),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        duration = time.perf_counter() - start_time
        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000),
        )

        if duration > self.slow_request_threshold:
            logger.warning(
                "Slow request detected",
                duration_seconds=round(duration, 3),
                threshold=self.slow_request_threshold,
            )

        response.headers["X-Response-Time"] = f"{duration:.3f}s"
        response.headers["X-Request-ID"] = request_id
        return response
