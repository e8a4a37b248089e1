"""FastAPI middleware: correlation IDs and error handling."""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

import structlog
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

if TYPE_CHECKING:
    from fastapi import FastAPI, Request, Response

logger = structlog.get_logger()

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Binds the caller's X-Correlation-ID (or a fresh one) to the structlog context."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:12]

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id, path=request.url.path)

        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed",
            status=response.status_code,
            media_type=response.headers.get("content-type"),
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )

        response.headers[CORRELATION_HEADER] = correlation_id
        return response


def _error_response(request: Request, status_code: int, error: str, detail: str) -> JSONResponse:
    # Unhandled errors are answered outside the middleware stack, so the
    # correlation id has to be attached here as well.
    correlation_id = (
        structlog.contextvars.get_contextvars().get("correlation_id")
        or request.headers.get(CORRELATION_HEADER)
    )
    headers = {CORRELATION_HEADER: correlation_id} if correlation_id else None
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail, "correlation_id": correlation_id},
        headers=headers,
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Register handlers that turn uncaught errors into structured JSON."""

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("Rejected request", error=str(exc))
        return _error_response(request, 400, "bad_request", str(exc))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception", error=str(exc), exc_info=exc)
        return _error_response(
            request, 500, "internal_server_error", "An unexpected error occurred"
        )
