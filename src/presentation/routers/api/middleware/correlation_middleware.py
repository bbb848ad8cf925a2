"""Correlation middleware: one correlation id and one log line per request.

- Reuses the inbound correlation header (X-Correlation-ID by default) or
  generates a UUID
- Echoes the id on the response
- Stores it on request.state.correlation_id for exception handlers
- Exposes get_correlation_id() for code running inside the request
- Logs one "Request completed" line with method, path, status and duration
"""

from __future__ import annotations

import time
from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.core.config import settings
from src.core.container import get_logger
from src.domain.protocols.logger_protocol import LoggerProtocol

correlation_id_context: ContextVar[str | None] = ContextVar(
    "correlation_id", default=None
)


def get_correlation_id() -> str | None:
    """Return the current correlation ID.

    Returns:
        str | None: The current request correlation ID, or None outside a request.
    """
    return correlation_id_context.get()


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a correlation ID to each request.

    Args:
        app: Wrapped ASGI application.
        header_name: Header read from the request and written to the response.
        logger: Logger for the per-request line (defaults to the app logger).
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        header_name: str | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        super().__init__(app)
        self.header_name = header_name or settings.correlation_header
        self._logger = logger

    @property
    def logger(self) -> LoggerProtocol:
        return self._logger or get_logger()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set and propagate the correlation ID around the downstream call.

        Args:
            request (Request): Incoming request.
            call_next (Callable[[Request], Awaitable[Response]]): Next handler.

        Returns:
            Response: Response with the correlation header added.
        """
        correlation_id = request.headers.get(self.header_name) or str(uuid4())
        correlation_id_context.set(correlation_id)
        request.state.correlation_id = correlation_id
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            self.logger.error(
                "Request failed",
                error=e,
                correlation_id=correlation_id,
                method=request.method,
                path=request.url.path,
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            )
            raise
        else:
            response.headers[self.header_name] = correlation_id
            self.logger.info(
                "Request completed",
                correlation_id=correlation_id,
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            )
            return response
        finally:
            # Clear context after request to prevent leakage
            correlation_id_context.set(None)
