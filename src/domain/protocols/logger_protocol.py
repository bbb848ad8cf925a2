"""LoggerProtocol: the structured logging port.

Every call is a short constant message plus key-value context; values are
never interpolated into the message.

Levels used by the service:
    DEBUG     generated greeting text, counter values
    INFO      one line per request, negotiation failures
    WARNING   deprecated representation served (greeting v1)
    ERROR     handler failure, route scheduled for removal called
    CRITICAL  invalid route table at startup

Usage:
    from src.core.container import get_logger

    logger = get_logger().bind(correlation_id=correlation_id)
    logger.info("Request completed", status_code=200)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger implemented by infrastructure adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error.

        Args:
            message: Constant message text.
            error: Exception to describe; adapters add its type and message.
            **context: Structured key-value context.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event (same arguments as error())."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger carrying context on every line.

        The receiver is left unchanged.
        """
        ...
