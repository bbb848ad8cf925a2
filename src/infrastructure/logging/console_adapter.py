"""Console logging adapter.

Writes one structured line per event to stdout using structlog.
- Development: human-readable console renderer with colors
- Testing/CI/Production: JSON renderer, one object per line

Context bound with structlog.contextvars is merged into every line.

Implementation does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _configure(*, use_json: bool, level: str) -> None:
    renderer: structlog.types.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


def _error_fields(error: Exception | None, context: dict[str, Any]) -> dict[str, Any]:
    # Exceptions are flattened so JSON lines stay serializable
    if error is not None:
        context["error_type"] = type(error).__name__
        context["error_message"] = str(error)
    return context


class ConsoleAdapter:
    """Console logger.

    Args:
        use_json (bool): JSON output when True, human-readable when False.
        level (str): Minimum level name (DEBUG, INFO, ...).

    Example:
        >>> logger = ConsoleAdapter(use_json=True, level="DEBUG")
        >>> logger.bind(correlation_id="abc").info("Request completed", status_code=200)
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        _configure(use_json=use_json, level=level)
        self._logger = structlog.get_logger()

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error, adding error_type/error_message when error is given."""
        self._logger.error(message, **_error_fields(error, context))

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical event, adding error_type/error_message when error is given."""
        self._logger.critical(message, **_error_fields(error, context))

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter whose lines all carry context.

        The original adapter is left unchanged.
        """
        bound_adapter = ConsoleAdapter.__new__(ConsoleAdapter)
        bound_adapter._logger = self._logger.bind(**context)
        return bound_adapter
