"""Errors returned by the versioned dispatcher.

Exports:
    ApplicationError: Dispatch failure handed to the presentation layer
    ApplicationErrorCode: Failure category, mapped to an HTTP status
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]
