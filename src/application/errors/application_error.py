"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
dispatch context. The presentation layer maps each code to an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_ACCEPTABLE,
        ...     message="No representation of /flip/greeting/greet for application/json",
        ... )
    """

    NOT_ACCEPTABLE = "not_acceptable"
    NOT_FOUND = "not_found"
    VALIDATION_FAILED = "validation_failed"
    HANDLER_FAILED = "handler_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
