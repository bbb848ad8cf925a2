"""Common error classes used by the versioned dispatcher.

Error Types:
- NotAcceptableError: Requested media type(s) not registered for a path
- NotFoundError: Path has no registered routes
- ValidationError: Query parameter validation failures

Usage:
    from src.core.errors import NotAcceptableError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(NotAcceptableError(
        code=ErrorCode.MEDIA_TYPE_NOT_ACCEPTABLE,
        message="No representation for application/json",
        requested="application/json",
        available=("application/vnd.flipfoundry.greeting.v2+json",),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotAcceptableError(DomainError):
    """No registered representation satisfies the Accept header.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        requested: Raw Accept header value.
        available: Media types registered for the path.
        details: Additional context.
    """

    requested: str
    available: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (route, media type).
        resource_id: Identifier of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None
