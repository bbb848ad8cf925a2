"""Base class of the errors returned (never raised) by negotiation and handlers.

A DomainError describes an expected way for a request to fail: no acceptable
representation, unknown path, invalid query parameter. It travels inside
Failure(...) up to the dispatcher, which wraps it in an ApplicationError for
the HTTP boundary.

Subclasses add typed context:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class NotAcceptableError(DomainError):
        requested: str
        available: tuple[str, ...] = ()
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Expected request failure, carried as data.

    Attributes:
        code: Machine-readable ErrorCode.
        message: Human-readable message, safe to show to clients.
        details: Optional string context (e.g., supported media types).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
