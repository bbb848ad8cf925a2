"""Result types for railway-oriented programming.

Negotiation and dispatch can fail in expected ways (no acceptable
representation, unknown path). Those outcomes are returned as values rather
than raised, so the HTTP boundary decides how each one is rendered.

Usage:
    def pick(path: str) -> Result[VersionedRoute, DomainError]:
        if path not in table:
            return Failure(error=NotFoundError(...))
        return Success(value=table[path])

    match pick("/flip/greeting/greet"):
        case Success(value=route):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
