"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for negotiation and routing errors
- Settings and the dependency container

The errors and result modules have NO dependencies on other application layers.
"""

from src.core.errors import (
    DomainError,
    NotAcceptableError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotAcceptableError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
