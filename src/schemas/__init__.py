"""Request and response schemas for the versioned API."""

from src.schemas.greeting_schemas import (
    DepartResponse,
    GreetingResponse,
    GreetingResponseV2,
)

__all__ = [
    "DepartResponse",
    "GreetingResponse",
    "GreetingResponseV2",
]
