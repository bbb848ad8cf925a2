"""Greeting and departing resources.

Modules:
    counter: GreetingCounter - shared v1 sequence
    handlers: Route handlers per representation version
    routes: build_routes() - versioned route definitions
"""

from src.application.greetings.counter import GreetingCounter
from src.application.greetings.routes import (
    DEPARTING_RESOURCE,
    GREETING_RESOURCE,
    build_routes,
)

__all__ = [
    "DEPARTING_RESOURCE",
    "GREETING_RESOURCE",
    "GreetingCounter",
    "build_routes",
]
