"""Versioned dispatch dependency factories.

Application-scoped singletons:
- GreetingCounter (shared v1 sequence)
- RouteTable (validated at construction, aborts startup on errors)
- VersionedDispatcher

Usage:
    # Presentation Layer (FastAPI Depends)
    from fastapi import Depends
    dispatcher: VersionedDispatcher = Depends(get_dispatcher)
"""

from functools import lru_cache

from src.application.greetings import GreetingCounter, build_routes
from src.application.versioning import (
    RouteConfigurationError,
    RouteTable,
    VersionedDispatcher,
)
from src.core.config import settings
from src.core.container.infrastructure import get_logger, get_metrics


@lru_cache()
def get_greeting_counter() -> GreetingCounter:
    """Return the process-wide v1 greeting counter."""
    return GreetingCounter()


@lru_cache()
def get_route_table() -> RouteTable:
    """Build and validate the route table from settings.

    Returns:
        RouteTable: Validated table.

    Raises:
        RouteConfigurationError: If the route definitions are inconsistent.
    """
    try:
        table = RouteTable(
            build_routes(
                counter=get_greeting_counter(),
                namespace=settings.media_type_namespace,
                greeting_base=settings.greeting_base_path,
                departing_base=settings.departing_base_path,
                legacy_depart_sunset=settings.legacy_depart_sunset,
            )
        )
        table.validate()
    except RouteConfigurationError as e:
        get_logger().critical("Invalid route table", error=e)
        raise
    return table


@lru_cache()
def get_dispatcher() -> VersionedDispatcher:
    """Return the application-scoped dispatcher."""
    return VersionedDispatcher(
        routes=get_route_table(),
        metrics=get_metrics(),
        logger=get_logger(),
    )
