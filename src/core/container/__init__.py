"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_dispatcher, ...

The container is organized into modules:
- infrastructure: Logging and metrics
- versioning: Greeting counter, route table, dispatcher
"""

from src.core.container.infrastructure import get_logger, get_metrics
from src.core.container.versioning import (
    get_dispatcher,
    get_greeting_counter,
    get_route_table,
)

__all__ = [
    "get_dispatcher",
    "get_greeting_counter",
    "get_logger",
    "get_metrics",
    "get_route_table",
]
