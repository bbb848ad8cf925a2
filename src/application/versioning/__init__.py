"""Versioned endpoint dispatch.

Modules:
    route_table: VersionedRoute, RouteTable, RouteConfigurationError
    negotiation: negotiate() - Accept header -> route
    dispatcher: VersionedDispatcher - negotiate, run handler, record metrics
"""

from src.application.versioning.dispatcher import (
    DispatchRequest,
    DispatchResponse,
    VersionedDispatcher,
)
from src.application.versioning.negotiation import negotiate
from src.application.versioning.route_table import (
    HandlerContext,
    RouteConfigurationError,
    RouteTable,
    VersionedRoute,
)

__all__ = [
    "DispatchRequest",
    "DispatchResponse",
    "HandlerContext",
    "RouteConfigurationError",
    "RouteTable",
    "VersionedDispatcher",
    "VersionedRoute",
    "negotiate",
]
