"""Versioned route table.

The route table is the single source of truth for versioned endpoints. Each
entry binds one (path, media type) pair to one handler. Lookups are explicit;
nothing is resolved through framework method overloading.

Invariants enforced at registration/validation time:
    - exactly one route per (path, media type), compared case-insensitively
    - exactly one default route per path (implicit when a path has one route)

Violations raise RouteConfigurationError, which aborts application startup.

Usage:
    table = RouteTable()
    table.register(
        VersionedRoute(
            path="/flip/greeting/greet",
            media_type="application/vnd.flipfoundry.greeting.v2+json",
            resource="greeting",
            handler=greet_v2.handle,
            response_model=GreetingResponseV2,
            default=True,
        )
    )
    table.validate()
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects import Deprecation


class RouteConfigurationError(Exception):
    """Raised when the route table violates a registration invariant."""


@dataclass(frozen=True, kw_only=True)
class HandlerContext:
    """Inputs handed to a route handler.

    Attributes:
        query: Query parameters (single value per name).
        correlation_id: Request correlation id, if any.
        logger: Request-scoped logger.
    """

    query: Mapping[str, str] = field(default_factory=dict)
    correlation_id: str | None = None
    logger: LoggerProtocol


type RouteHandler = Callable[[HandlerContext], Result[BaseModel, DomainError]]


@dataclass(frozen=True, kw_only=True)
class VersionedRoute:
    """One versioned representation of a resource.

    Attributes:
        path: Absolute route path (e.g., "/flip/greeting/greet").
        media_type: Media type served, returned verbatim as Content-Type.
        resource: Logical resource used for metrics (e.g., "greeting").
        handler: Callable producing the response body.
        response_model: Pydantic model of the body (OpenAPI docs).
        default: Serve this route when the request has no Accept header.
        deprecation: Deprecation metadata, None for current routes.
        summary: Short description for OpenAPI docs.
    """

    path: str
    media_type: str
    resource: str
    handler: RouteHandler
    response_model: type[BaseModel]
    default: bool = False
    deprecation: Deprecation | None = None
    summary: str = ""

    @property
    def key(self) -> tuple[str, str]:
        """Route key (path, lower-cased media type)."""
        return (self.path, self.media_type.lower())

    @property
    def deprecated(self) -> bool:
        """Whether the route carries deprecation metadata."""
        return self.deprecation is not None


class RouteTable:
    """Registry of versioned routes keyed by (path, media type).

    Registration order is preserved per path and is the tie-breaker used by
    content negotiation.
    """

    def __init__(self, routes: Iterable[VersionedRoute] = ()) -> None:
        self._routes: dict[tuple[str, str], VersionedRoute] = {}
        self._by_path: dict[str, list[VersionedRoute]] = {}
        for route in routes:
            self.register(route)

    def register(self, route: VersionedRoute) -> None:
        """Add a route to the table.

        Args:
            route: Route to register.

        Raises:
            RouteConfigurationError: If the (path, media type) pair is already
                registered, or the path already has a default route.
        """
        if route.key in self._routes:
            raise RouteConfigurationError(
                f"Duplicate route for {route.path} producing {route.media_type}"
            )

        siblings = self._by_path.setdefault(route.path, [])
        if route.default and any(existing.default for existing in siblings):
            raise RouteConfigurationError(
                f"More than one default media type registered for {route.path}"
            )

        self._routes[route.key] = route
        siblings.append(route)

    def validate(self) -> None:
        """Check every path resolves a default route.

        Raises:
            RouteConfigurationError: If a path with several routes declares
                no default.
        """
        for path in self._by_path:
            self.default_for(path)

    def paths(self) -> list[str]:
        """Registered paths in registration order."""
        return list(self._by_path)

    def routes_for(self, path: str) -> list[VersionedRoute]:
        """Routes of a path in registration order (empty if unknown)."""
        return list(self._by_path.get(path, ()))

    def default_for(self, path: str) -> VersionedRoute:
        """Return the route served when no Accept header is sent.

        Args:
            path: Registered path.

        Returns:
            VersionedRoute: The path's default route.

        Raises:
            RouteConfigurationError: If the path has several routes and none
                is marked default.
            KeyError: If the path is not registered.
        """
        routes = self._by_path[path]
        for route in routes:
            if route.default:
                return route
        if len(routes) == 1:
            return routes[0]
        raise RouteConfigurationError(f"No default media type registered for {path}")

    def get(self, path: str, media_type: str) -> VersionedRoute | None:
        """Exact lookup by route key."""
        return self._routes.get((path, media_type.lower()))

    def resources(self) -> list[str]:
        """Distinct logical resources in registration order."""
        return list(dict.fromkeys(route.resource for route in self))

    def describe(self) -> list[dict[str, Any]]:
        """Summarize the table for startup logging."""
        return [
            {
                "path": route.path,
                "media_type": route.media_type,
                "default": route is self.default_for(route.path),
                "deprecated": route.deprecated,
            }
            for route in self
        ]

    def __iter__(self) -> Iterator[VersionedRoute]:
        for routes in self._by_path.values():
            yield from routes

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: object) -> bool:
        return path in self._by_path
