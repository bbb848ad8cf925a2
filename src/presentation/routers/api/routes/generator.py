"""Route generator for the versioned route table.

Registers one FastAPI GET endpoint per RouteTable path. The endpoint does no
version selection itself: it hands path, Accept header and query to the
VersionedDispatcher and translates the Result into an HTTP response.

Functions:
    register_versioned_routes: Generate all endpoints from the route table
    _build_responses: Build the OpenAPI responses dict for a path

Usage:
    from src.core.container import get_route_table
    from src.presentation.routers.api.routes.generator import register_versioned_routes

    versioned_router = APIRouter()
    register_versioned_routes(versioned_router, get_route_table())

Reference:
    - docs/api/versioning.md
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from src.application.versioning import (
    DispatchRequest,
    RouteTable,
    VersionedDispatcher,
    VersionedRoute,
)
from src.core.container import get_dispatcher
from src.core.result import Failure, Success
from src.presentation.routers.api.errors import ErrorResponse, ErrorResponseBuilder
from src.presentation.routers.api.middleware.correlation_middleware import (
    get_correlation_id,
)


def register_versioned_routes(router: APIRouter, routes: RouteTable) -> None:
    """Generate FastAPI endpoints from the route table.

    A path is marked deprecated in OpenAPI only when every representation
    of it is deprecated.

    Args:
        router: FastAPI APIRouter to register endpoints on
        routes: Validated route table

    Example:
        >>> router = APIRouter()
        >>> register_versioned_routes(router, get_route_table())
        >>> # router now has one GET endpoint per versioned path
    """
    for path in routes.paths():
        variants = routes.routes_for(path)
        router.add_api_route(
            path=path,
            endpoint=_build_endpoint(path),
            methods=["GET"],
            response_class=JSONResponse,
            summary=routes.default_for(path).summary,
            description=_describe(variants),
            operation_id=_operation_id(path),
            responses=_build_responses(variants),
            deprecated=all(route.deprecated for route in variants),
        )


def _build_endpoint(path: str) -> Callable[..., Response]:
    """Build the endpoint function bound to one path."""

    def endpoint(
        request: Request,
        dispatcher: VersionedDispatcher = Depends(get_dispatcher),
    ) -> Response:
        correlation_id = (
            getattr(request.state, "correlation_id", None) or get_correlation_id()
        )
        result = dispatcher.dispatch(
            DispatchRequest(
                path=path,
                accept=request.headers.get("accept"),
                query=dict(request.query_params),
                correlation_id=correlation_id,
            )
        )

        match result:
            case Success(value=dispatched):
                return JSONResponse(
                    content=dispatched.body.model_dump(mode="json"),
                    media_type=dispatched.media_type,
                    headers=dispatched.headers,
                )
            case Failure(error=error):
                return ErrorResponseBuilder.from_application_error(
                    error=error,
                    request=request,
                    trace_id=correlation_id,
                )

    return endpoint


def _operation_id(path: str) -> str:
    """get_flip_greeting_greet style operation id."""
    return "get" + path.replace("/", "_").replace("-", "_")


def _describe(variants: list[VersionedRoute]) -> str:
    """Markdown list of the representations served by a path."""
    lines = ["Representations (select with the Accept header):", ""]
    for route in variants:
        line = f"- `{route.media_type}`"
        if route.default:
            line += " (default)"
        if route.deprecation is not None:
            line += f" - {route.deprecation.warning_text()}"
        lines.append(line)
    return "\n".join(lines)


def _build_responses(
    variants: list[VersionedRoute],
) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict for a path.

    Example:
        >>> _build_responses(table.routes_for("/flip/departing/depart"))
        {
            200: {"description": "...", "content": {"application/vnd...": {...}}},
            404: {...},
            406: {...},
        }
    """
    return {
        200: {
            "description": "Representation selected by the Accept header",
            "content": {
                route.media_type: {"schema": route.response_model.model_json_schema()}
                for route in variants
            },
        },
        404: {"model": ErrorResponse, "description": "Path not registered"},
        406: {"model": ErrorResponse, "description": "No acceptable representation"},
    }
