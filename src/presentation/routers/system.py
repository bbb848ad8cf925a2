"""System router for non-versioned application endpoints.

Provides external-facing system endpoints that are not part of the
versioned API contract: root, health groups, metrics and configuration.

These endpoints are lightweight and side-effect free; they never go through
the versioned dispatcher and never touch the dispatcher metrics.
"""

from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_metrics, get_route_table

UP = "UP"
OUT_OF_SERVICE = "OUT_OF_SERVICE"

system_router = APIRouter(tags=["System"])


def _is_ready(request: Request) -> bool:
    # Set by the application lifespan once startup has completed
    return bool(getattr(request.app.state, "ready", False))


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health(request: Request) -> JSONResponse:
    """Aggregate health for monitoring and load balancers.

    Returns:
        JSONResponse: Overall status, per-component status and the
            available health groups. 503 while the service is not ready.
    """
    ready = _is_ready(request)
    readiness_state = UP if ready else OUT_OF_SERVICE
    components: dict[str, Any] = {
        "livenessState": {"status": UP},
        "readinessState": {"status": readiness_state},
        "routeTable": {
            "status": UP,
            "details": {
                "paths": len(get_route_table().paths()),
                "routes": len(get_route_table()),
            },
        },
    }
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": readiness_state,
            "components": components,
            "groups": ["liveness", "readiness"],
        },
    )


@system_router.get("/health/liveness")
async def liveness() -> dict[str, str]:
    """Liveness probe: the process is running and serving requests."""
    return {"status": UP}


@system_router.get("/health/readiness")
async def readiness(request: Request) -> JSONResponse:
    """Readiness probe.

    Returns:
        JSONResponse: {"status": "UP"} once startup has completed,
            {"status": "OUT_OF_SERVICE"} with 503 before that and
            during shutdown.
    """
    if _is_ready(request):
        return JSONResponse(content={"status": UP})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": OUT_OF_SERVICE},
    )


@system_router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus text exposition of the dispatcher metrics."""
    body, content_type = get_metrics().render()
    return Response(content=body, media_type=content_type)


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Configuration debug endpoint (development only).

    Returns configuration information for debugging purposes. In
    non-development environments this endpoint is disabled.

    Returns:
        JSONResponse: Configuration details (sanitized) or 403 in
            non-development environments.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "docs_enabled": settings.docs_enabled,
            },
            "versioning": {
                "media_type_namespace": settings.media_type_namespace,
                "greeting_base_path": settings.greeting_base_path,
                "departing_base_path": settings.departing_base_path,
                "legacy_depart_sunset": (
                    settings.legacy_depart_sunset.isoformat()
                    if settings.legacy_depart_sunset
                    else None
                ),
                "routes": get_route_table().describe(),
            },
            "logging": {
                "level": settings.log_level,
                "correlation_header": settings.correlation_header,
            },
        }
    )
