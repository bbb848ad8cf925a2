"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires the
correlation middleware and exception handlers, and mounts the system and
versioned routers.

Startup validates the route table (a broken table aborts startup) and flips
readiness to UP; shutdown flips it back to OUT_OF_SERVICE.

Run locally:
    uvicorn src.main:app --host 0.0.0.0 --port 8080
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_logger, get_route_table
from src.presentation.routers import system_router, versioned_router
from src.presentation.routers.api.errors import register_exception_handlers
from src.presentation.routers.api.middleware import CorrelationMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Validate route table, log it, mark the service ready
    - Shutdown: Mark the service out of service

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    routes = get_route_table()
    routes.validate()

    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
        routes=routes.describe(),
    )
    app.state.ready = True

    yield

    app.state.ready = False
    logger.info("Application shutting down")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description=settings.api_description,
    version=settings.app_version,
    terms_of_service=settings.terms_of_service_url,
    contact=settings.openapi_contact,
    license_info=settings.openapi_license,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
    debug=settings.debug,
    lifespan=lifespan,
)
app.state.ready = False


def openapi_with_external_docs() -> dict[str, Any]:
    """Generate the OpenAPI schema once, adding the external docs link."""
    schema = FastAPI.openapi(app)
    external_docs = settings.openapi_external_docs
    if external_docs is not None:
        schema.setdefault("externalDocs", external_docs)
    return schema


app.openapi = openapi_with_external_docs  # type: ignore[method-assign]

# Wire correlation middleware (correlation id + one log line per request)
app.add_middleware(CorrelationMiddleware)

# Register global exception handlers (uniform error responses)
register_exception_handlers(app)

# System endpoints (root, health, metrics, config)
app.include_router(system_router)

# Versioned endpoints generated from the route table
app.include_router(versioned_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
