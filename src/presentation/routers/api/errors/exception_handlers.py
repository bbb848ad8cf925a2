"""Global exception handlers for the FastAPI application.

Every exception reaching the HTTP boundary is rendered as the uniform
ErrorResponse body and carries the correlation header.

Handlers:
    http_exception_handler: Routing 404/405 and explicit HTTPException
    validation_exception_handler: RequestValidationError (422)
    generic_exception_handler: Anything else (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.middleware.correlation_middleware import (
    get_correlation_id,
)


def _trace_id(request: Request) -> str | None:
    # request.state survives after the middleware has reset the context var
    return getattr(request.state, "correlation_id", None) or get_correlation_id()


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to the uniform error response.

    Covers Starlette's own routing errors (unknown path 404, wrong method 405)
    as well as HTTPException raised by endpoints.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by routing, handler or dependency.

    Returns:
        JSONResponse with ErrorResponse body.

    Example:
        >>> # GET /flip/unknown
        >>> # {
        >>> #   "timestamp": "...",
        >>> #   "status": 404,
        >>> #   "error": "Not Found",
        >>> #   "message": "Not Found",
        >>> #   "path": "/flip/unknown",
        >>> #   "traceId": "..."
        >>> # }
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, StarletteHTTPException)

    return ErrorResponseBuilder.build(
        status_code=exc.status_code,
        message=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        request=request,
        trace_id=_trace_id(request),
        # Preserve headers such as Allow on 405
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to the uniform error response.

    Field errors are flattened into the message, e.g.
    "Request validation failed: path.item_id: Input should be a valid integer".
    """
    # Type narrowing: FastAPI registers this handler only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location}: {error.get('msg', 'invalid')}")

    message = "Request validation failed"
    if problems:
        message = f"{message}: {'; '.join(problems)}"

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message=message,
        request=request,
        trace_id=_trace_id(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception with request context and returns a 500 without
    leaking internals. Runs outside the correlation middleware, so the
    correlation header is added here.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with ErrorResponse body (500 Internal Server Error)
    """
    trace_id = _trace_id(request)

    get_logger().error(
        "Unhandled exception",
        error=exc,
        correlation_id=trace_id,
        method=request.method,
        path=str(request.url.path),
    )

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred. Please contact support with the trace ID.",
        request=request,
        trace_id=trace_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
