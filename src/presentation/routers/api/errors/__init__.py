"""Error response schema, builder and global exception handlers.

Exports:
    ErrorResponse: Uniform error response body
    ErrorResponseBuilder: Utility for building error responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.errors.error_response import ErrorResponse
from src.presentation.routers.api.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "ErrorResponse",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
