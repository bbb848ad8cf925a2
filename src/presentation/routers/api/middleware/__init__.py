"""HTTP middleware."""

from src.presentation.routers.api.middleware.correlation_middleware import (
    CorrelationMiddleware,
    get_correlation_id,
)

__all__ = ["CorrelationMiddleware", "get_correlation_id"]
