"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Metrics (prometheus-client)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.metrics_protocol import MetricsProtocol


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Every line carries the service name and instance id.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from socket import gethostname

    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    logger = ConsoleAdapter(use_json=use_json, level=settings.log_level)
    return logger.bind(
        service=settings.app_name,
        instance=settings.instance_id or gethostname(),
    )


# ============================================================================
# Metrics (Application-Scoped)
# ============================================================================


@lru_cache()
def get_metrics() -> "MetricsProtocol":
    """Return the application-scoped metrics singleton.

    Series for every resource of the route table are registered up front,
    so /metrics shows them at zero before the first request.

    Returns:
        MetricsProtocol: PrometheusMetrics with a private registry.
    """
    from src.core.container.versioning import get_route_table
    from src.infrastructure.metrics.prometheus_adapter import PrometheusMetrics

    return PrometheusMetrics(resources=get_route_table().resources())
