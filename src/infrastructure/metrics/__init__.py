"""Metrics adapters implementing MetricsProtocol."""

from src.infrastructure.metrics.prometheus_adapter import PrometheusMetrics

__all__ = ["PrometheusMetrics"]
