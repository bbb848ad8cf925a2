"""Prometheus metrics adapter.

Implements MetricsProtocol with prometheus-client. Each adapter owns its
CollectorRegistry, so several instances (one per test) never collide on
metric names.

Metrics (label: resource):
    dispatcher_requests_total            Counter
    dispatcher_request_duration_seconds  Histogram
    dispatcher_errors_total              Counter
"""

from collections.abc import Iterable

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Handlers complete in microseconds; buckets stop well below HTTP latencies.
_DURATION_BUCKETS = (0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0)


class PrometheusMetrics:
    """Per-resource request metrics backed by prometheus-client.

    Args:
        resources: Resources to pre-register so their series exist at zero
            before the first request.
        registry: Registry to register on. A private one is created when
            omitted.
    """

    def __init__(
        self,
        resources: Iterable[str] = (),
        *,
        registry: CollectorRegistry | None = None,
    ) -> None:
        self.registry = registry or CollectorRegistry()
        self._requests = Counter(
            "dispatcher_requests",
            "Total number of dispatched requests",
            ["resource"],
            registry=self.registry,
        )
        self._duration = Histogram(
            "dispatcher_request_duration_seconds",
            "Duration of handler execution",
            ["resource"],
            buckets=_DURATION_BUCKETS,
            registry=self.registry,
        )
        self._errors = Counter(
            "dispatcher_errors",
            "Total number of failed handler executions",
            ["resource"],
            registry=self.registry,
        )
        for resource in resources:
            self._requests.labels(resource=resource)
            self._duration.labels(resource=resource)
            self._errors.labels(resource=resource)

    def record_request(self, resource: str) -> None:
        self._requests.labels(resource=resource).inc()

    def record_duration(
        self, resource: str, duration_seconds: float, *, success: bool
    ) -> None:
        self._duration.labels(resource=resource).observe(duration_seconds)
        if not success:
            self._errors.labels(resource=resource).inc()

    def render(self) -> tuple[bytes, str]:
        """Render the registry in Prometheus text format."""
        return generate_latest(self.registry), CONTENT_TYPE_LATEST

    def sample(self, name: str, resource: str) -> float:
        """Read one sample value (0.0 when absent).

        Args:
            name: Sample name, e.g. "dispatcher_requests_total".
            resource: Resource label value.
        """
        value = self.registry.get_sample_value(name, {"resource": resource})
        return value or 0.0
