"""MetricsProtocol definition for request metrics.

The dispatcher records three measurements per logical resource
(greeting, departing):

    - one request count, before the handler runs
    - one duration observation, after the handler completes or raises
    - one error count, when the handler raised or returned a Failure

Resources are logical, not versioned: greet v1 and greet v2 both count
against "greeting".

Usage:
    metrics = get_metrics()
    metrics.record_request("greeting")
    metrics.record_duration("greeting", 0.0004, success=True)
"""

from typing import Protocol


class MetricsProtocol(Protocol):
    """Protocol for per-resource request metrics."""

    def record_request(self, resource: str) -> None:
        """Increment the request counter of a resource.

        Args:
            resource: Logical resource name (e.g., "greeting").
        """
        ...

    def record_duration(
        self, resource: str, duration_seconds: float, *, success: bool
    ) -> None:
        """Record handler duration and outcome.

        Args:
            resource: Logical resource name.
            duration_seconds: Wall-clock handler duration.
            success: False increments the resource's error counter.
        """
        ...

    def render(self) -> tuple[bytes, str]:
        """Render all metrics for scraping.

        Returns:
            Tuple of (payload, content type).
        """
        ...
