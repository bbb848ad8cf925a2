"""API tests for error responses and correlation ids.

Covers:
- 406 for unregistered media types (scenario E)
- 404 for unknown paths, 405 for wrong methods
- 500 for handler exceptions (metrics recorded as failed)
- X-Correlation-ID reuse, generation and echo on every response
"""

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from src.application.versioning import RouteTable, VersionedDispatcher, VersionedRoute
from src.core.container import get_dispatcher
from src.infrastructure.metrics.prometheus_adapter import PrometheusMetrics
from src.schemas.greeting_schemas import GreetingResponseV2

GREET = "/flip/greeting/greet"
GREETING_V1 = "application/vnd.flipfoundry.greeting.v1+json"
GREETING_V2 = "application/vnd.flipfoundry.greeting.v2+json"
ERROR_FIELDS = {"timestamp", "status", "error", "message", "path", "traceId"}


@pytest.mark.api
class TestNotAcceptable:
    """Tests for 406 responses."""

    def test_scenario_e_generic_json(self, client):
        """application/json never silently picks a version."""
        response = client.get(GREET, headers={"Accept": "application/json"})

        assert response.status_code == 406
        body = response.json()
        assert set(body) == ERROR_FIELDS
        assert body["status"] == 406
        assert body["error"] == "Not Acceptable"
        assert "application/json" in body["message"]
        assert body["path"] == GREET
        assert body["traceId"] == response.headers["X-Correlation-ID"]

    def test_unknown_version(self, client):
        """A version that was never registered is not acceptable."""
        response = client.get(
            GREET, headers={"Accept": "application/vnd.flipfoundry.greeting.v3+json"}
        )

        assert response.status_code == 406

    def test_refused_default_with_wildcard(self, client):
        """q=0 on the default refuses it even when */* is present."""
        response = client.get(GREET, headers={"Accept": f"{GREETING_V2};q=0, */*"})

        assert response.status_code == 406

    def test_not_acceptable_records_no_metrics(self, client, metrics):
        """Negotiation failures never reach the metrics."""
        client.get(GREET, headers={"Accept": "application/json"})

        assert metrics.sample("dispatcher_requests_total", "greeting") == 0.0


@pytest.mark.api
class TestRoutingErrors:
    """Tests for framework routing errors."""

    def test_unknown_path_is_404(self, client):
        """Unknown paths use the uniform error body."""
        response = client.get("/flip/greeting/unknown")

        assert response.status_code == 404
        body = response.json()
        assert set(body) == ERROR_FIELDS
        assert body["error"] == "Not Found"
        assert body["path"] == "/flip/greeting/unknown"
        assert body["traceId"] == response.headers["X-Correlation-ID"]

    def test_wrong_method_is_405(self, client):
        """Only GET is routed for versioned paths."""
        response = client.post(GREET)

        assert response.status_code == 405
        assert response.json()["error"] == "Method Not Allowed"
        assert "GET" in response.headers["Allow"]


@pytest.mark.api
class TestHandlerException:
    """Tests for unexpected handler failures."""

    @pytest.fixture
    def failing_metrics(self):
        return PrometheusMetrics(resources=["greeting"])

    @pytest.fixture
    def failing_client(self, app, mock_logger, failing_metrics):
        def explode(context):
            raise RuntimeError("handler exploded")

        table = RouteTable(
            [
                VersionedRoute(
                    path=GREET,
                    media_type=GREETING_V2,
                    resource="greeting",
                    handler=explode,
                    response_model=GreetingResponseV2,
                    default=True,
                )
            ]
        )
        dispatcher = VersionedDispatcher(
            routes=table, metrics=failing_metrics, logger=mock_logger
        )
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client

    def test_returns_500_with_uniform_body(self, failing_client):
        """Handler exceptions become 500 without leaking details."""
        response = failing_client.get(GREET, headers={"X-Correlation-ID": "boom-1"})

        assert response.status_code == 500
        body = response.json()
        assert set(body) == ERROR_FIELDS
        assert body["error"] == "Internal Server Error"
        assert "exploded" not in body["message"]
        assert body["traceId"] == "boom-1"
        assert response.headers["X-Correlation-ID"] == "boom-1"

    def test_records_failed_metrics(self, failing_client, failing_metrics, mock_logger):
        """Metrics complete as failed and the failure is logged."""
        failing_client.get(GREET)

        assert failing_metrics.sample("dispatcher_requests_total", "greeting") == 1.0
        assert failing_metrics.sample("dispatcher_errors_total", "greeting") == 1.0
        assert (
            failing_metrics.sample(
                "dispatcher_request_duration_seconds_count", "greeting"
            )
            == 1.0
        )
        mock_logger.error.assert_called_once()


@pytest.mark.api
class TestCorrelationId:
    """Tests for X-Correlation-ID handling."""

    def test_inbound_id_is_echoed(self, client):
        """A supplied correlation id is returned unchanged."""
        response = client.get(GREET, headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_id_is_generated_when_absent(self, client):
        """A UUID is generated when the client sends none."""
        response = client.get(GREET)

        UUID(response.headers["X-Correlation-ID"])  # Raises ValueError if invalid

    def test_each_request_gets_its_own_id(self, client):
        """Generated ids differ between requests."""
        first = client.get(GREET).headers["X-Correlation-ID"]
        second = client.get(GREET).headers["X-Correlation-ID"]

        assert first != second

    def test_id_reaches_the_dispatcher_logger(self, client, mock_logger):
        """The dispatcher binds the correlation id to its logger."""
        client.get(GREET, headers={"X-Correlation-ID": "bound-1"})

        mock_logger.bind.assert_any_call(correlation_id="bound-1", path=GREET)


@pytest.mark.api
class TestMetricsRecording:
    """Tests for per-resource metrics through the HTTP layer."""

    def test_versions_share_resource_metrics(self, client, metrics):
        """v1 and v2 greet count toward the same resource."""
        client.get(GREET, headers={"Accept": GREETING_V1})
        client.get(GREET, headers={"Accept": GREETING_V2})
        client.get("/flip/departing/depart")

        assert metrics.sample("dispatcher_requests_total", "greeting") == 2.0
        assert metrics.sample("dispatcher_requests_total", "departing") == 1.0
        assert metrics.sample("dispatcher_errors_total", "greeting") == 0.0
