"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Custom markers are registered (unit, integration, api, smoke)
2. Every API test gets a fresh dispatcher (own counter, own metrics registry)
3. Dependency overrides never leak between tests
"""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.application.greetings import GreetingCounter, build_routes
from src.application.versioning import RouteTable, VersionedDispatcher
from src.core.container import get_dispatcher
from src.infrastructure.metrics.prometheus_adapter import PrometheusMetrics


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests across several layers"
    )
    config.addinivalue_line("markers", "api: API tests through the FastAPI app")
    config.addinivalue_line("markers", "smoke: End-to-end smoke tests")


@pytest.fixture
def mock_logger():
    """Logger double implementing LoggerProtocol.

    bind() returns the same mock so assertions see every call.
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def counter() -> GreetingCounter:
    """Fresh v1 greeting counter."""
    return GreetingCounter()


@pytest.fixture
def route_table(counter: GreetingCounter) -> RouteTable:
    """Validated route table with default settings."""
    table = RouteTable(build_routes(counter=counter))
    table.validate()
    return table


@pytest.fixture
def metrics(route_table: RouteTable) -> PrometheusMetrics:
    """Metrics adapter on a private registry."""
    return PrometheusMetrics(resources=route_table.resources())


@pytest.fixture
def dispatcher(
    route_table: RouteTable, metrics: PrometheusMetrics, mock_logger
) -> VersionedDispatcher:
    """Dispatcher wired to the fresh table and metrics."""
    return VersionedDispatcher(routes=route_table, metrics=metrics, logger=mock_logger)


@pytest.fixture
def app(dispatcher: VersionedDispatcher) -> Iterator:
    """The FastAPI app with the dispatcher dependency overridden."""
    from src.main import app as fastapi_app

    fastapi_app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    yield fastapi_app
    fastapi_app.dependency_overrides.pop(get_dispatcher, None)


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    """Test client with lifespan (startup/shutdown) executed."""
    with TestClient(app) as test_client:
        yield test_client
