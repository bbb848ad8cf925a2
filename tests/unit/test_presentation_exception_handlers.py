"""Unit tests for the global exception handlers.

Architecture:
- Handlers called directly with mocked Request objects
- Logger patched at the container boundary
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException

from src.presentation.routers.api.errors.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


def _request(correlation_id="corr-1"):
    request = MagicMock()
    request.url.path = "/flip/greeting/greet"
    request.method = "GET"
    request.state.correlation_id = correlation_id
    return request


def _body(response):
    return json.loads(bytes(response.body).decode())


@pytest.mark.unit
class TestHttpExceptionHandler:
    """Test http_exception_handler."""

    @pytest.mark.asyncio
    async def test_renders_uniform_body(self):
        """Test status, reason and detail are carried over."""
        response = await http_exception_handler(
            _request(), HTTPException(status_code=404, detail="Not Found")
        )

        body = _body(response)
        assert response.status_code == 404
        assert body["error"] == "Not Found"
        assert body["message"] == "Not Found"
        assert body["traceId"] == "corr-1"
        assert response.headers["X-Correlation-ID"] == "corr-1"

    @pytest.mark.asyncio
    async def test_keeps_exception_headers(self):
        """Test headers such as Allow survive."""
        response = await http_exception_handler(
            _request(),
            HTTPException(status_code=405, detail="Method Not Allowed", headers={"Allow": "GET"}),
        )

        assert response.headers["Allow"] == "GET"


@pytest.mark.unit
class TestValidationExceptionHandler:
    """Test validation_exception_handler."""

    @pytest.mark.asyncio
    async def test_flattens_field_errors(self):
        """Test field locations and messages end up in the message."""
        exc = RequestValidationError(
            [
                {
                    "loc": ("query", "name"),
                    "msg": "String should have at most 256 characters",
                    "type": "string_too_long",
                }
            ]
        )

        response = await validation_exception_handler(_request(), exc)

        body = _body(response)
        assert response.status_code == 422
        assert body["message"] == (
            "Request validation failed: query.name: "
            "String should have at most 256 characters"
        )


@pytest.mark.unit
class TestGenericExceptionHandler:
    """Test generic_exception_handler."""

    @pytest.mark.asyncio
    async def test_returns_500_and_logs(self):
        """Test unexpected exceptions are logged and hidden from clients."""
        logger = MagicMock()
        error = ValueError("secret internals")

        with patch(
            "src.presentation.routers.api.errors.exception_handlers.get_logger",
            return_value=logger,
        ):
            response = await generic_exception_handler(_request("corr-500"), error)

        body = _body(response)
        assert response.status_code == 500
        assert "secret internals" not in body["message"]
        assert body["traceId"] == "corr-500"
        assert response.headers["X-Correlation-ID"] == "corr-500"
        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["error"] is error
        assert logger.error.call_args.kwargs["correlation_id"] == "corr-500"
