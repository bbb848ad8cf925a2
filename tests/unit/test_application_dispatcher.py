"""Unit tests for VersionedDispatcher.

Tests cover:
- Successful dispatch (body, media type, deprecation headers)
- Failure mapping to ApplicationError codes
- Metrics: one request + one duration per dispatch, errors on failure
- Handler exceptions: logged, recorded as failed, re-raised
- Negotiation failures record no metrics

Architecture:
- Route table with stub handlers
- MagicMock metrics and logger (protocol-based)
"""

from unittest.mock import MagicMock

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.versioning import (
    DispatchRequest,
    RouteTable,
    VersionedDispatcher,
    VersionedRoute,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.value_objects import Deprecation
from src.schemas.greeting_schemas import GreetingResponseV2

PATH = "/flip/greeting/greet"
V1 = "application/vnd.flipfoundry.greeting.v1+json"
V2 = "application/vnd.flipfoundry.greeting.v2+json"


def _build(handler, *, deprecation=None, metrics=None, logger=None, timer=None):
    table = RouteTable(
        [
            VersionedRoute(
                path=PATH,
                media_type=V1,
                resource="greeting",
                handler=handler,
                response_model=GreetingResponseV2,
                deprecation=deprecation,
            ),
            VersionedRoute(
                path=PATH,
                media_type=V2,
                resource="greeting",
                handler=lambda context: Success(value=GreetingResponseV2(text="v2")),
                response_model=GreetingResponseV2,
                default=True,
            ),
        ]
    )
    logger = logger or MagicMock()
    logger.bind.return_value = logger
    kwargs = {"timer": timer} if timer is not None else {}
    return VersionedDispatcher(
        routes=table, metrics=metrics or MagicMock(), logger=logger, **kwargs
    )


def _ok(context):
    return Success(value=GreetingResponseV2(text="v1"))


@pytest.mark.unit
class TestDispatchSuccess:
    """Test successful dispatch."""

    def test_returns_body_and_matched_media_type(self):
        """Test dispatch returns the handler body with its media type."""
        dispatcher = _build(_ok)

        result = dispatcher.dispatch(DispatchRequest(path=PATH, accept=V1))

        assert isinstance(result, Success)
        assert result.value.body == GreetingResponseV2(text="v1")
        assert result.value.media_type == V1

    def test_missing_accept_uses_default(self):
        """Test dispatch without Accept serves the default route."""
        result = _build(_ok).dispatch(DispatchRequest(path=PATH))

        assert result.value.media_type == V2
        assert result.value.body.text == "v2"

    def test_handler_receives_query_and_correlation_id(self):
        """Test HandlerContext carries request inputs."""
        handler = MagicMock(return_value=Success(value=GreetingResponseV2(text="x")))
        dispatcher = _build(handler)

        dispatcher.dispatch(
            DispatchRequest(
                path=PATH, accept=V1, query={"name": "Alice"}, correlation_id="c-1"
            )
        )

        context = handler.call_args.args[0]
        assert context.query == {"name": "Alice"}
        assert context.correlation_id == "c-1"

    def test_deprecated_route_exposes_headers(self):
        """Test deprecation headers come with the response."""
        dispatcher = _build(_ok, deprecation=Deprecation(since="1.3"))

        result = dispatcher.dispatch(DispatchRequest(path=PATH, accept=V1))

        assert result.value.headers["Deprecation"] == "true"

    def test_current_route_has_no_extra_headers(self):
        """Test non-deprecated routes add no headers."""
        result = _build(_ok).dispatch(DispatchRequest(path=PATH, accept=V2))

        assert result.value.headers == {}


@pytest.mark.unit
class TestDispatchFailures:
    """Test failure mapping."""

    def test_not_acceptable(self):
        """Test unmatched media type maps to NOT_ACCEPTABLE."""
        result = _build(_ok).dispatch(
            DispatchRequest(path=PATH, accept="application/json")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_ACCEPTABLE
        assert "application/json" in result.error.message

    def test_not_found(self):
        """Test unknown path maps to NOT_FOUND."""
        result = _build(_ok).dispatch(DispatchRequest(path="/flip/unknown"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    def test_handler_validation_failure(self):
        """Test handler ValidationError maps to VALIDATION_FAILED."""

        def reject(context):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_QUERY_PARAMETER,
                    message="name too long",
                    field="name",
                )
            )

        result = _build(reject).dispatch(DispatchRequest(path=PATH, accept=V1))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.VALIDATION_FAILED
        assert result.error.domain_error.field == "name"


@pytest.mark.unit
class TestDispatchMetrics:
    """Test metrics recording contract."""

    def test_success_records_request_and_duration(self):
        """Test one request and one successful duration are recorded."""
        metrics = MagicMock()
        timer = MagicMock(side_effect=[10.0, 10.25])
        dispatcher = _build(_ok, metrics=metrics, timer=timer)

        dispatcher.dispatch(DispatchRequest(path=PATH, accept=V1))

        metrics.record_request.assert_called_once_with("greeting")
        metrics.record_duration.assert_called_once_with(
            "greeting", 0.25, success=True
        )

    def test_handler_failure_records_unsuccessful_duration(self):
        """Test Failure results count as errors."""
        metrics = MagicMock()

        def reject(context):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_QUERY_PARAMETER, message="bad"
                )
            )

        _build(reject, metrics=metrics).dispatch(DispatchRequest(path=PATH, accept=V1))

        assert metrics.record_duration.call_args.kwargs["success"] is False

    def test_negotiation_failure_records_nothing(self):
        """Test 404/406 never reach metrics."""
        metrics = MagicMock()
        dispatcher = _build(_ok, metrics=metrics)

        dispatcher.dispatch(DispatchRequest(path=PATH, accept="application/json"))
        dispatcher.dispatch(DispatchRequest(path="/flip/unknown"))

        metrics.record_request.assert_not_called()
        metrics.record_duration.assert_not_called()


@pytest.mark.unit
class TestDispatchHandlerException:
    """Test handler exceptions."""

    def test_exception_is_recorded_logged_and_reraised(self):
        """Test metrics complete as failed before the exception propagates."""
        metrics = MagicMock()
        logger = MagicMock()
        error = RuntimeError("boom")

        def explode(context):
            raise error

        dispatcher = _build(explode, metrics=metrics, logger=logger)

        with pytest.raises(RuntimeError, match="boom"):
            dispatcher.dispatch(DispatchRequest(path=PATH, accept=V1))

        metrics.record_request.assert_called_once_with("greeting")
        assert metrics.record_duration.call_args.kwargs["success"] is False
        logger.error.assert_called_once_with("Handler failed", error=error)
