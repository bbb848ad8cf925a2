"""Versioned endpoint dispatcher.

Maps a request to exactly one route through negotiate(), runs the handler and
returns the body together with the matched media type.

Metrics contract (per logical resource, not per version):
    - record_request() once, before the handler runs
    - record_duration() once, after the handler returns or raises;
      success=False when the handler raised or returned a Failure

Negotiation failures (404/406) never reach a handler and record nothing.
Handler exceptions are logged with full context and re-raised; the HTTP
boundary turns them into 500 responses.
"""

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from pydantic import BaseModel

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.versioning.negotiation import negotiate
from src.application.versioning.route_table import (
    HandlerContext,
    RouteTable,
    VersionedRoute,
)
from src.core.errors import (
    DomainError,
    NotAcceptableError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.metrics_protocol import MetricsProtocol


@dataclass(frozen=True, kw_only=True)
class DispatchRequest:
    """Framework-independent view of an incoming GET request.

    Attributes:
        path: Request path.
        accept: Raw Accept header, None when absent.
        query: Query parameters.
        correlation_id: Request correlation id.
    """

    path: str
    accept: str | None = None
    query: Mapping[str, str] = field(default_factory=dict)
    correlation_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class DispatchResponse:
    """Successful dispatch outcome.

    Attributes:
        body: Version-specific response model.
        route: Route that produced the body.
    """

    body: BaseModel
    route: VersionedRoute

    @property
    def media_type(self) -> str:
        """Matched media type, used verbatim as Content-Type."""
        return self.route.media_type

    @property
    def headers(self) -> dict[str, str]:
        """Extra response headers (deprecation signalling)."""
        if self.route.deprecation is None:
            return {}
        return self.route.deprecation.headers()


def _to_application_error(error: DomainError) -> ApplicationError:
    match error:
        case NotAcceptableError():
            code = ApplicationErrorCode.NOT_ACCEPTABLE
        case NotFoundError():
            code = ApplicationErrorCode.NOT_FOUND
        case ValidationError():
            code = ApplicationErrorCode.VALIDATION_FAILED
        case _:
            code = ApplicationErrorCode.HANDLER_FAILED
    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details=error.details,
    )


class VersionedDispatcher:
    """Dispatch requests through the versioned route table.

    Args:
        routes: Validated route table.
        metrics: Metrics sink implementing MetricsProtocol.
        logger: Application logger.
        timer: Monotonic clock returning seconds.
    """

    def __init__(
        self,
        *,
        routes: RouteTable,
        metrics: MetricsProtocol,
        logger: LoggerProtocol,
        timer: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._routes = routes
        self._metrics = metrics
        self._logger = logger
        self._timer = timer

    @property
    def routes(self) -> RouteTable:
        return self._routes

    def dispatch(
        self, request: DispatchRequest
    ) -> Result[DispatchResponse, ApplicationError]:
        """Negotiate, run the selected handler and collect metrics.

        Args:
            request: Incoming request.

        Returns:
            Success with the response body and matched route, or Failure with
            an ApplicationError (not found, not acceptable, validation failed).

        Raises:
            Exception: Whatever the handler raised, after metrics and logging.
        """
        logger = self._logger.bind(
            correlation_id=request.correlation_id,
            path=request.path,
        )

        negotiated = negotiate(self._routes, request.path, request.accept)
        if isinstance(negotiated, Failure):
            logger.info(
                "Negotiation failed",
                error_code=negotiated.error.code.value,
                accept=request.accept,
            )
            return Failure(error=_to_application_error(negotiated.error))

        route = negotiated.value
        logger = logger.bind(media_type=route.media_type, resource=route.resource)
        if route.deprecation is not None:
            logger.debug(
                "Deprecated route selected",
                since=route.deprecation.since,
                for_removal=route.deprecation.for_removal,
            )

        context = HandlerContext(
            query=request.query,
            correlation_id=request.correlation_id,
            logger=logger,
        )

        self._metrics.record_request(route.resource)
        started = self._timer()
        try:
            result = route.handler(context)
        except Exception as e:
            self._metrics.record_duration(
                route.resource, self._timer() - started, success=False
            )
            logger.error("Handler failed", error=e)
            raise

        self._metrics.record_duration(
            route.resource,
            self._timer() - started,
            success=isinstance(result, Success),
        )

        match result:
            case Success(value=body):
                return Success(value=DispatchResponse(body=body, route=route))
            case Failure(error=error):
                logger.info("Handler rejected request", error_code=error.code.value)
                return Failure(error=_to_application_error(error))
