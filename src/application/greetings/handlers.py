"""Greeting and departing route handlers.

Each handler is a synchronous, in-memory computation returning
Result[response model, DomainError]. Handlers are wired to routes in
src/application/greetings/routes.py.

Handlers:
    GreetV1Handler      - {sequence, text}; increments the shared counter (deprecated)
    GreetV2Handler      - {text} (current)
    LegacyDepartHandler - {text: "Goodbye", date: null} (deprecated, for removal)
    DepartHandler       - {text: "Goodbye", date: <local timestamp>} (current)

The name query parameter is interpolated verbatim; the only escaping applied
is the JSON encoding of the response body.
"""

from collections.abc import Callable, Mapping
from datetime import datetime

from src.application.greetings.counter import GreetingCounter
from src.application.versioning.route_table import HandlerContext
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.schemas.greeting_schemas import (
    DepartResponse,
    GreetingResponse,
    GreetingResponseV2,
)

GREETING_TEMPLATE = "Hello, {name}!"
DEFAULT_NAME = "World"
FAREWELL = "Goodbye"


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as MM/dd/yyyy HH:mm:ss:SSS.

    Args:
        moment: Datetime to format.

    Returns:
        str: Formatted timestamp, e.g. "10/19/2026 14:03:07:042".
    """
    return f"{moment:%m/%d/%Y %H:%M:%S}:{moment.microsecond // 1000:03d}"


def resolve_name(query: Mapping[str, str]) -> str:
    """Read the optional name query parameter ("World" when absent or empty)."""
    return query.get("name") or DEFAULT_NAME


class GreetV1Handler:
    """Handler for greeting representation v1.

    Dependencies (injected via constructor):
        - GreetingCounter: Shared v1 sequence

    Returns:
        Result[GreetingResponse, DomainError]
    """

    def __init__(self, counter: GreetingCounter) -> None:
        self._counter = counter

    def handle(self, context: HandlerContext) -> Result[GreetingResponse, DomainError]:
        """Greet with a sequence number."""
        name = resolve_name(context.query)
        context.logger.warning("Deprecated v1 greeting endpoint called", greeting_name=name)
        sequence = self._counter.increment()
        context.logger.debug("Request count", sequence=sequence)
        return Success(
            value=GreetingResponse(
                sequence=sequence,
                text=GREETING_TEMPLATE.format(name=name),
            )
        )


class GreetV2Handler:
    """Handler for greeting representation v2 (stateless)."""

    def handle(
        self, context: HandlerContext
    ) -> Result[GreetingResponseV2, DomainError]:
        name = resolve_name(context.query)
        context.logger.info("Greeting request received", greeting_name=name)
        greeting = GREETING_TEMPLATE.format(name=name)
        context.logger.debug("Greeting generated", text=greeting)
        return Success(value=GreetingResponseV2(text=greeting))


class LegacyDepartHandler:
    """Handler for the depart route kept under the greeting resource."""

    def handle(self, context: HandlerContext) -> Result[DepartResponse, DomainError]:
        context.logger.error(
            "Deprecated depart endpoint called - will be removed in future version"
        )
        return Success(value=DepartResponse(text=FAREWELL, date=None))


class DepartHandler:
    """Handler for the departing resource.

    Args:
        clock: Returns the current local time. Defaults to datetime.now,
            looked up on every call.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock

    def handle(self, context: HandlerContext) -> Result[DepartResponse, DomainError]:
        context.logger.info("Departing request received")
        now = self._clock() if self._clock is not None else datetime.now()
        timestamp = format_timestamp(now)
        context.logger.debug("Departing at", date=timestamp)
        return Success(value=DepartResponse(text=FAREWELL, date=timestamp))
