"""Uniform error response body.

Every error leaving the service (404, 406, 400, 422, 500, ...) uses this
shape:

    {
      "timestamp": "2026-10-19T14:03:07.042000Z",
      "status": 406,
      "error": "Not Acceptable",
      "message": "Could not find acceptable representation for application/json",
      "path": "/flip/greeting/greet",
      "traceId": "3f0c1f6e-8f7e-4a59-9d0e-2b1c7c2f3a10"
    }

Exports:
    ErrorResponse: Pydantic model of the error body
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error response body.

    Attributes:
        timestamp: When the error was produced (UTC).
        status: HTTP status code.
        error: HTTP reason phrase for the status.
        message: Human-readable explanation of this occurrence.
        path: Request path.
        trace_id: Request correlation id (serialized as traceId).

    Examples:
        >>> ErrorResponse(
        ...     timestamp=datetime.now(UTC),
        ...     status=404,
        ...     error="Not Found",
        ...     message="No route registered for /flip/unknown",
        ...     path="/flip/unknown",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    model_config = ConfigDict(populate_by_name=True)

    timestamp: datetime = Field(..., description="Time of the error (UTC)")
    status: int = Field(..., description="HTTP status code", examples=[406])
    error: str = Field(..., description="HTTP reason phrase", examples=["Not Acceptable"])
    message: str = Field(..., description="Human-readable explanation")
    path: str = Field(..., description="Request path", examples=["/flip/greeting/greet"])
    trace_id: str | None = Field(
        None,
        alias="traceId",
        description="Request correlation id",
    )

    def to_content(self) -> dict[str, object]:
        """JSON-ready body with camelCase trace id."""
        return self.model_dump(mode="json", by_alias=True)
