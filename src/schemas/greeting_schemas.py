"""Greeting and departing response schemas.

One Pydantic model per representation version. Field sets are exact: a
version never carries fields of another version.

Reference:
    - docs/api/versioning.md
"""

from pydantic import BaseModel, ConfigDict, Field


class GreetingResponse(BaseModel):
    """Greeting representation v1 (deprecated since 1.3).

    Attributes:
        sequence: Process-wide count of v1 greetings, starting at 1.
        text: Greeting text.
    """

    model_config = ConfigDict(extra="forbid")

    sequence: int = Field(..., ge=1, description="Number of v1 greetings served")
    text: str = Field(..., description="Greeting text", examples=["Hello, World!"])


class GreetingResponseV2(BaseModel):
    """Greeting representation v2 (current).

    Attributes:
        text: Greeting text.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., description="Greeting text", examples=["Hello, World!"])


class DepartResponse(BaseModel):
    """Departure representation v1.

    Attributes:
        text: Farewell text.
        date: Local time of the response (MM/dd/yyyy HH:mm:ss:SSS), null on
            the legacy greeting route.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = Field(..., description="Farewell text", examples=["Goodbye"])
    date: str | None = Field(
        None,
        description="Local timestamp, MM/dd/yyyy HH:mm:ss:SSS",
        examples=["10/19/2026 14:03:07:042"],
    )
