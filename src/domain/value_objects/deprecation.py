"""Deprecation metadata value object.

Attached to a versioned route at registration time and never mutated.
Produces the response headers that announce the deprecation to clients:

    Deprecation: true
    Sunset: Sun, 01 Nov 2026 00:00:00 GMT
    Link: </flip/departing/depart>; rel="successor-version"
    Warning: 299 - "Deprecated since 1.2; use /flip/departing/depart; scheduled for removal"
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from email.utils import format_datetime


@dataclass(frozen=True, kw_only=True)
class Deprecation:
    """Deprecation metadata for a route.

    Attributes:
        since: Release that deprecated the route (e.g., "1.3").
        sunset: Date after which the route may be removed.
        for_removal: Whether the route is scheduled for removal.
        replacement: Route clients should migrate to.
        replacement_media_type: Media type clients should request instead.

    Example:
        >>> Deprecation(since="1.3").headers()
        {'Deprecation': 'true', 'Warning': '299 - "Deprecated since 1.3"'}
    """

    since: str
    sunset: date | None = None
    for_removal: bool = False
    replacement: str | None = None
    replacement_media_type: str | None = None

    @property
    def sunset_http_date(self) -> str | None:
        """Sunset as an IMF-fixdate, or None when no sunset is set."""
        if self.sunset is None:
            return None
        midnight = datetime(
            self.sunset.year, self.sunset.month, self.sunset.day, tzinfo=UTC
        )
        return format_datetime(midnight, usegmt=True)

    def warning_text(self) -> str:
        """Human-readable warning message (no double quotes)."""
        parts = [f"Deprecated since {self.since}"]
        if self.replacement and self.replacement_media_type:
            parts.append(f"use {self.replacement} with {self.replacement_media_type}")
        elif self.replacement:
            parts.append(f"use {self.replacement}")
        if self.for_removal:
            parts.append("scheduled for removal")
        return "; ".join(parts)

    def headers(self) -> dict[str, str]:
        """Build deprecation response headers.

        Returns:
            dict[str, str]: Header name to value.
        """
        headers = {"Deprecation": "true"}
        sunset = self.sunset_http_date
        if sunset is not None:
            headers["Sunset"] = sunset
        if self.replacement:
            link = f'<{self.replacement}>; rel="successor-version"'
            if self.replacement_media_type:
                link += f'; type="{self.replacement_media_type}"'
            headers["Link"] = link
        headers["Warning"] = f'299 - "{self.warning_text()}"'
        return headers
