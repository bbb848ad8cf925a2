"""Media type value objects for content negotiation.

VendorMediaType names a versioned representation of a resource:

    application/vnd.<namespace>.<resource>.v<N>+json

MediaRange is one entry of a parsed Accept header.
"""

import math
from dataclasses import dataclass

WILDCARD = "*/*"


@dataclass(frozen=True)
class VendorMediaType:
    """Versioned vendor media type.

    Attributes:
        namespace: Vendor namespace (e.g., "flipfoundry").
        resource: Logical resource (e.g., "greeting").
        version: Representation version, starting at 1.

    Example:
        >>> str(VendorMediaType("flipfoundry", "greeting", 2))
        'application/vnd.flipfoundry.greeting.v2+json'
    """

    namespace: str
    resource: str
    version: int

    def __post_init__(self) -> None:
        """Validate the version number.

        Raises:
            ValueError: If version is lower than 1.
        """
        if self.version < 1:
            raise ValueError(f"Media type version must be >= 1, got {self.version}")

    def __str__(self) -> str:
        return f"application/vnd.{self.namespace}.{self.resource}.v{self.version}+json"


@dataclass(frozen=True)
class MediaRange:
    """One media range from an Accept header.

    Attributes:
        media_type: Lower-cased "type/subtype" without parameters.
        quality: Quality value in [0.0, 1.0].
    """

    media_type: str
    quality: float = 1.0

    @property
    def is_wildcard(self) -> bool:
        """True for "*/*" and "type/*" ranges."""
        return self.media_type == WILDCARD or self.media_type.endswith("/*")

    def matches_exactly(self, media_type: str) -> bool:
        """Check whether this range names media_type explicitly."""
        return not self.is_wildcard and self.media_type == media_type.lower()

    def covers(self, media_type: str) -> bool:
        """Check whether this wildcard range includes media_type."""
        if self.media_type == WILDCARD:
            return True
        if self.media_type.endswith("/*"):
            return media_type.lower().startswith(self.media_type[:-1])
        return False


def _parse_quality(raw: str) -> float:
    try:
        quality = float(raw)
    except ValueError:
        return 1.0
    # nan and inf parse as floats but are not quality values
    if not math.isfinite(quality):
        return 1.0
    return min(max(quality, 0.0), 1.0)


def parse_accept(header: str | None) -> list[MediaRange]:
    """Parse an Accept header into media ranges.

    Quality defaults to 1.0; unparsable or non-finite quality values count
    as 1.0 and values outside [0, 1] are clamped. Parameters other than q
    are dropped. Empty entries are skipped.

    Args:
        header: Raw Accept header value, or None.

    Returns:
        list[MediaRange]: Ranges in header order. Empty when header is
            None or blank.

    Example:
        >>> parse_accept("application/json;q=0.5, */*")
        [MediaRange(media_type='application/json', quality=0.5),
         MediaRange(media_type='*/*', quality=1.0)]
    """
    if not header or not header.strip():
        return []

    ranges: list[MediaRange] = []
    for part in header.split(","):
        pieces = [piece.strip() for piece in part.split(";")]
        media_type = pieces[0].lower()
        if not media_type:
            continue

        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                quality = _parse_quality(value.strip())

        ranges.append(MediaRange(media_type=media_type, quality=quality))
    return ranges
