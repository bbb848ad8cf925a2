"""Domain value objects.

Immutable value objects used by content negotiation and route deprecation.
"""

from src.domain.value_objects.deprecation import Deprecation
from src.domain.value_objects.media_type import (
    WILDCARD,
    MediaRange,
    VendorMediaType,
    parse_accept,
)

__all__ = [
    "Deprecation",
    "MediaRange",
    "VendorMediaType",
    "WILDCARD",
    "parse_accept",
]
