"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Negotiation errors (MEDIA_TYPE_*)
- Routing errors (ROUTE_*)
- Validation errors (INVALID_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Negotiation errors
    MEDIA_TYPE_NOT_ACCEPTABLE = "media_type_not_acceptable"

    # Routing errors
    ROUTE_NOT_FOUND = "route_not_found"

    # Validation errors
    INVALID_QUERY_PARAMETER = "invalid_query_parameter"
