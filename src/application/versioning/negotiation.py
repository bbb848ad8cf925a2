"""Content negotiation over the versioned route table.

negotiate() picks exactly one route for a path given the raw Accept header:

    1. Unknown path -> NotFoundError.
    2. Absent or blank Accept -> the path's default route.
    3. Each registered media type scores the highest q of the Accept ranges
       naming it explicitly. A media type whose best explicit q is 0 is
       refused outright.
    4. Wildcard ranges ("*/*", "application/*") only select the path's
       default route, and lose ties against explicit ranges.
    5. Highest q wins; on equal q the route registered first wins.
    6. Nothing selectable -> NotAcceptableError.
"""

from src.application.versioning.route_table import RouteTable, VersionedRoute
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotAcceptableError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.value_objects import MediaRange, parse_accept

# (quality, specificity, -registration_index)
_Rank = tuple[float, int, int]


def _rank(
    route: VersionedRoute,
    index: int,
    ranges: list[MediaRange],
    *,
    is_default: bool,
) -> _Rank | None:
    explicit = [r.quality for r in ranges if r.matches_exactly(route.media_type)]
    if explicit:
        quality = max(explicit)
        return (quality, 1, -index) if quality > 0 else None

    if not is_default:
        return None

    wildcard = [r.quality for r in ranges if r.is_wildcard and r.covers(route.media_type)]
    if wildcard and max(wildcard) > 0:
        return (max(wildcard), 0, -index)
    return None


def negotiate(
    routes: RouteTable,
    path: str,
    accept: str | None,
) -> Result[VersionedRoute, DomainError]:
    """Select the route serving a request.

    Args:
        routes: Route table to search.
        path: Request path.
        accept: Raw Accept header value, or None when absent.

    Returns:
        Success with the selected route, or Failure with NotFoundError
        (unknown path) or NotAcceptableError (no acceptable media type).

    Example:
        >>> result = negotiate(table, "/flip/greeting/greet", None)
        >>> result.value.media_type
        'application/vnd.flipfoundry.greeting.v2+json'
    """
    candidates = routes.routes_for(path)
    if not candidates:
        return Failure(
            error=NotFoundError(
                code=ErrorCode.ROUTE_NOT_FOUND,
                message=f"No route registered for {path}",
                resource_type="route",
                resource_id=path,
            )
        )

    default = routes.default_for(path)
    ranges = parse_accept(accept)
    if not ranges:
        return Success(value=default)

    best: VersionedRoute | None = None
    best_rank: _Rank | None = None
    for index, route in enumerate(candidates):
        rank = _rank(route, index, ranges, is_default=route is default)
        if rank is not None and (best_rank is None or rank > best_rank):
            best, best_rank = route, rank

    if best is None:
        available = tuple(route.media_type for route in candidates)
        return Failure(
            error=NotAcceptableError(
                code=ErrorCode.MEDIA_TYPE_NOT_ACCEPTABLE,
                message=f"Could not find acceptable representation for {accept}",
                requested=accept or "",
                available=available,
                details={"supported": ", ".join(available)},
            )
        )

    return Success(value=best)
