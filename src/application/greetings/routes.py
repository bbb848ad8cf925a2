"""Versioned route definitions for the greeting and departing resources.

| Path                     | Media type          | Default | Deprecation            |
|--------------------------|---------------------|---------|------------------------|
| {greeting}/greet         | ...greeting.v1+json | no      | since 1.3              |
| {greeting}/greet         | ...greeting.v2+json | yes     | -                      |
| {greeting}/depart        | ...greeting.v1+json | yes     | since 1.2, for removal |
| {departing}/depart       | ...departing.v1+json| yes     | -                      |

The legacy depart route and its replacement are independent entries with
independent handlers; removing one never touches the other.
"""

from datetime import date

from src.application.greetings.counter import GreetingCounter
from src.application.greetings.handlers import (
    DepartHandler,
    GreetV1Handler,
    GreetV2Handler,
    LegacyDepartHandler,
)
from src.application.versioning.route_table import VersionedRoute
from src.domain.value_objects import Deprecation, VendorMediaType
from src.schemas.greeting_schemas import (
    DepartResponse,
    GreetingResponse,
    GreetingResponseV2,
)

GREETING_RESOURCE = "greeting"
DEPARTING_RESOURCE = "departing"


def build_routes(
    *,
    counter: GreetingCounter,
    namespace: str = "flipfoundry",
    greeting_base: str = "/flip/greeting",
    departing_base: str = "/flip/departing",
    legacy_depart_sunset: date | None = None,
) -> list[VersionedRoute]:
    """Build the route definitions in registration order.

    Args:
        counter: Counter backing the v1 greeting sequence.
        namespace: Vendor namespace of the media types.
        greeting_base: Prefix of the greeting resource.
        departing_base: Prefix of the departing resource.
        legacy_depart_sunset: Sunset date announced on the legacy depart route.

    Returns:
        list[VersionedRoute]: Routes ready for RouteTable registration.
    """
    greeting_v1 = str(VendorMediaType(namespace, GREETING_RESOURCE, 1))
    greeting_v2 = str(VendorMediaType(namespace, GREETING_RESOURCE, 2))
    departing_v1 = str(VendorMediaType(namespace, DEPARTING_RESOURCE, 1))

    greet_path = f"{greeting_base}/greet"
    depart_path = f"{departing_base}/depart"

    return [
        VersionedRoute(
            path=greet_path,
            media_type=greeting_v1,
            resource=GREETING_RESOURCE,
            handler=GreetV1Handler(counter).handle,
            response_model=GreetingResponse,
            deprecation=Deprecation(
                since="1.3",
                replacement=greet_path,
                replacement_media_type=greeting_v2,
            ),
            summary="Greet with a sequence number (v1)",
        ),
        VersionedRoute(
            path=greet_path,
            media_type=greeting_v2,
            resource=GREETING_RESOURCE,
            handler=GreetV2Handler().handle,
            response_model=GreetingResponseV2,
            default=True,
            summary="Greet (v2)",
        ),
        VersionedRoute(
            path=f"{greeting_base}/depart",
            media_type=greeting_v1,
            resource=GREETING_RESOURCE,
            handler=LegacyDepartHandler().handle,
            response_model=DepartResponse,
            default=True,
            deprecation=Deprecation(
                since="1.2",
                sunset=legacy_depart_sunset,
                for_removal=True,
                replacement=depart_path,
            ),
            summary="Say goodbye (moved to the departing resource)",
        ),
        VersionedRoute(
            path=depart_path,
            media_type=departing_v1,
            resource=DEPARTING_RESOURCE,
            handler=DepartHandler().handle,
            response_model=DepartResponse,
            default=True,
            summary="Say goodbye with a timestamp",
        ),
    ]
