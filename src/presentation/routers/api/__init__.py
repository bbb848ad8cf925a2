"""Versioned API routers.

All versioned endpoints are generated from the route table at import time.
The table is the single source of truth; see
src/application/greetings/routes.py for the route catalog.

Resources:
    /flip/greeting/greet     - greeting v1 (deprecated), v2 (default)
    /flip/greeting/depart    - legacy depart (deprecated, for removal)
    /flip/departing/depart   - depart with timestamp

Reference:
    - docs/api/versioning.md
"""

from fastapi import APIRouter

from src.core.container import get_route_table
from src.presentation.routers.api.routes import register_versioned_routes

versioned_router = APIRouter(tags=["Versioned"])
register_versioned_routes(versioned_router, get_route_table())

__all__ = [
    "versioned_router",
]
