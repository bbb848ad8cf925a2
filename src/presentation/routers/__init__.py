"""External-facing routers.

- api: versioned endpoints generated from the route table
- system: root, health, metrics and configuration endpoints
"""

from src.presentation.routers.api import versioned_router
from src.presentation.routers.system import system_router

__all__ = ["system_router", "versioned_router"]
