"""Versioned endpoint generation from the route table."""

from src.presentation.routers.api.routes.generator import register_versioned_routes

__all__ = ["register_versioned_routes"]
