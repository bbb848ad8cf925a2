"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, middleware and error responses. The
presentation layer is thin - it hands requests to the versioned dispatcher
and translates Result values to HTTP responses.

Structure:
- routers/api/: versioned endpoints, correlation middleware, error responses
- routers/system.py: root, health, metrics and configuration endpoints

The presentation layer depends on the application layer but contains NO
version selection or greeting logic.
"""
