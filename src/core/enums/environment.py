"""Application environment types.

Used by Settings to pick environment-specific behavior:
- DEVELOPMENT: Local run, human-readable logs, /config enabled
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration pipeline, JSON logs
- PRODUCTION: Deployed service, JSON logs, /config disabled
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
