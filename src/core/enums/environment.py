"""Application environment types.

Used by Settings to pick the log renderer and the default policy store.

Environments:
- DEVELOPMENT: Local development, console log renderer
- TESTING: Automated test execution, JSON logs, in-memory stores
- CI: Continuous integration, JSON logs
- PRODUCTION: Database-backed policy store
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
