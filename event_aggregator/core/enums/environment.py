"""Application environment types.

Used by Settings and the container to pick environment-specific behaviour
(log rendering in particular).

Environments:
- DEVELOPMENT: Local development, human-readable coloured logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
