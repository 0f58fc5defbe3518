"""Application environment types.

Used by Settings and the logger factory to pick environment-specific
behavior (JSON logs for testing/ci, console renderer otherwise).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
