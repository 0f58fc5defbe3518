"""Pytest configuration and shared fixtures.

Provides:
1. JSON logging for the test run (testing environment)
2. A silent logger and a DocumentStore wired to it
3. A recording router for pipeline unit tests
"""

import os

os.environ.setdefault("ROUTE_REGISTRY_ENVIRONMENT", "testing")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from route_registry.core.config import SpecConfig  # noqa: E402
from route_registry.presentation.routers.spec.document import DocumentStore  # noqa: E402
from tests.helpers import RecordingRouter  # noqa: E402


@pytest.fixture
def logger():
    """Structured logger double."""
    return MagicMock()


@pytest.fixture
def document(logger):
    """Empty document with default metadata."""
    return DocumentStore(SpecConfig(title="Test API", version="1.0.0"), logger=logger)


@pytest.fixture
def router():
    """Recording router double."""
    return RecordingRouter()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked collaborators")
    config.addinivalue_line(
        "markers", "api: End-to-end tests through the Starlette test client"
    )
