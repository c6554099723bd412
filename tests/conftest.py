"""Test configuration."""

import os
from pathlib import Path

import pytest
from pytest import Config

# Settings are read at import time, so the test environment is set first.
os.environ["TESTING"] = "true"
os.environ.setdefault("JSON_LOGS", "false")
os.environ.setdefault("STARTUP_SYNC_ENABLED", "false")

from content_hub.core.logging import configure_logging  # noqa: E402

fixture = pytest.fixture


@fixture(scope="session")
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


pytest_plugins: list[str] = [
    "tests.fixtures.cache",
    "tests.fixtures.content",
    "tests.fixtures.api",
]


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    # Configure logging for test environment
    configure_logging(testing=True)
