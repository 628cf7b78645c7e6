"""
Pytest configuration and shared fixtures for TargetKit tests.
"""

import pytest

from targetkit.core.platform import clear_host_cache

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.locators import (
    all_tools_locator,
    no_tools_locator,
    mock_tool_dir,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture(autouse=True)
def _reset_host_cache():
    """Keep host detection from leaking between tests that patch it."""
    clear_host_cache()
    yield
    clear_host_cache()
