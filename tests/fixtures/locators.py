"""Reusable tool locator fixtures for testing.

The fake locator answers lookups from a fixed set of executable names, so
selection can be tested without real compiler installations.
"""

from typing import Iterable, List, Tuple

import pytest
from pathlib import Path

from targetkit.core.search_path import ToolSearchResult


class FakeLocator:
    """
    Locator that finds only the executables it was given.

    Attributes:
        calls: Every (tool_type, executable) lookup, in order
    """

    def __init__(self, found: Iterable[str] = ()):
        self.found = set(found)
        self.calls: List[Tuple[object, str]] = []

    def locate(self, tool_type, executable: str) -> ToolSearchResult:
        self.calls.append((tool_type, executable))
        if executable in self.found:
            return ToolSearchResult(tool_type, executable, path=Path("/usr/bin") / executable)
        return ToolSearchResult(
            tool_type,
            executable,
            reason=f"Could not find {tool_type} '{executable}' in system path.",
        )


@pytest.fixture
def all_tools_locator() -> FakeLocator:
    """Locator that finds every default GCC and Clang executable."""
    return FakeLocator({"gcc", "g++", "as", "ar", "clang", "clang++"})


@pytest.fixture
def no_tools_locator() -> FakeLocator:
    """Locator that finds nothing."""
    return FakeLocator()


@pytest.fixture
def mock_tool_dir(tmp_path) -> Path:
    """
    Create a directory containing executable gcc and g++ stubs.

    Returns:
        Path to the bin directory
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    for name in ("gcc", "g++"):
        exe = bin_dir / name
        exe.write_text("#!/bin/sh\n")
        exe.chmod(0o755)
    return bin_dir
