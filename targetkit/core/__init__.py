"""
Core functionality for TargetKit.

This package contains the platform model, the tool search path and the
exception hierarchy that the toolchain modules build on.
"""

from .platform import (
    OperatingSystem,
    Architecture,
    Platform,
    detect_host,
    clear_host_cache,
    resolve_host,
)

from .search_path import (
    ToolSearchPath,
    ToolSearchResult,
)

from .exceptions import (
    TargetKitError,
    ToolchainError,
    ToolchainConfigurationError,
    ToolchainUnavailableError,
    UnknownToolError,
    ConfigError,
)

__all__ = [
    # Platform
    "OperatingSystem",
    "Architecture",
    "Platform",
    "detect_host",
    "clear_host_cache",
    "resolve_host",
    # Search path
    "ToolSearchPath",
    "ToolSearchResult",
    # Exceptions
    "TargetKitError",
    "ToolchainError",
    "ToolchainConfigurationError",
    "ToolchainUnavailableError",
    "UnknownToolError",
    "ConfigError",
]
