"""
Centralized exception hierarchy for TargetKit.

Selection never raises for an unknown platform or a missing compiler; those
outcomes are captured in the returned tool provider. The exceptions below
cover programming and configuration mistakes.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class TargetKitError(Exception):
    """Base exception for all TargetKit errors."""

    pass


# ============================================================================
# Toolchain-related Exceptions
# ============================================================================


class ToolchainError(TargetKitError):
    """Base exception for toolchain-related errors."""

    pass


class ToolchainConfigurationError(ToolchainError):
    """Raised when a tool configuration step breaks its contract."""

    pass


class ToolchainUnavailableError(ToolchainError):
    """Raised when a tool is requested from an unavailable tool provider."""

    def __init__(self, reasons):
        self.reasons = list(reasons)
        super().__init__("\n".join(self.reasons))


class UnknownToolError(ToolchainError, KeyError):
    """Raised when a tool set has no tool of the requested kind."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")

    def __str__(self) -> str:
        return self.args[0]


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(TargetKitError):
    """Configuration parsing or validation error."""

    pass


__all__ = [
    "TargetKitError",
    "ToolchainError",
    "ToolchainConfigurationError",
    "ToolchainUnavailableError",
    "UnknownToolError",
    "ConfigError",
]
