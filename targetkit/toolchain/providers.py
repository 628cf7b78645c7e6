"""
Tool provider results.

select() returns one of two providers: AvailableToolProvider, carrying the
configured tool set, or UnavailableToolProvider, carrying the reasons the
toolchain cannot build for the requested platform.
"""

from abc import ABC, abstractmethod
from typing import List

from targetkit.core.exceptions import ToolchainUnavailableError
from targetkit.core.search_path import ToolSearchResult
from targetkit.toolchain.availability import ToolChainAvailability
from targetkit.toolchain.tools import ToolConfiguration, ToolKey, ToolSet


class PlatformToolProvider(ABC):
    """Result of selecting a toolchain for one target platform."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def explain_unavailability(self) -> str:
        """Return why the provider is unusable (empty when available)."""
        pass

    @abstractmethod
    def tool(self, key: ToolKey) -> ToolConfiguration:
        """
        Get the configured tool of a given kind.

        Raises:
            ToolchainUnavailableError: If the provider is unavailable
            UnknownToolError: If the tool set has no such tool
        """
        pass


class AvailableToolProvider(PlatformToolProvider):
    """
    Usable toolchain for a platform.

    Attributes:
        tool_set: Fully configured tools for the platform
        object_file_suffix: '.obj' for Windows targets, '.o' otherwise
        supports_command_file: Whether arguments may be passed in a file
    """

    def __init__(
        self,
        tool_set: ToolSet,
        locator,
        object_file_suffix: str,
        supports_command_file: bool = True,
    ):
        self.tool_set = tool_set
        self.locator = locator
        self.object_file_suffix = object_file_suffix
        self.supports_command_file = supports_command_file

    @property
    def is_available(self) -> bool:
        return True

    def explain_unavailability(self) -> str:
        return ""

    def tool(self, key: ToolKey) -> ToolConfiguration:
        return self.tool_set[key]

    def locate_tool(self, key: ToolKey) -> ToolSearchResult:
        """Resolve the executable of a configured tool."""
        tool = self.tool_set[key]
        return self.locator.locate(tool.tool_type, tool.executable)

    def __repr__(self) -> str:
        return (
            f"AvailableToolProvider({self.tool_set.platform.name!r}, "
            f"object_file_suffix={self.object_file_suffix!r})"
        )


class UnavailableToolProvider(PlatformToolProvider):
    """Toolchain that cannot build for the requested platform."""

    def __init__(self, availability: ToolChainAvailability):
        self.availability = availability

    @property
    def is_available(self) -> bool:
        return False

    @property
    def reasons(self) -> List[str]:
        return self.availability.reasons

    def explain_unavailability(self) -> str:
        return self.availability.explain()

    def tool(self, key: ToolKey) -> ToolConfiguration:
        raise ToolchainUnavailableError(self.reasons)

    def __repr__(self) -> str:
        return f"UnavailableToolProvider({self.reasons!r})"


__all__ = ["PlatformToolProvider", "AvailableToolProvider", "UnavailableToolProvider"]
