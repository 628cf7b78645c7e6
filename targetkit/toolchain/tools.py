"""
Tool configuration for a single platform selection.

A ToolSet maps every tool kind (C compiler, linker, assembler, ...) to the
executable to run and the arguments accumulated for it so far. A fresh
ToolSet is built for every selection and owned by it alone.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from targetkit.core.exceptions import ToolchainConfigurationError, UnknownToolError
from targetkit.core.platform import OperatingSystem, Platform

logger = logging.getLogger(__name__)


class ToolType(Enum):
    """Kinds of tools a GCC-compatible toolchain provides."""

    C_COMPILER = ("c_compiler", "C compiler")
    CPP_COMPILER = ("cpp_compiler", "C++ compiler")
    OBJECTIVEC_COMPILER = ("objc_compiler", "Objective-C compiler")
    OBJECTIVECPP_COMPILER = ("objcpp_compiler", "Objective-C++ compiler")
    LINKER = ("linker", "Linker")
    ASSEMBLER = ("assembler", "Assembler")
    STATIC_LIB_ARCHIVER = ("static_lib_archiver", "Static library archiver")

    def __init__(self, tool_name: str, display_name: str):
        self.tool_name = tool_name
        self.display_name = display_name

    @classmethod
    def from_name(cls, name: str) -> "ToolType":
        for tool_type in cls:
            if tool_type.tool_name == name:
                return tool_type
        raise UnknownToolError(name)

    def __str__(self) -> str:
        return self.display_name


# (tool type, current arguments) -> new arguments
ArgumentConfigurator = Callable[[ToolType, List[str]], List[str]]


def append_arguments(*flags: str) -> ArgumentConfigurator:
    """
    Build a configurator that appends ``flags`` to a tool's arguments.

    Example:
        >>> append_arguments("-m32")(ToolType.LINKER, ["-g"])
        ['-g', '-m32']
    """

    def configure(tool_type: ToolType, args: List[str]) -> List[str]:
        return list(args) + list(flags)

    return configure


def host_dependent(
    host: OperatingSystem,
    macos: ArgumentConfigurator,
    other: ArgumentConfigurator,
) -> ArgumentConfigurator:
    """Pick the macOS or the generic configurator for ``host``."""
    return macos if host.is_macos else other


class ToolConfiguration:
    """
    Command line configuration of one tool.

    Arguments are append-only: every configurator must keep the existing
    arguments, in order, as a prefix of what it returns.
    """

    def __init__(self, tool_type: ToolType, executable: str):
        self.tool_type = tool_type
        self.executable = executable
        self._arguments: List[str] = []

    @property
    def name(self) -> str:
        return self.tool_type.tool_name

    @property
    def arguments(self) -> Tuple[str, ...]:
        return tuple(self._arguments)

    def with_arguments(self, configurator: ArgumentConfigurator) -> "ToolConfiguration":
        """
        Apply an argument configurator to this tool.

        Raises:
            ToolchainConfigurationError: If the configurator removed or
                reordered existing arguments
        """
        current = list(self._arguments)
        updated = list(configurator(self.tool_type, list(current)))
        if updated[: len(current)] != current:
            raise ToolchainConfigurationError(
                f"Arguments for {self.tool_type} may only be appended to: "
                f"{current} became {updated}"
            )
        self._arguments = updated
        return self

    def command_line(self) -> List[str]:
        return [self.executable] + self._arguments

    def __repr__(self) -> str:
        return (
            f"ToolConfiguration({self.name!r}, {self.executable!r}, "
            f"arguments={self._arguments!r})"
        )


ToolKey = Union[ToolType, str]


class ToolSet:
    """
    Per-selection map of tool kind to tool configuration.

    Tools can be looked up by ToolType or by tool name ('c_compiler').
    """

    def __init__(self, platform: Platform):
        self.platform = platform
        self._tools: Dict[str, ToolConfiguration] = {}

    def add(self, tool_type: ToolType, executable: str) -> ToolConfiguration:
        tool = ToolConfiguration(tool_type, executable)
        self._tools[tool.name] = tool
        return tool

    def get(self, key: ToolKey) -> Optional[ToolConfiguration]:
        return self._tools.get(self._key(key))

    def configure(self, key: ToolKey, configurator: ArgumentConfigurator) -> None:
        """Apply ``configurator`` to the arguments of one tool."""
        tool = self[key]
        tool.with_arguments(configurator)
        logger.debug(f"Configured {tool.tool_type}: {list(tool.arguments)}")

    def arguments_by_tool(self) -> Dict[str, List[str]]:
        """Snapshot of every tool's arguments, keyed by tool name."""
        return {name: list(tool.arguments) for name, tool in self._tools.items()}

    @staticmethod
    def _key(key: ToolKey) -> str:
        return key.tool_name if isinstance(key, ToolType) else key

    def __getitem__(self, key: ToolKey) -> ToolConfiguration:
        tool = self.get(key)
        if tool is None:
            raise UnknownToolError(self._key(key))
        return tool

    def __contains__(self, key: ToolKey) -> bool:
        return self._key(key) in self._tools

    def __iter__(self) -> Iterator[ToolConfiguration]:
        return iter(list(self._tools.values()))

    def __len__(self) -> int:
        return len(self._tools)

    def __repr__(self) -> str:
        return f"ToolSet({self.platform.name!r}, tools={list(self._tools)!r})"


__all__ = [
    "ToolType",
    "ArgumentConfigurator",
    "append_arguments",
    "host_dependent",
    "ToolConfiguration",
    "ToolSet",
]
