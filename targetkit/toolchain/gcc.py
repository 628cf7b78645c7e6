"""
GCC-compatible toolchains.

A GCC-compatible toolchain produces every platform variant by varying tool
arguments. Selecting a platform runs one linear pass:

    match strategy -> build default tools -> apply strategy
        -> run each_platform hooks -> probe availability -> provider

Example:
    >>> gcc = GccToolChain("gcc")
    >>> gcc.add_path("/opt/gcc/bin")
    >>> gcc.target("arm-board", lambda tools: tools.configure(
    ...     "c_compiler", append_arguments("-mthumb")))
    >>> provider = gcc.select(Platform.of("linux-x86", os="linux", arch="x86"))
    >>> provider.is_available
    True
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Type, Union

from targetkit.core.exceptions import ConfigError
from targetkit.core.platform import OperatingSystem, Platform, resolve_host
from targetkit.core.search_path import ToolSearchPath
from targetkit.toolchain.availability import AvailabilityProbe, ToolChainAvailability
from targetkit.toolchain.providers import (
    AvailableToolProvider,
    PlatformToolProvider,
    UnavailableToolProvider,
)
from targetkit.toolchain.registry import StrategyRegistry
from targetkit.toolchain.strategy import (
    ExplicitPlatformStrategy,
    ToolSetAction,
    apply_action,
    builtin_strategies,
)
from targetkit.toolchain.tools import ToolSet, ToolType

logger = logging.getLogger(__name__)


class GccCompatibleToolChain(ABC):
    """
    Base class for toolchains with GCC command line semantics.

    Args:
        name: Toolchain name used by the build script
        host: Operating system of the build host (detected when None)
        search_path: Tool search path (a new empty one when None)
    """

    type_name = "gcc-compatible"

    def __init__(
        self,
        name: str,
        host: Union[str, OperatingSystem, None] = None,
        search_path: Optional[ToolSearchPath] = None,
    ):
        self.name = name
        self.host = resolve_host(host)
        self.search_path = search_path or ToolSearchPath(self.host)
        self.strategies = StrategyRegistry(builtin_strategies(self.host))
        self._hooks: List[ToolSetAction] = []

    @property
    def display_name(self) -> str:
        return f"Tool chain '{self.name}' ({self.type_name})"

    @property
    def path(self) -> List[Path]:
        return self.search_path.path

    def add_path(self, *entries: Union[str, Path]) -> None:
        """Add directories to search for tool executables."""
        self.search_path.add_path(*entries)

    def target(
        self,
        platform_names: Union[str, Iterable[str]],
        action: Optional[ToolSetAction] = None,
    ) -> ExplicitPlatformStrategy:
        """
        Add support for platforms by name, ahead of earlier registrations.

        Args:
            platform_names: A platform name or list of names
            action: Optional action that configures the tool set

        Returns:
            The registered strategy
        """
        strategy = ExplicitPlatformStrategy(platform_names, action)
        self.strategies.register_with_priority(strategy)
        return strategy

    def each_platform(self, hook: ToolSetAction) -> None:
        """Run ``hook`` on every selected platform's tools, after its strategy."""
        self._hooks.append(hook)

    def select(self, platform: Platform) -> PlatformToolProvider:
        """
        Select and configure tools for ``platform``.

        Never raises for an unknown platform or missing tools; those are
        reported through an UnavailableToolProvider.
        """
        strategy = self.strategies.find_match(platform)
        if strategy is None:
            availability = ToolChainAvailability().unavailable(
                f"Don't know how to build for platform '{platform.name}'."
            )
            logger.info(f"{self.display_name}: {availability.explain()}")
            return UnavailableToolProvider(availability)

        tool_set = ToolSet(platform)
        self.add_default_tools(tool_set)
        tool_set = strategy.configure(tool_set)
        for hook in self._hooks:
            tool_set = apply_action(hook, tool_set)

        availability = AvailabilityProbe(self.search_path).probe(tool_set)
        if not availability.is_available:
            logger.info(
                f"{self.display_name} cannot build for '{platform.name}': "
                f"{availability.explain()}"
            )
            return UnavailableToolProvider(availability)

        suffix = ".obj" if platform.operating_system.is_windows else ".o"
        logger.info(f"{self.display_name} selected for '{platform.name}'")
        return AvailableToolProvider(
            tool_set, self.search_path, suffix, self.can_use_command_file()
        )

    def can_use_command_file(self) -> bool:
        return True

    @abstractmethod
    def add_default_tools(self, tool_set: ToolSet) -> None:
        """Populate ``tool_set`` with this toolchain's default executables."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class GccToolChain(GccCompatibleToolChain):
    """The GNU Compiler Collection."""

    type_name = "GNU GCC"

    def add_default_tools(self, tool_set: ToolSet) -> None:
        tool_set.add(ToolType.C_COMPILER, "gcc")
        tool_set.add(ToolType.CPP_COMPILER, "g++")
        tool_set.add(ToolType.OBJECTIVEC_COMPILER, "gcc")
        tool_set.add(ToolType.OBJECTIVECPP_COMPILER, "g++")
        tool_set.add(ToolType.LINKER, "g++")
        tool_set.add(ToolType.ASSEMBLER, "as")
        tool_set.add(ToolType.STATIC_LIB_ARCHIVER, "ar")


class ClangToolChain(GccCompatibleToolChain):
    """Clang, driven through its GCC-compatible command line."""

    type_name = "Clang"

    def add_default_tools(self, tool_set: ToolSet) -> None:
        tool_set.add(ToolType.C_COMPILER, "clang")
        tool_set.add(ToolType.CPP_COMPILER, "clang++")
        tool_set.add(ToolType.OBJECTIVEC_COMPILER, "clang")
        tool_set.add(ToolType.OBJECTIVECPP_COMPILER, "clang++")
        tool_set.add(ToolType.LINKER, "clang++")
        tool_set.add(ToolType.ASSEMBLER, "as")
        tool_set.add(ToolType.STATIC_LIB_ARCHIVER, "ar")


TOOLCHAIN_TYPES: Dict[str, Type[GccCompatibleToolChain]] = {
    "gcc": GccToolChain,
    "clang": ClangToolChain,
}


def create_toolchain(
    toolchain_type: str,
    name: Optional[str] = None,
    host: Union[str, OperatingSystem, None] = None,
    search_path: Optional[ToolSearchPath] = None,
) -> GccCompatibleToolChain:
    """
    Create a toolchain by type name ('gcc' or 'clang').

    Raises:
        ConfigError: If the type is unknown
    """
    try:
        cls = TOOLCHAIN_TYPES[toolchain_type]
    except KeyError:
        raise ConfigError(
            f"Invalid toolchain type: {toolchain_type} "
            f"(expected one of {sorted(TOOLCHAIN_TYPES)})"
        )
    return cls(name or toolchain_type, host=host, search_path=search_path)


__all__ = [
    "GccCompatibleToolChain",
    "GccToolChain",
    "ClangToolChain",
    "TOOLCHAIN_TYPES",
    "create_toolchain",
]
