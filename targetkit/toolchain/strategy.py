"""
Platform strategies.

A platform strategy decides whether it can build for a target platform and,
if so, how to adjust the tool set for it. The set of built-in strategies is
closed:

- ToolChainDefaultArchitecture: host OS, tool chain default architecture
- Intel32Architecture: host OS, x86
- Intel64Architecture: host OS, x86-64 (not on Windows hosts)

Build scripts add ExplicitPlatformStrategy instances that match platforms by
name.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, Tuple, Union

from targetkit.core.platform import OperatingSystem, Platform
from targetkit.toolchain.tools import ToolSet, ToolType, append_arguments, host_dependent

# Mutates the tool set in place; may return a replacement tool set.
ToolSetAction = Callable[[ToolSet], Optional[ToolSet]]

COMPILERS_AND_LINKER = (
    ToolType.CPP_COMPILER,
    ToolType.C_COMPILER,
    ToolType.OBJECTIVEC_COMPILER,
    ToolType.OBJECTIVECPP_COMPILER,
    ToolType.LINKER,
)


def apply_action(action: ToolSetAction, tool_set: ToolSet) -> ToolSet:
    """Run a user action and return the tool set it leaves behind."""
    result = action(tool_set)
    return tool_set if result is None else result


class PlatformStrategy(ABC):
    """Matching rule plus configuration action for target platforms."""

    @abstractmethod
    def matches(self, platform: Platform) -> bool:
        """Return True when this strategy can build for ``platform``."""
        pass

    @abstractmethod
    def configure(self, tool_set: ToolSet) -> ToolSet:
        """Adjust ``tool_set`` for the matched platform and return it."""
        pass


class _HostStrategy(PlatformStrategy):
    """Built-in strategy bound to the operating system of the host."""

    def __init__(self, host: OperatingSystem):
        self.host = host

    def _targets_host(self, platform: Platform) -> bool:
        return platform.operating_system == self.host

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.host == other.host

    def __hash__(self) -> int:
        return hash((type(self), self.host))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host.name!r})"


class ToolChainDefaultArchitecture(_HostStrategy):
    """Builds for the host OS with whatever the compiler targets by default."""

    def matches(self, platform: Platform) -> bool:
        return self._targets_host(platform) and platform.architecture.is_tool_chain_default

    def configure(self, tool_set: ToolSet) -> ToolSet:
        return tool_set


class _IntelArchitecture(_HostStrategy):
    compiler_flag = ""
    assembler_flag = ""
    macos_arch = ""

    def configure(self, tool_set: ToolSet) -> ToolSet:
        compiler_args = append_arguments(self.compiler_flag)
        for tool_type in COMPILERS_AND_LINKER:
            tool_set.configure(tool_type, compiler_args)
        tool_set.configure(
            ToolType.ASSEMBLER,
            host_dependent(
                self.host,
                macos=append_arguments("-arch", self.macos_arch),
                other=append_arguments(self.assembler_flag),
            ),
        )
        return tool_set


class Intel32Architecture(_IntelArchitecture):
    """Builds 32-bit x86 binaries for the host OS."""

    compiler_flag = "-m32"
    assembler_flag = "--32"
    macos_arch = "i386"

    def matches(self, platform: Platform) -> bool:
        return self._targets_host(platform) and platform.architecture.is_i386


class Intel64Architecture(_IntelArchitecture):
    """Builds 64-bit x86 binaries for the host OS."""

    compiler_flag = "-m64"
    assembler_flag = "--64"
    macos_arch = "x86_64"

    def matches(self, platform: Platform) -> bool:
        # 64-bit output through this toolchain is unsupported on Windows hosts
        return (
            self._targets_host(platform)
            and not self.host.is_windows
            and platform.architecture.is_amd64
        )


class ExplicitPlatformStrategy(PlatformStrategy):
    """
    Strategy for platforms named explicitly by a build script.

    Args:
        platform_names: Names of the platforms this strategy builds for
        action: Optional tool set action applied when the strategy is used
    """

    def __init__(
        self,
        platform_names: Union[str, Iterable[str]],
        action: Optional[ToolSetAction] = None,
    ):
        if isinstance(platform_names, str):
            platform_names = [platform_names]
        self.platform_names: Tuple[str, ...] = tuple(platform_names)
        self.action = action

    def matches(self, platform: Platform) -> bool:
        return platform.name in self.platform_names

    def configure(self, tool_set: ToolSet) -> ToolSet:
        if self.action is None:
            return tool_set
        return apply_action(self.action, tool_set)

    def __repr__(self) -> str:
        return f"ExplicitPlatformStrategy({list(self.platform_names)!r})"


BUILTIN_STRATEGIES = (
    ToolChainDefaultArchitecture,
    Intel32Architecture,
    Intel64Architecture,
)


def builtin_strategies(host: OperatingSystem) -> Tuple[PlatformStrategy, ...]:
    """Instantiate the built-in strategies for ``host``, in seeding order."""
    return tuple(cls(host) for cls in BUILTIN_STRATEGIES)


__all__ = [
    "ToolSetAction",
    "PlatformStrategy",
    "ToolChainDefaultArchitecture",
    "Intel32Architecture",
    "Intel64Architecture",
    "ExplicitPlatformStrategy",
    "BUILTIN_STRATEGIES",
    "builtin_strategies",
    "apply_action",
]
