"""
Toolchain selection for TargetKit.

This module provides:
- Tool sets and argument configurators
- Platform strategies and their priority registry
- Availability probing
- GCC-compatible toolchains and the providers they select
"""

from targetkit.toolchain.tools import (
    ToolType,
    ToolConfiguration,
    ToolSet,
    append_arguments,
    host_dependent,
)
from targetkit.toolchain.strategy import (
    PlatformStrategy,
    ToolChainDefaultArchitecture,
    Intel32Architecture,
    Intel64Architecture,
    ExplicitPlatformStrategy,
    BUILTIN_STRATEGIES,
    builtin_strategies,
)
from targetkit.toolchain.registry import StrategyRegistry
from targetkit.toolchain.availability import AvailabilityProbe, ToolChainAvailability
from targetkit.toolchain.providers import (
    PlatformToolProvider,
    AvailableToolProvider,
    UnavailableToolProvider,
)
from targetkit.toolchain.gcc import (
    GccCompatibleToolChain,
    GccToolChain,
    ClangToolChain,
    TOOLCHAIN_TYPES,
    create_toolchain,
)

__all__ = [
    # Tools
    "ToolType",
    "ToolConfiguration",
    "ToolSet",
    "append_arguments",
    "host_dependent",
    # Strategies
    "PlatformStrategy",
    "ToolChainDefaultArchitecture",
    "Intel32Architecture",
    "Intel64Architecture",
    "ExplicitPlatformStrategy",
    "BUILTIN_STRATEGIES",
    "builtin_strategies",
    "StrategyRegistry",
    # Availability
    "AvailabilityProbe",
    "ToolChainAvailability",
    # Providers
    "PlatformToolProvider",
    "AvailableToolProvider",
    "UnavailableToolProvider",
    # Toolchains
    "GccCompatibleToolChain",
    "GccToolChain",
    "ClangToolChain",
    "TOOLCHAIN_TYPES",
    "create_toolchain",
]
