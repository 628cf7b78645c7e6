"""
Target platform model for TargetKit.

A platform is the pair of operating system and CPU architecture being built
for, plus the name the build script uses for it. Operating systems and
architectures accept the usual aliases and normalise to a canonical name.

Usage:
    from targetkit.core.platform import Platform, detect_host

    target = Platform.of("linux-x86", os="linux", arch="i386")
    print(target.architecture.is_i386)  # True
    print(detect_host())                 # linux
"""

import functools
import platform
from dataclasses import dataclass
from typing import Optional, Union

_OS_ALIASES = {
    "windows": "windows",
    "win32": "windows",
    "win": "windows",
    "macos": "macos",
    "osx": "macos",
    "mac os x": "macos",
    "darwin": "macos",
    "linux": "linux",
    "freebsd": "freebsd",
    "solaris": "solaris",
    "sunos": "solaris",
}

_TOOL_CHAIN_DEFAULT = "tool chain default"
_I386_ALIASES = ("x86", "i386", "ia-32", "i686")
_AMD64_ALIASES = ("x86-64", "x86_64", "amd64", "x64")


@dataclass(frozen=True)
class OperatingSystem:
    """
    Operating system family.

    Attributes:
        name: Canonical family name ('windows', 'macos', 'linux', ...)
    """

    name: str

    def __post_init__(self):
        key = self.name.strip().lower()
        if key.startswith("windows"):
            key = "windows"
        object.__setattr__(self, "name", _OS_ALIASES.get(key, key))

    @property
    def is_windows(self) -> bool:
        return self.name == "windows"

    @property
    def is_macos(self) -> bool:
        return self.name == "macos"

    @property
    def is_linux(self) -> bool:
        return self.name == "linux"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Architecture:
    """
    CPU architecture.

    The 'tool chain default' architecture means "whatever the compiler
    produces without extra flags".

    Attributes:
        name: Canonical architecture name ('x86', 'x86-64', or as given)
    """

    name: str

    def __post_init__(self):
        key = self.name.strip().lower()
        if key in _I386_ALIASES:
            key = "x86"
        elif key in _AMD64_ALIASES:
            key = "x86-64"
        object.__setattr__(self, "name", key)

    @property
    def is_tool_chain_default(self) -> bool:
        return self.name == _TOOL_CHAIN_DEFAULT

    @property
    def is_i386(self) -> bool:
        return self.name == "x86"

    @property
    def is_amd64(self) -> bool:
        return self.name == "x86-64"

    def __str__(self) -> str:
        return self.name


Architecture.TOOL_CHAIN_DEFAULT = Architecture(_TOOL_CHAIN_DEFAULT)


@dataclass(frozen=True)
class Platform:
    """
    Build target: a named operating system and architecture pair.

    Attributes:
        name: Name the build script uses for the platform
        operating_system: Target operating system family
        architecture: Target CPU architecture
    """

    name: str
    operating_system: OperatingSystem
    architecture: Architecture

    @classmethod
    def of(
        cls,
        name: str,
        os: Union[str, OperatingSystem, None] = None,
        arch: Union[str, Architecture, None] = None,
    ) -> "Platform":
        """
        Build a platform, defaulting to the host OS and the tool chain
        default architecture.

        Example:
            >>> Platform.of("win32", os="windows", arch="i686").architecture
            Architecture(name='x86')
        """
        if os is None:
            operating_system = detect_host()
        elif isinstance(os, OperatingSystem):
            operating_system = os
        else:
            operating_system = OperatingSystem(os)

        if arch is None:
            architecture = Architecture.TOOL_CHAIN_DEFAULT
        elif isinstance(arch, Architecture):
            architecture = arch
        else:
            architecture = Architecture(arch)

        return cls(name, operating_system, architecture)

    def __str__(self) -> str:
        return f"{self.name} ({self.operating_system}, {self.architecture})"


@functools.lru_cache(maxsize=1)
def detect_host() -> OperatingSystem:
    """
    Detect the operating system family of the current host.

    This function is cached - it only runs detection once per process.
    """
    return OperatingSystem(platform.system() or "unknown")


def clear_host_cache():
    """
    Clear the host detection cache.

    Useful for testing when the platform module is patched.
    """
    detect_host.cache_clear()


def resolve_host(host: Optional[Union[str, OperatingSystem]]) -> OperatingSystem:
    """Return ``host`` as an OperatingSystem, detecting it when None."""
    if host is None:
        return detect_host()
    if isinstance(host, OperatingSystem):
        return host
    return OperatingSystem(host)


__all__ = [
    "OperatingSystem",
    "Architecture",
    "Platform",
    "detect_host",
    "clear_host_cache",
    "resolve_host",
]
