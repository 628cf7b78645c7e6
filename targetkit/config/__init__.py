"""Configuration management for TargetKit."""

from .parser import (
    DEFAULT_CONFIG_NAME,
    ToolOverride,
    TargetConfig,
    ToolchainConfig,
    PlatformConfig,
    TargetKitConfig,
    parse_config,
    load_toolchains,
)
from targetkit.core.exceptions import ConfigError

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_NAME",
    "ToolOverride",
    "TargetConfig",
    "ToolchainConfig",
    "PlatformConfig",
    "TargetKitConfig",
    "parse_config",
    "load_toolchains",
]
