"""YAML configuration parser for TargetKit.

This module provides parsing and validation for targetkit.yaml files, and
builds configured toolchains from them.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from targetkit.core.exceptions import ConfigError
from targetkit.core.platform import OperatingSystem, Platform
from targetkit.toolchain.gcc import TOOLCHAIN_TYPES, GccCompatibleToolChain, create_toolchain
from targetkit.toolchain.strategy import ToolSetAction
from targetkit.toolchain.tools import ToolSet, ToolType, append_arguments

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "targetkit.yaml"


@dataclass
class ToolOverride:
    """Executable and extra arguments for one tool."""

    executable: Optional[str] = None
    args: List[str] = field(default_factory=list)


@dataclass
class TargetConfig:
    """Explicitly named platforms and how to configure tools for them."""

    platforms: List[str]
    tools: Dict[str, ToolOverride] = field(default_factory=dict)

    def action(self) -> ToolSetAction:
        """Tool set action applying these overrides."""
        overrides = dict(self.tools)

        def configure(tool_set: ToolSet) -> None:
            for tool_name, override in overrides.items():
                tool = tool_set[tool_name]
                if override.executable:
                    tool.executable = override.executable
                if override.args:
                    tool.with_arguments(append_arguments(*override.args))

        return configure


@dataclass
class ToolchainConfig:
    """Configuration for a single toolchain."""

    name: str
    type: str  # 'gcc', 'clang'
    path: List[str] = field(default_factory=list)
    targets: List[TargetConfig] = field(default_factory=list)


@dataclass
class PlatformConfig:
    """Named target platform."""

    name: str
    os: Optional[str] = None
    arch: Optional[str] = None

    def to_platform(self) -> Platform:
        return Platform.of(self.name, os=self.os, arch=self.arch)


@dataclass
class TargetKitConfig:
    """Complete TargetKit configuration."""

    version: int
    toolchains: List[ToolchainConfig] = field(default_factory=list)
    platforms: List[PlatformConfig] = field(default_factory=list)

    def find_platform(self, name: str) -> Optional[Platform]:
        for platform_config in self.platforms:
            if platform_config.name == name:
                return platform_config.to_platform()
        return None


def parse_config(config_path: Path) -> TargetKitConfig:
    """
    Parse targetkit.yaml configuration file.

    Args:
        config_path: Path to targetkit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    return _parse_and_validate(data)


def _parse_and_validate(data: dict) -> TargetKitConfig:
    """Parse and validate configuration data."""
    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    if "toolchains" not in data or not data["toolchains"]:
        raise ConfigError("At least one toolchain must be defined")

    toolchains = []
    toolchain_names = set()
    for tc_data in data["toolchains"]:
        tc = _parse_toolchain(tc_data)
        if tc.name in toolchain_names:
            raise ConfigError(f"Duplicate toolchain name: {tc.name}")
        toolchain_names.add(tc.name)
        toolchains.append(tc)

    platforms = []
    platform_names = set()
    for platform_data in data.get("platforms") or []:
        platform_config = _parse_platform(platform_data)
        if platform_config.name in platform_names:
            raise ConfigError(f"Duplicate platform name: {platform_config.name}")
        platform_names.add(platform_config.name)
        platforms.append(platform_config)

    return TargetKitConfig(
        version=data["version"], toolchains=toolchains, platforms=platforms
    )


def _parse_toolchain(data: dict) -> ToolchainConfig:
    """Parse toolchain configuration."""
    if not isinstance(data, dict):
        raise ConfigError("Toolchain entry must be a mapping")

    for field_name in ("name", "type"):
        if field_name not in data:
            raise ConfigError(f"Toolchain missing required field: {field_name}")

    if data["type"] not in TOOLCHAIN_TYPES:
        raise ConfigError(
            f"Invalid toolchain type: {data['type']} "
            f"(expected one of {sorted(TOOLCHAIN_TYPES)})"
        )

    path = data.get("path") or []
    if isinstance(path, str):
        path = [path]
    if not isinstance(path, list):
        raise ConfigError(f"toolchains.{data['name']}.path must be a list")

    targets = [
        _parse_target(data["name"], target_data)
        for target_data in data.get("targets") or []
    ]

    return ToolchainConfig(
        name=data["name"],
        type=data["type"],
        path=[str(entry) for entry in path],
        targets=targets,
    )


def _parse_target(toolchain_name: str, data: dict) -> TargetConfig:
    """Parse an explicit target entry of a toolchain."""
    where = f"toolchains.{toolchain_name}.targets"
    if not isinstance(data, dict) or "platforms" not in data:
        raise ConfigError(f"{where} entry missing required field: platforms")

    platforms = data["platforms"]
    if isinstance(platforms, str):
        platforms = [platforms]
    if not isinstance(platforms, list):
        raise ConfigError(f"{where}: platforms must be a list of names")
    if not platforms:
        raise ConfigError(f"{where} entry must name at least one platform")

    tools_data = data.get("tools") or {}
    if not isinstance(tools_data, dict):
        raise ConfigError(
            f"{where}: tools must be a mapping of tool name to settings"
        )

    tools = {}
    for tool_name, tool_data in tools_data.items():
        try:
            ToolType.from_name(tool_name)
        except KeyError:
            valid = [t.tool_name for t in ToolType]
            raise ConfigError(
                f"{where}: unknown tool '{tool_name}' (expected one of {valid})"
            )
        tool_data = tool_data or {}
        if not isinstance(tool_data, dict):
            raise ConfigError(
                f"{where}: settings for tool '{tool_name}' must be a mapping"
            )
        args = tool_data.get("args") or []
        if isinstance(args, str):
            args = args.split()
        if not isinstance(args, list):
            raise ConfigError(f"{where}: args for tool '{tool_name}' must be a list")
        tools[tool_name] = ToolOverride(
            executable=tool_data.get("executable"),
            args=[str(arg) for arg in args],
        )

    return TargetConfig(platforms=[str(p) for p in platforms], tools=tools)


def _parse_platform(data: dict) -> PlatformConfig:
    """Parse a named platform."""
    if not isinstance(data, dict) or "name" not in data:
        raise ConfigError("Platform missing required field: name")
    return PlatformConfig(name=data["name"], os=data.get("os"), arch=data.get("arch"))


def load_toolchains(
    config: TargetKitConfig, host: Union[str, OperatingSystem, None] = None
) -> List[GccCompatibleToolChain]:
    """
    Build toolchains described by a configuration.

    Targets are registered in file order, so later entries take priority over
    earlier ones.
    """
    toolchains = []
    for tc in config.toolchains:
        toolchain = create_toolchain(tc.type, tc.name, host=host)
        if tc.path:
            toolchain.add_path(*tc.path)
        for target in tc.targets:
            toolchain.target(target.platforms, target.action())
        logger.debug(
            f"Loaded {toolchain.display_name} with {len(tc.targets)} explicit target(s)"
        )
        toolchains.append(toolchain)
    return toolchains


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ToolOverride",
    "TargetConfig",
    "ToolchainConfig",
    "PlatformConfig",
    "TargetKitConfig",
    "parse_config",
    "load_toolchains",
]
