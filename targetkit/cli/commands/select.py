"""
Select command implementation.

Runs platform selection on each configured toolchain and prints the result.
"""

import logging
from pathlib import Path
from typing import List, Optional

from targetkit.config.parser import (
    DEFAULT_CONFIG_NAME,
    TargetKitConfig,
    load_toolchains,
    parse_config,
)
from targetkit.core.exceptions import ConfigError
from targetkit.core.platform import Platform
from targetkit.toolchain.gcc import GccCompatibleToolChain, create_toolchain

logger = logging.getLogger(__name__)

EXIT_AVAILABLE = 0
EXIT_UNAVAILABLE = 1
EXIT_CONFIG_ERROR = 2


def _load_config(config_path: Optional[Path]) -> Optional[TargetKitConfig]:
    if config_path is None:
        default = Path.cwd() / DEFAULT_CONFIG_NAME
        if not default.exists():
            logger.debug("No config file found, using default toolchains")
            return None
        config_path = default
    return parse_config(config_path)


def _toolchains(config: Optional[TargetKitConfig]) -> List[GccCompatibleToolChain]:
    if config is None:
        return [create_toolchain("gcc"), create_toolchain("clang")]
    return load_toolchains(config)


def _resolve_platform(args, config: Optional[TargetKitConfig]) -> Platform:
    if config is not None and not (args.os or args.arch):
        configured = config.find_platform(args.platform)
        if configured is not None:
            return configured
    return Platform.of(args.platform, os=args.os, arch=args.arch)


def run(args) -> int:
    """
    Run the select command.

    Args:
        args: Parsed command-line arguments

    Returns:
        0 if any toolchain can build for the platform, 1 if none can,
        2 if the configuration is invalid
    """
    try:
        config = _load_config(args.config)
        toolchains = _toolchains(config)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    if args.toolchain:
        toolchains = [tc for tc in toolchains if tc.name == args.toolchain]
        if not toolchains:
            logger.error(f"No toolchain named '{args.toolchain}'")
            return EXIT_CONFIG_ERROR

    platform = _resolve_platform(args, config)
    print(f"Target platform: {platform}")

    any_available = False
    for toolchain in toolchains:
        provider = toolchain.select(platform)
        print(f"\n{toolchain.display_name}:")
        if not provider.is_available:
            for reason in provider.reasons:
                print(f"  unavailable: {reason}")
            continue

        any_available = True
        print(f"  object file suffix: {provider.object_file_suffix}")
        print(f"  command files: {'yes' if provider.supports_command_file else 'no'}")
        for tool in provider.tool_set:
            print(f"  {tool.name}: {' '.join(tool.command_line())}")

    return EXIT_AVAILABLE if any_available else EXIT_UNAVAILABLE
