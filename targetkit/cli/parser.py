"""
TargetKit CLI argument parser.

This module implements the command-line interface for TargetKit using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

try:
    from importlib.metadata import version

    __version__ = version("targetkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """TargetKit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with global options and subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="targetkit",
            description="TargetKit - native toolchain selection for target platforms",
            epilog='Use "targetkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"TargetKit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./targetkit.yaml)",
        )

        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )
        self._add_select_command(subparsers)

        return parser

    def _add_select_command(self, subparsers):
        """Add 'select' subcommand."""
        parser = subparsers.add_parser(
            "select",
            help="Select toolchains for a target platform",
            description=(
                "Match the target platform against each toolchain and report "
                "the configured tools or why the toolchain cannot be used"
            ),
        )
        parser.add_argument("platform", metavar="PLATFORM", help="Platform name")
        parser.add_argument(
            "--os", metavar="OS", help="Target operating system (default: host)"
        )
        parser.add_argument(
            "--arch",
            metavar="ARCH",
            help="Target architecture (default: tool chain default)",
        )
        parser.add_argument(
            "--toolchain",
            metavar="NAME",
            help="Only consider the named toolchain",
        )

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130

    def _configure_logging(self, args):
        """Configure logging based on verbose/quiet flags."""
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.WARNING
            format_str = "%(message)s"

        logging.basicConfig(level=level, format=format_str, force=True)

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to the handler of the selected command.

        Returns:
            Exit code from command handler
        """
        if args.command == "select":
            from targetkit.cli.commands import select

            return select.run(args)

        logger.error(f"Unknown command: {args.command}")
        return 1


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
