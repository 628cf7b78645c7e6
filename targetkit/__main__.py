"""
Entry point for running TargetKit CLI as a module.

Usage: python -m targetkit [command] [options]
"""

from targetkit.cli.parser import main

if __name__ == "__main__":
    main()
