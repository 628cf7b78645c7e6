"""
Entry point for running TargetKit CLI as a module.

Usage: python -m targetkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
