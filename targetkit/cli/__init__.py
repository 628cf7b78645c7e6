"""
TargetKit CLI module.

This module provides the command-line interface for TargetKit.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
