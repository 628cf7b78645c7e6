"""
Tool search path.

Finds tool executables in a list of configured directories, falling back
to the system PATH when no directory has been configured.
"""

import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from targetkit.core.platform import OperatingSystem, resolve_host

logger = logging.getLogger(__name__)


def _display_name(tool_type) -> str:
    return getattr(tool_type, "display_name", str(tool_type))


@dataclass(frozen=True)
class ToolSearchResult:
    """
    Outcome of looking up one tool executable.

    Attributes:
        tool_type: Kind of tool that was searched for
        executable: Executable name that was searched for
        path: Resolved executable, or None when not found
        reason: Human-readable explanation when not found
    """

    tool_type: object
    executable: str
    path: Optional[Path] = None
    reason: str = ""

    @property
    def is_available(self) -> bool:
        return self.path is not None

    def explain(self) -> str:
        """Return the not-found reason (empty when the tool was found)."""
        return self.reason


class ToolSearchPath:
    """
    Locates tool executables for a toolchain.

    Directories added with add_path() are searched in insertion order. With
    no configured directories the system PATH is used.

    Example:
        >>> search = ToolSearchPath()
        >>> search.add_path("/opt/gcc/bin")
        >>> result = search.locate(ToolType.C_COMPILER, "gcc")
        >>> result.is_available
        True
    """

    def __init__(self, operating_system: Optional[OperatingSystem] = None):
        self._os = resolve_host(operating_system)
        self._path: List[Path] = []

    @property
    def path(self) -> List[Path]:
        return list(self._path)

    def add_path(self, *entries: Union[str, Path]) -> None:
        for entry in entries:
            directory = Path(entry)
            logger.debug(f"Adding tool search directory: {directory}")
            self._path.append(directory)

    def executable_name(self, executable: str) -> str:
        """Return the on-disk file name for an executable on this host."""
        if self._os.is_windows and not executable.lower().endswith(".exe"):
            return f"{executable}.exe"
        return executable

    def locate(self, tool_type, executable: str) -> ToolSearchResult:
        """
        Find an executable for a tool.

        Args:
            tool_type: Kind of tool (used in the not-found explanation)
            executable: Executable name, without the platform suffix

        Returns:
            ToolSearchResult with either a path or a reason
        """
        file_name = self.executable_name(executable)
        found = self._find(file_name)
        if found is not None:
            logger.debug(f"Found {_display_name(tool_type)} '{executable}' at {found}")
            return ToolSearchResult(tool_type, executable, path=found)

        reason = self._not_found_reason(tool_type, executable)
        logger.debug(reason)
        return ToolSearchResult(tool_type, executable, reason=reason)

    def _find(self, file_name: str) -> Optional[Path]:
        if not self._path:
            which = shutil.which(file_name)
            return Path(which) if which else None

        for directory in self._path:
            candidate = directory / file_name
            if candidate.is_file() and os.access(candidate, os.X_OK):
                return candidate
        return None

    def _not_found_reason(self, tool_type, executable: str) -> str:
        display = _display_name(tool_type)
        if not self._path:
            return f"Could not find {display} '{executable}' in system path."
        searched = ", ".join(str(d) for d in self._path)
        return f"Could not find {display} '{executable}'. Searched in: {searched}"


__all__ = ["ToolSearchPath", "ToolSearchResult"]
