"""
Toolchain availability.

The probe looks up every configured tool. One resolvable tool is enough for
the toolchain to count as installed, since a toolchain can lack e.g. an
Objective-C compiler and still build C and C++. When nothing resolves, the
C compiler's lookup failure becomes the explanation.
"""

import logging
from typing import List

from targetkit.core.search_path import ToolSearchResult
from targetkit.toolchain.tools import ToolSet, ToolType

logger = logging.getLogger(__name__)


class ToolChainAvailability:
    """Collects the reasons a toolchain cannot be used."""

    def __init__(self):
        self._reasons: List[str] = []

    def unavailable(self, reason: str) -> "ToolChainAvailability":
        self._reasons.append(reason)
        return self

    def must_be_available(self, result: ToolSearchResult) -> "ToolChainAvailability":
        if not result.is_available:
            self.unavailable(result.explain())
        return self

    @property
    def is_available(self) -> bool:
        return not self._reasons

    @property
    def reasons(self) -> List[str]:
        return list(self._reasons)

    def explain(self) -> str:
        return "\n".join(self._reasons)

    def __repr__(self) -> str:
        if self.is_available:
            return "ToolChainAvailability(available)"
        return f"ToolChainAvailability(unavailable: {self._reasons!r})"


class AvailabilityProbe:
    """
    Decides whether a configured tool set can be used on this host.

    Args:
        locator: Object with ``locate(tool_type, executable)`` returning a
            ToolSearchResult (normally a ToolSearchPath)
    """

    def __init__(self, locator):
        self.locator = locator

    def probe(self, tool_set: ToolSet) -> ToolChainAvailability:
        availability = ToolChainAvailability()

        found = False
        for tool in tool_set:
            result = self.locator.locate(tool.tool_type, tool.executable)
            found |= result.is_available

        if not found:
            c_compiler = tool_set.get(ToolType.C_COMPILER)
            if c_compiler is None:
                availability.unavailable(
                    f"No {ToolType.C_COMPILER} is configured for "
                    f"platform '{tool_set.platform.name}'."
                )
            else:
                availability.must_be_available(
                    self.locator.locate(c_compiler.tool_type, c_compiler.executable)
                )

        if availability.is_available:
            logger.debug(f"Tools for '{tool_set.platform.name}' are available")
        else:
            logger.debug(
                f"Tools for '{tool_set.platform.name}' are unavailable: "
                f"{availability.explain()}"
            )
        return availability


__all__ = ["ToolChainAvailability", "AvailabilityProbe"]
