"""
Ordered registry of platform strategies.

Ordering policy:
    1. Built-in strategies are seeded once, at construction, in the order
       given (default architecture, x86, x86-64).
    2. Every strategy registered afterwards goes ahead of all strategies
       registered before it, and ahead of every built-in.

find_match() scans front to back, so the most recent registration wins and
the built-ins act as the fallback.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from targetkit.core.platform import Platform
from targetkit.toolchain.strategy import PlatformStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """
    Priority-ordered collection of platform strategies.

    Registration is a configuration-phase operation: it must complete before
    strategies are matched from several threads.

    Example:
        >>> registry = StrategyRegistry(builtin_strategies(host))
        >>> registry.register_with_priority(ExplicitPlatformStrategy("arm-board"))
        >>> registry.find_match(Platform.of("arm-board"))
        ExplicitPlatformStrategy(['arm-board'])
    """

    def __init__(self, builtins: Iterable[PlatformStrategy] = ()):
        self._builtins: Tuple[PlatformStrategy, ...] = tuple(builtins)
        # Most recent registration first
        self._custom: List[PlatformStrategy] = []

    def register_with_priority(self, strategy: PlatformStrategy) -> None:
        """Register ``strategy`` ahead of every strategy already present."""
        self._custom.insert(0, strategy)
        logger.debug(f"Registered platform strategy {strategy!r}")

    @property
    def strategies(self) -> Tuple[PlatformStrategy, ...]:
        """All strategies in match order."""
        return tuple(self._custom) + self._builtins

    @property
    def builtins(self) -> Tuple[PlatformStrategy, ...]:
        return self._builtins

    def find_match(self, platform: Platform) -> Optional[PlatformStrategy]:
        """Return the first strategy that matches ``platform``, or None."""
        for strategy in self.strategies:
            if strategy.matches(platform):
                logger.debug(f"Platform '{platform.name}' matched {strategy!r}")
                return strategy
        logger.debug(f"No platform strategy matches '{platform.name}'")
        return None

    def __len__(self) -> int:
        return len(self._custom) + len(self._builtins)

    def __iter__(self):
        return iter(self.strategies)


__all__ = ["StrategyRegistry"]
