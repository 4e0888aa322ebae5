"""Factory for creating packing strategies.

The PackingStrategyFactory keeps the name-to-strategy mapping in one place
so the command and CLI layers can select strategies by name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lumber_cuts.infrastructure.bin_packing import BestFitPacker

from .global_packing import GlobalPackingStrategy
from .grouped import GroupedPackingStrategy

if TYPE_CHECKING:
    from lumber_cuts.contracts.strategies import PackingStrategy


class PackingStrategyFactory:
    """Factory for creating packing strategy instances.

    Every strategy created by one factory shares the same packer. The
    packer holds no state between calls, so this is safe.

    Example:
        ```python
        factory = PackingStrategyFactory()
        strategy = factory.create("grouped")
        bins = strategy.solve(request)
        ```
    """

    # Order is the order solutions are reported in.
    _STRATEGIES = {
        GroupedPackingStrategy.name: GroupedPackingStrategy,
        GlobalPackingStrategy.name: GlobalPackingStrategy,
    }

    def __init__(self, packer: BestFitPacker | None = None) -> None:
        self._packer = packer or BestFitPacker()

    @classmethod
    def available(cls) -> list[str]:
        """Names of all known strategies, in report order."""
        return list(cls._STRATEGIES)

    def create(self, name: str) -> "PackingStrategy":
        """Create the strategy registered under ``name``.

        Raises:
            ValueError: If no strategy has that name.
        """
        try:
            strategy_cls = self._STRATEGIES[name]
        except KeyError:
            raise ValueError(
                f"Unknown packing strategy: {name!r}. "
                f"Available: {', '.join(self.available())}"
            ) from None
        return strategy_cls(self._packer)


__all__ = [
    "PackingStrategyFactory",
]
