"""Packing strategies for cut allocation.

This package implements the Strategy pattern for cut packing, allowing
different trade-offs between board count and part grouping to be selected
at runtime.

Available Strategies:
    - GlobalPackingStrategy: All cuts as one list, fewest boards
    - GroupedPackingStrategy: Per-part packing, merging, then miscellaneous cuts

Factory:
    - PackingStrategyFactory: Creates a strategy by name

Protocol:
    - PackingStrategy: Protocol defining the strategy interface (from contracts)

Example:
    ```python
    from lumber_cuts.application.strategies import PackingStrategyFactory

    strategy = PackingStrategyFactory().create("global")
    bins = strategy.solve(request)
    ```
"""

from lumber_cuts.contracts.strategies import PackingStrategy

from .factory import PackingStrategyFactory
from .global_packing import GlobalPackingStrategy
from .grouped import GroupedPackingStrategy, merge_bins

__all__ = [
    # Protocol
    "PackingStrategy",
    # Factory
    "PackingStrategyFactory",
    # Strategies
    "GlobalPackingStrategy",
    "GroupedPackingStrategy",
    "merge_bins",
]
