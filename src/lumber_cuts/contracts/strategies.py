"""Strategy protocol for cut packing.

A packing strategy turns a validated CutRequest into a list of boards.
Strategies differ in how they trade board count against keeping the
pieces of one part together, and can be selected at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lumber_cuts.domain.value_objects import CutRequest
    from lumber_cuts.infrastructure.bin_packing import Bin


@runtime_checkable
class PackingStrategy(Protocol):
    """Protocol for cut packing strategies.

    Implementations:
    - GlobalPackingStrategy: packs every cut as one list, fewest boards
    - GroupedPackingStrategy: keeps each part's cuts together where possible

    Attributes:
        name: Identifier used to select the strategy.
        title: Short heading for reports.
        description: One-sentence explanation of the trade-off.
    """

    name: str
    title: str
    description: str

    def solve(self, request: "CutRequest") -> list["Bin"]:
        """Assign every cut in the request to a board.

        Args:
            request: Validated, kerf-padded cut request.

        Returns:
            The boards and the cuts assigned to each.
        """
        ...


__all__ = [
    "PackingStrategy",
]
