"""Global packing strategy that ignores part groupings.

This strategy packs every cut, whatever part it belongs to, as one list.
It uses the fewest boards but scatters the pieces of a part across them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lumber_cuts.infrastructure.bin_packing import BestFitPacker

if TYPE_CHECKING:
    from lumber_cuts.domain.value_objects import CutRequest
    from lumber_cuts.infrastructure.bin_packing import Bin

logger = logging.getLogger(__name__)


class GlobalPackingStrategy:
    """Strategy that minimizes total board count.

    Part names stay attached to each cut for display but play no part in
    where a cut is placed.
    """

    name = "global"
    title = "Solution that ignores part groupings"
    description = (
        "This minimizes total lumber, but it's more annoying to physically "
        "track the parts."
    )

    def __init__(self, packer: BestFitPacker | None = None) -> None:
        """Initialize with a packer.

        Args:
            packer: Packer used for the single packing pass.
        """
        self._packer = packer or BestFitPacker()

    def solve(self, request: "CutRequest") -> list["Bin"]:
        cuts = request.all_cuts()
        bins = self._packer.pack(cuts, request.usable_length)
        logger.info("Global packing: %d cuts -> %d boards", len(cuts), len(bins))
        return bins


__all__ = [
    "GlobalPackingStrategy",
]
