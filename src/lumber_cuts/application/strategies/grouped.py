"""Grouped packing strategy that keeps each part's cuts together.

Packing happens in three phases:

1. Each named part is packed on its own, so every board holds cuts from
   exactly one part.
2. Boards are merged wherever one board's entire contents fit in another
   board's free space. This is the only place pieces of different parts
   end up on the same board.
3. Miscellaneous cuts are packed into the leftover space, starting new
   boards only when they do not fit.

This is less cost-effective than global packing (unless you get lucky) but
makes it easier to keep track of pieces during assembly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from lumber_cuts.infrastructure.bin_packing import BestFitPacker

if TYPE_CHECKING:
    from lumber_cuts.domain.value_objects import CutRequest
    from lumber_cuts.infrastructure.bin_packing import Bin

logger = logging.getLogger(__name__)


def merge_bins(bins: Sequence["Bin"]) -> list["Bin"]:
    """Greedily combine boards whose contents fit in another board's remainder.

    Boards are visited fullest first. Each board absorbs the first later
    board with enough free space to hold everything on it, then the scan
    moves on to the next board.

    Args:
        bins: Boards to merge. Not modified.

    Returns:
        A new list of boards, at most as long as ``bins``.
    """
    # Ascending stable sort then reverse: equal boards end up in reverse order.
    merged = sorted(bins, key=lambda b: b.used_length)[::-1]

    i = 0
    while i < len(merged) - 1:
        used = merged[i].used_length
        for j in range(i + 1, len(merged)):
            if merged[j].remainder >= used:
                logger.debug(
                    "Merging board %d (%.3f\" used) with board %d (%.3f\" free)",
                    i,
                    used,
                    j,
                    merged[j].remainder,
                )
                merged[i] = merged[i].merged_with(merged[j])
                del merged[j]
                break
        i += 1

    return merged


class GroupedPackingStrategy:
    """Strategy that prioritizes keeping cuts from the same part on one board."""

    name = "grouped"
    title = "Solution that prioritizes part groupings"
    description = (
        "Easier to physically keep track of assembly, but less cost-effective "
        "(unless you get lucky)."
    )

    def __init__(self, packer: BestFitPacker | None = None) -> None:
        """Initialize with a packer.

        Args:
            packer: Packer used for every per-part and miscellaneous pass.
        """
        self._packer = packer or BestFitPacker()

    def solve(self, request: "CutRequest") -> list["Bin"]:
        usable_length = request.usable_length

        bins: list["Bin"] = []
        for group in request.groups:
            part_bins = self._packer.pack(group.cuts(), usable_length)
            logger.debug(
                "Part '%s': %d cuts -> %d boards",
                group.name,
                len(group.lengths),
                len(part_bins),
            )
            bins.extend(part_bins)

        merged = merge_bins(bins)
        logger.debug("Merged %d part boards into %d", len(bins), len(merged))

        result = self._packer.pack(
            request.ungrouped.cuts(),
            usable_length,
            existing_bins=merged,
        )
        logger.info(
            "Grouped packing: %d parts, %d cuts -> %d boards",
            len(request.groups),
            request.cut_count,
            len(result),
        )
        return result


__all__ = [
    "GroupedPackingStrategy",
    "merge_bins",
]
