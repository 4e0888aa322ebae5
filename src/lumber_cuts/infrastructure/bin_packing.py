"""Bin packing data models and algorithm for one-dimensional lumber cuts.

This module provides the Bin data structure, representing one physical
board and the cuts assigned to it, and the best-fit decreasing packer that
assigns a list of cuts to as few boards as it can.

Bins are frozen (immutable). The packer builds new bins as cuts are added,
so lists of bins handed to it by a caller are never modified.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Sequence

from lumber_cuts.domain.exceptions import InvalidCutError
from lumber_cuts.domain.value_objects import Cut

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bin:
    """Cuts assigned to a single board.

    Attributes:
        usable_length: Length of the board available for padded cuts.
        cuts: Cuts on this board, in the order they were assigned.
    """

    usable_length: float
    cuts: tuple[Cut, ...] = ()

    def __post_init__(self) -> None:
        if self.usable_length <= 0:
            raise ValueError("Usable length must be positive")

    @property
    def used_length(self) -> float:
        """Total padded length of the cuts on this board."""
        return sum(cut.length for cut in self.cuts)

    @property
    def remainder(self) -> float:
        """Usable length not yet assigned to a cut."""
        return self.usable_length - self.used_length

    @property
    def is_empty(self) -> bool:
        return not self.cuts

    def fits(self, cut: Cut) -> bool:
        return self.remainder >= cut.length

    def with_cut(self, cut: Cut) -> Bin:
        """Return a new bin with ``cut`` appended."""
        return Bin(self.usable_length, self.cuts + (cut,))

    def merged_with(self, other: Bin) -> Bin:
        """Return a new bin holding this bin's cuts followed by ``other``'s."""
        return Bin(self.usable_length, self.cuts + other.cuts)


class BestFitPacker:
    """Best-fit decreasing bin packing for cuts along a single board length.

    Cuts are taken longest first. Each cut goes on the board it fills most
    tightly, i.e. the board with the smallest remainder that still fits it.
    A new board is started only when no existing board has room.
    """

    def pack(
        self,
        cuts: Sequence[Cut],
        usable_length: float,
        existing_bins: Sequence[Bin] | None = None,
    ) -> list[Bin]:
        """Assign cuts to boards.

        Args:
            cuts: Kerf-padded cuts to place. May be empty.
            usable_length: Usable length of every board.
            existing_bins: Boards to continue filling. When omitted, packing
                starts from a single empty board.

        Returns:
            Every board, including existing boards that received no cuts.

        Raises:
            ValueError: If usable_length is not positive.
            InvalidCutError: If a cut is not a Cut, has a non-positive or
                non-numeric length, or is longer than usable_length.
        """
        if usable_length <= 0:
            raise ValueError("Usable length must be positive")

        if existing_bins is None:
            bins = [Bin(usable_length)]
        else:
            bins = list(existing_bins)

        for cut in cuts:
            self._check_cut(cut, usable_length)

        # sorted() is stable, so equal-length cuts keep their input order
        for cut in sorted(cuts, key=lambda c: c.length, reverse=True):
            index = self._best_fit_index(bins, cut)
            if index is None:
                bins.append(Bin(usable_length, (cut,)))
            else:
                bins[index] = bins[index].with_cut(cut)

        logger.debug(
            "Packed %d cuts onto %d boards (usable length %.3f\")",
            len(cuts),
            len(bins),
            usable_length,
        )
        return bins

    def _best_fit_index(self, bins: Sequence[Bin], cut: Cut) -> int | None:
        """Index of the fullest board that still fits ``cut``.

        Ties go to the lowest index so a cut is placed on exactly one board.
        """
        candidates = [i for i, b in enumerate(bins) if b.fits(cut)]
        if not candidates:
            return None
        return min(candidates, key=lambda i: bins[i].remainder)

    def _check_cut(self, cut: Cut, usable_length: float) -> None:
        if not isinstance(cut, Cut):
            raise InvalidCutError(f"Expected instance of Cut, got {type(cut).__name__}")
        length = cut.length
        if isinstance(length, bool) or not isinstance(length, Real):
            raise InvalidCutError(f"Cut length must be a number, got {length!r}")
        if not math.isfinite(length) or length <= 0:
            raise InvalidCutError(f"Cut length must be positive, got {length!r}")
        if length > usable_length:
            raise InvalidCutError(
                f"Cut of {length:g}\" does not fit a board with "
                f"{usable_length:g}\" usable length"
            )
