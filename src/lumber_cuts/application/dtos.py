"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from lumber_cuts.domain.value_objects import CutRequest
from lumber_cuts.infrastructure.bin_packing import Bin


@dataclass(frozen=True)
class Solution:
    """Boards produced by one packing strategy.

    Attributes:
        strategy: Name of the strategy that produced the boards.
        title: Report heading for the strategy.
        description: Explanation of the strategy's trade-off.
        bins: Boards with their assigned cuts.
        board_length: Raw stock length, used for leftover figures.
    """

    strategy: str
    title: str
    description: str
    bins: tuple[Bin, ...]
    board_length: float

    @property
    def board_count(self) -> int:
        return len(self.bins)

    @property
    def cut_count(self) -> int:
        return sum(len(b.cuts) for b in self.bins)

    def leftover(self, board: Bin) -> float:
        """Raw board length not taken by the (padded) cuts on ``board``."""
        return self.board_length - board.used_length

    @property
    def total_waste(self) -> float:
        return sum(self.leftover(b) for b in self.bins)


@dataclass(frozen=True)
class CutPlan:
    """Output DTO holding every solution computed for a request."""

    request: CutRequest
    solutions: tuple[Solution, ...]

    def solution(self, strategy: str) -> Solution:
        """Return the solution produced by ``strategy``.

        Raises:
            KeyError: If that strategy was not run.
        """
        for solution in self.solutions:
            if solution.strategy == strategy:
                return solution
        raise KeyError(strategy)
