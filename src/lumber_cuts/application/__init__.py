"""Application layer - use cases and orchestration."""

from .commands import OptimizeCutsCommand
from .dtos import CutPlan, Solution
from .parsing import build_cut_request, parse_board_length, parse_cut_lines

__all__ = [
    "CutPlan",
    "OptimizeCutsCommand",
    "Solution",
    "build_cut_request",
    "parse_board_length",
    "parse_cut_lines",
]
