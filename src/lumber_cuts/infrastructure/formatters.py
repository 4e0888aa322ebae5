"""Output formatters for cut plans."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lumber_cuts.application.dtos import CutPlan, Solution
    from lumber_cuts.domain.value_objects import Cut, CutRequest
    from lumber_cuts.infrastructure.bin_packing import Bin

# Lengths are rounded before display to hide float noise from kerf padding
_PRECISION = 4


def _inches(value: float) -> float:
    return round(value, _PRECISION)


def _format_inches(value: float) -> str:
    return f"{_inches(value):g}\""


class CutPlanFormatter:
    """Formats cut plans as plain text, one line per board.

    Cut lengths are shown as requested, with the blade width taken back
    out. Leftover is measured against the raw board length and carries the
    measurement margin as a tolerance.
    """

    def format(self, plan: CutPlan) -> str:
        sections = [self._format_solution(s, plan.request) for s in plan.solutions]
        return "\n\n".join(sections)

    def _format_solution(self, solution: Solution, request: CutRequest) -> str:
        lines = [
            f"{solution.title} ({solution.board_count} pieces)",
            "=" * 70,
            solution.description,
            "",
        ]
        if not any(b.cuts for b in solution.bins):
            lines.append("No cuts.")
            return "\n".join(lines)

        for number, board in enumerate(solution.bins, start=1):
            cuts = ", ".join(self._format_cut(cut, request) for cut in board.cuts)
            leftover = _format_inches(solution.leftover(board))
            margin = _format_inches(request.margin)
            lines.append(f"{number:>3}. {cuts} ({leftover} ± {margin} left over)")
        return "\n".join(lines)

    def _format_cut(self, cut: Cut, request: CutRequest) -> str:
        text = _format_inches(request.unpadded(cut))
        if cut.part_name is not None:
            text += f" [{cut.part_name}]"
        return text


class JsonExporter:
    """Exports cut plans as JSON."""

    def export(self, plan: CutPlan) -> str:
        """Export a cut plan as a JSON string."""
        request = plan.request
        data = {
            "request": {
                "board_length": request.board_length,
                "usable_length": _inches(request.usable_length),
                "kerf": request.kerf,
                "margin": request.margin,
                "parts": list(request.part_names),
                "cut_count": request.cut_count,
            },
            "solutions": [self._format_solution(s, request) for s in plan.solutions],
        }
        return json.dumps(data, indent=2)

    def _format_solution(self, solution: Solution, request: CutRequest) -> dict[str, Any]:
        return {
            "strategy": solution.strategy,
            "title": solution.title,
            "board_count": solution.board_count,
            "total_waste": _inches(solution.total_waste),
            "boards": [
                self._format_board(board, solution, request) for board in solution.bins
            ],
        }

    def _format_board(
        self, board: Bin, solution: Solution, request: CutRequest
    ) -> dict[str, Any]:
        return {
            "cuts": [
                {"length": _inches(request.unpadded(cut)), "part": cut.part_name}
                for cut in board.cuts
            ],
            "leftover": _inches(solution.leftover(board)),
        }
