"""Tests for OptimizeCutsCommand and the cut plan formatters."""

from __future__ import annotations

import json

import pytest

from lumber_cuts.application import OptimizeCutsCommand, build_cut_request
from lumber_cuts.application.dtos import CutPlan
from lumber_cuts.infrastructure import CutPlanFormatter, JsonExporter


@pytest.fixture
def plan() -> CutPlan:
    """Bookshelf plan on 8' boards with 1/8" kerf and 1/4" margin."""
    request = build_cut_request(
        8,
        0.25,
        0.125,
        [("shelf", [30, 30]), ("side", [40]), (None, [10])],
    )
    return OptimizeCutsCommand().execute(request)


class TestOptimizeCutsCommand:
    """Tests for OptimizeCutsCommand."""

    def test_runs_grouped_then_global(self, plan: CutPlan) -> None:
        assert [s.strategy for s in plan.solutions] == ["grouped", "global"]

    def test_solution_figures(self, plan: CutPlan) -> None:
        grouped = plan.solution("grouped")
        assert grouped.board_count == 2
        assert grouped.cut_count == 4
        # 192" of board minus 110.5" of padded cuts
        assert grouped.total_waste == pytest.approx(81.5)

    def test_selected_strategies_only(self, plan: CutPlan) -> None:
        only_global = OptimizeCutsCommand().execute(plan.request, ["global"])
        assert [s.strategy for s in only_global.solutions] == ["global"]
        with pytest.raises(KeyError):
            only_global.solution("grouped")

    def test_unknown_strategy(self, plan: CutPlan) -> None:
        with pytest.raises(ValueError):
            OptimizeCutsCommand().execute(plan.request, ["best"])


class TestCutPlanFormatter:
    """Tests for the plain text formatter."""

    def test_headers(self, plan: CutPlan) -> None:
        output = CutPlanFormatter().format(plan)
        assert "Solution that prioritizes part groupings (2 pieces)" in output
        assert "Solution that ignores part groupings (2 pieces)" in output
        assert output.index("prioritizes") < output.index("ignores")

    def test_board_lines_show_unpadded_cuts_and_leftover(self, plan: CutPlan) -> None:
        lines = CutPlanFormatter().format(plan).splitlines()

        assert '  1. 30" [shelf], 30" [shelf], 10" (25.625" ± 0.25" left over)' in lines
        assert '  2. 40" [side] (55.875" ± 0.25" left over)' in lines
        assert '  1. 40" [side], 30" [shelf], 10" (15.625" ± 0.25" left over)' in lines

    def test_empty_plan(self) -> None:
        request = build_cut_request(8, 0.25, 0.125, [])
        output = CutPlanFormatter().format(OptimizeCutsCommand().execute(request))
        assert output.count("No cuts.") == 2


class TestJsonExporter:
    """Tests for JSON export."""

    def test_structure(self, plan: CutPlan) -> None:
        data = json.loads(JsonExporter().export(plan))

        assert data["request"] == {
            "board_length": 96,
            "usable_length": 95.875,
            "kerf": 0.125,
            "margin": 0.25,
            "parts": ["shelf", "side"],
            "cut_count": 4,
        }
        assert [s["strategy"] for s in data["solutions"]] == ["grouped", "global"]

    def test_boards(self, plan: CutPlan) -> None:
        data = json.loads(JsonExporter().export(plan))
        grouped = data["solutions"][0]

        assert grouped["board_count"] == 2
        assert grouped["boards"][0] == {
            "cuts": [
                {"length": 30.0, "part": "shelf"},
                {"length": 30.0, "part": "shelf"},
                {"length": 10.0, "part": None},
            ],
            "leftover": 25.625,
        }
