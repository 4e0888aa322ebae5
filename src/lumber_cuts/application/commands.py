"""Commands orchestrating cut packing."""

from __future__ import annotations

import logging
from typing import Sequence

from lumber_cuts.application.dtos import CutPlan, Solution
from lumber_cuts.application.strategies import PackingStrategyFactory
from lumber_cuts.domain.value_objects import CutRequest

logger = logging.getLogger(__name__)


class OptimizeCutsCommand:
    """Command to compute cut plans for a validated request.

    Runs each selected strategy independently on the same request. The
    request is immutable, so the strategies cannot affect one another.
    """

    def __init__(self, strategy_factory: PackingStrategyFactory | None = None) -> None:
        self.strategy_factory = strategy_factory or PackingStrategyFactory()

    def execute(
        self,
        request: CutRequest,
        strategies: Sequence[str] | None = None,
    ) -> CutPlan:
        """Execute the packing command.

        Args:
            request: Validated cut request.
            strategies: Names of the strategies to run, in report order.
                Defaults to every available strategy (grouped, then global).

        Returns:
            CutPlan with one Solution per strategy.

        Raises:
            ValueError: If a strategy name is unknown.
        """
        names = list(strategies) if strategies is not None else self.strategy_factory.available()

        solutions = []
        for name in names:
            strategy = self.strategy_factory.create(name)
            bins = strategy.solve(request)
            solutions.append(
                Solution(
                    strategy=strategy.name,
                    title=strategy.title,
                    description=strategy.description,
                    bins=tuple(bins),
                    board_length=request.board_length,
                )
            )

        logger.info(
            "Computed %d solutions for %d cuts: %s",
            len(solutions),
            request.cut_count,
            ", ".join(f"{s.strategy}={s.board_count}" for s in solutions),
        )
        return CutPlan(request=request, solutions=tuple(solutions))
