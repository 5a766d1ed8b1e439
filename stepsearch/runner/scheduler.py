"""
Step scheduler that drives a strategy to completion.

The scheduler never sleeps or starts threads. Callers either iterate it (one
result per step, pacing themselves) or call run() to loop until the strategy
finishes. Stopping early simply abandons the run.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from datetime import datetime

from stepsearch.runner.state import SearchRun
from stepsearch.search.base import SearchStrategy
from stepsearch.search.state import StepResult

logger = logging.getLogger(__name__)


class StepScheduler:
    """
    Uniform driver around any SearchStrategy.

    Usage:
        scheduler = StepScheduler(strategy)
        for result in scheduler:
            draw(result.frontier, result.visited)

        run = StepScheduler(strategy).run(max_steps=10_000)
    """

    def __init__(self, strategy: SearchStrategy) -> None:
        self._strategy = strategy
        self._elapsed_ms = 0.0

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    @property
    def steps(self) -> int:
        return self._strategy.steps_taken

    @property
    def finished(self) -> bool:
        return self._strategy.is_finished

    def step(self) -> StepResult:
        """Advance the strategy by exactly one step."""
        started = time.perf_counter()
        result = self._strategy.step()
        self._elapsed_ms += (time.perf_counter() - started) * 1000
        return result

    def __iter__(self) -> Iterator[StepResult]:
        """Yield each step's result, ending with the terminal one."""
        while not self.finished:
            yield self.step()

    def run(
        self,
        max_steps: int | None = None,
        on_step: Callable[[StepResult], None] | None = None,
    ) -> SearchRun:
        """
        Step until the strategy finishes or `max_steps` is reached.

        Args:
            max_steps: Stop (abandon the run) after this many steps in total
            on_step: Called with every result as it is produced

        Returns:
            SearchRun describing where the run ended

        Raises:
            ValueError: If max_steps < 1
        """
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be at least 1, got {max_steps}")

        logger.info(f"Starting run with {self._strategy.name}: {self._strategy.description}")
        started_at = datetime.now()

        result = self._strategy.last_result
        while not self.finished:
            if max_steps is not None and self.steps >= max_steps:
                logger.warning(f"{self._strategy.name}: abandoned after {self.steps} steps")
                break
            result = self.step()
            if on_step is not None:
                on_step(result)

        return SearchRun(
            algorithm=self._strategy.name,
            result=result,
            steps=self.steps,
            elapsed_ms=self._elapsed_ms,
            timestamp=started_at,
        )
