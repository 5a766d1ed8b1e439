"""
A* search over candidate paths, one pop per step.

The open list holds every unexpanded candidate ordered by
f = cost + heuristic. The first complete candidate popped is returned: with
an admissible heuristic nothing left in the open list can beat it.

There is no closed set. Several partial paths to the same node may sit in
the open list at once, trading memory for a simpler frontier.
"""

from __future__ import annotations

import heapq
import itertools

from stepsearch.search.base import SearchStrategy
from stepsearch.search.problem import SearchProblem
from stepsearch.search.reconstruct import candidate_path
from stepsearch.search.state import Candidate, FailureReason, Path, StepResult


class AStarSearch(SearchStrategy):
    """Unbounded best-first search; optimal under an admissible heuristic."""

    def __init__(self, problem: SearchProblem) -> None:
        """
        Args:
            problem: Point-to-point or tour problem to solve
        """
        self.problem = problem
        super().__init__()

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* search (optimal with an admissible heuristic)"

    def _initialize(self) -> None:
        # Heap entries: (f, insertion order, candidate); the counter breaks ties
        self._open: list[tuple[float, int, Candidate]] = []
        self._counter = itertools.count()
        if self._invalid is None:
            self._push(self.problem.root())

    def _validate(self) -> str | None:
        return self.problem.validate()

    def _push(self, candidate: Candidate) -> None:
        heapq.heappush(self._open, (self.problem.score(candidate), next(self._counter), candidate))

    @property
    def open_size(self) -> int:
        return len(self._open)

    def frontier_snapshot(self) -> tuple[Path, ...]:
        return tuple(entry[2].path for entry in sorted(self._open, key=lambda e: e[:2]))

    def _advance(self) -> StepResult:
        if not self._open:
            return self._failure(FailureReason.NO_PATH_FOUND, "open list exhausted, no path found")

        _, _, current = heapq.heappop(self._open)
        self._mark_expanded(current.last)

        if self.problem.is_complete(current):
            return self._success(candidate_path(current), current.cost)

        for child in self.problem.expand(current):
            self._push(child)

        return self._running()
