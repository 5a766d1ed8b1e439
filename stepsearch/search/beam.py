"""
Beam search over candidate paths, one layer per step.

Each step expands every candidate in the beam, ranks all children by
cost + heuristic and keeps the best `beam_width`. Complete candidates are
taken out of the beam and compared against the best solution so far; the
run keeps going until the beam runs dry.

Not exhaustive: a candidate that looks worse now can be pruned even if it
would have led to the cheapest answer.
"""

from __future__ import annotations

from stepsearch.config import DEFAULT_BEAM_WIDTH
from stepsearch.search.base import SearchStrategy
from stepsearch.search.problem import SearchProblem
from stepsearch.search.reconstruct import candidate_path
from stepsearch.search.state import Candidate, FailureReason, Path, StepResult


class BeamSearch(SearchStrategy):
    """Width-bounded best-first search that remembers the best completion."""

    def __init__(self, problem: SearchProblem, beam_width: int = DEFAULT_BEAM_WIDTH) -> None:
        """
        Args:
            problem: Point-to-point or tour problem to solve
            beam_width: Maximum candidates kept after each step

        Raises:
            ValueError: If beam_width < 1
        """
        if beam_width < 1:
            raise ValueError(f"beam_width must be at least 1, got {beam_width}")
        self.problem = problem
        self.beam_width = beam_width
        super().__init__()

    @property
    def name(self) -> str:
        return f"beam-{self.beam_width}"

    @property
    def description(self) -> str:
        return f"Beam search keeping the best {self.beam_width} candidates per step"

    def _initialize(self) -> None:
        self._beam: list[Candidate] = [] if self._invalid else [self.problem.root()]
        self._best: Candidate | None = None

    def _validate(self) -> str | None:
        return self.problem.validate()

    @property
    def best(self) -> Candidate | None:
        """Cheapest complete candidate seen so far."""
        return self._best

    @property
    def beam(self) -> tuple[Candidate, ...]:
        return tuple(self._beam)

    def frontier_snapshot(self) -> tuple[Path, ...]:
        return tuple(c.path for c in self._beam)

    def _advance(self) -> StepResult:
        if not self._beam:
            if self._best is None:
                return self._failure(FailureReason.NO_PATH_FOUND, "beam emptied without a solution")
            return self._success(candidate_path(self._best), self._best.cost)

        children: list[Candidate] = []
        for candidate in self._beam:
            self._mark_expanded(candidate.last)
            if self.problem.is_complete(candidate):
                if self._best is None or candidate.cost < self._best.cost:
                    self._best = candidate
            else:
                children.extend(self.problem.expand(candidate))

        # Stable sort: ties keep expansion order
        children.sort(key=self.problem.score)
        self._beam = children[: self.beam_width]

        return self._running()
