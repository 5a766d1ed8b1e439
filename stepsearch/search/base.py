"""
Search strategy base class.

Every strategy owns its frontier and bookkeeping and advances by exactly one
pop/expand cycle per `step()` call. Nothing runs in the background: the
caller decides when (and whether) to take the next step.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from stepsearch.graph.base import GraphModel, Node
from stepsearch.search.state import (
    Failure,
    FailureReason,
    Path,
    Running,
    StepResult,
    Success,
)

logger = logging.getLogger(__name__)


def check_endpoints(graph: GraphModel, start: Node, goal: Node | None = None) -> str | None:
    """Describe why `graph` cannot be searched from `start` (to `goal`), or return None."""
    if graph.is_empty():
        return "graph has no nodes"
    if start not in graph:
        return f"start {start!r} is not a node of the graph"
    if goal is not None and goal not in graph:
        return f"goal {goal!r} is not a node of the graph"
    return None


class SearchStrategy(ABC):
    """
    Abstract base class for step-driven search strategies.

    Subclasses implement `_validate()` to reject unusable input,
    `_initialize()` to create fresh run state, and `_advance()` to perform one
    step. Input is checked before `_initialize()` runs and an invalid input is
    reported as a Failure on the first step. The base class numbers steps,
    records expanded nodes and keeps returning the terminal result once the run is over.
    """

    def __init__(self) -> None:
        self.reset()

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the strategy (e.g., 'bfs', 'beam')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @abstractmethod
    def _initialize(self) -> None:
        """Create the frontier and any other per-run state.

        `self._invalid` is already set; when it is not None the frontier
        must be left empty.
        """
        ...

    @abstractmethod
    def _validate(self) -> str | None:
        """Describe what makes the input unsearchable, or return None."""
        ...

    @abstractmethod
    def _advance(self) -> StepResult:
        """Perform one step. Only called while the run is not terminal."""
        ...

    @abstractmethod
    def frontier_snapshot(self) -> tuple[Path, ...]:
        """Copy of the pending work as node sequences."""
        ...

    def reset(self) -> None:
        """Discard all run state and start over from the initial frontier."""
        self._steps = 0
        self._expanded: dict[Node, None] = {}
        self._result: StepResult | None = None
        self._invalid = self._validate()
        self._initialize()

    @property
    def steps_taken(self) -> int:
        return self._steps

    @property
    def last_result(self) -> StepResult | None:
        return self._result

    @property
    def is_finished(self) -> bool:
        return self._result is not None and self._result.is_terminal

    def step(self) -> StepResult:
        """
        Advance the run by one step.

        Returns:
            Running while work remains, then Success or Failure. Calling
            again after a terminal result returns that same result.
        """
        if self.is_finished:
            return self._result

        self._steps += 1

        if self._invalid is not None:
            logger.warning(f"{self.name}: invalid input, {self._invalid}")
            self._result = self._failure(FailureReason.INVALID_GRAPH, self._invalid)
            return self._result

        self._result = self._advance()

        if isinstance(self._result, Success):
            logger.info(
                f"{self.name}: found path of {len(self._result.path)} nodes, "
                f"cost {self._result.cost:.2f}, in {self._steps} steps"
            )
        elif isinstance(self._result, Failure):
            logger.info(f"{self.name}: {self._result.message} after {self._steps} steps")
        else:
            logger.debug(
                f"{self.name}: step {self._steps}, frontier size {len(self._result.frontier)}"
            )

        return self._result

    # =========================================================================
    # Helpers for subclasses
    # =========================================================================

    def _mark_expanded(self, node: Node) -> None:
        self._expanded[node] = None

    def _visited_snapshot(self) -> tuple[Node, ...]:
        return tuple(self._expanded)

    def _running(self) -> Running:
        return Running(
            step=self._steps,
            frontier=self.frontier_snapshot(),
            visited=self._visited_snapshot(),
        )

    def _success(self, path: Iterable[Node], cost: float) -> Success:
        return Success(
            step=self._steps,
            frontier=self.frontier_snapshot(),
            visited=self._visited_snapshot(),
            path=tuple(path),
            cost=float(cost),
        )

    def _failure(self, reason: FailureReason, message: str) -> Failure:
        return Failure(
            step=self._steps,
            frontier=self.frontier_snapshot(),
            visited=self._visited_snapshot(),
            reason=reason,
            message=message,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
