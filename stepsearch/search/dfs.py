"""
Depth-first search, one pop per step.

Each stack entry carries its whole path, since the order nodes come off a
stack does not let a single parent map describe the route. No optimality
guarantee: the first path found is returned.
"""

from __future__ import annotations

from stepsearch.graph.base import GraphModel, Node
from stepsearch.search.base import SearchStrategy, check_endpoints
from stepsearch.search.reconstruct import path_cost
from stepsearch.search.state import FailureReason, Path, StepResult


class DepthFirstSearch(SearchStrategy):
    """LIFO-frontier search; nodes are marked visited when pushed."""

    def __init__(self, graph: GraphModel, start: Node, goal: Node) -> None:
        self.graph = graph
        self.start = start
        self.goal = goal
        super().__init__()

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first search (first path found)"

    def _initialize(self) -> None:
        self._stack: list[tuple[Node, Path]] = []
        self._visited: set[Node] = set()
        if self._invalid is None:
            self._stack.append((self.start, (self.start,)))
            self._visited.add(self.start)

    def _validate(self) -> str | None:
        return check_endpoints(self.graph, self.start, self.goal)

    def frontier_snapshot(self) -> tuple[Path, ...]:
        # Bottom of the stack first, next to be popped last
        return tuple(path for _, path in self._stack)

    @property
    def visited(self) -> frozenset:
        """Nodes ever pushed during this run."""
        return frozenset(self._visited)

    def _advance(self) -> StepResult:
        if not self._stack:
            return self._failure(FailureReason.NO_PATH_FOUND, "frontier exhausted, no path found")

        current, path = self._stack.pop()
        self._mark_expanded(current)

        if current == self.goal:
            return self._success(path, path_cost(self.graph, path))

        # Push in reverse so the first listed neighbour is explored first
        for neighbor in reversed(self.graph.neighbors(current)):
            if neighbor not in self._visited:
                self._visited.add(neighbor)
                self._stack.append((neighbor, path + (neighbor,)))

        return self._running()
