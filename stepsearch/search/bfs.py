"""
Breadth-first search, one dequeue per step.

Finds a path with the fewest edges. Nodes are marked visited when they are
enqueued, so each node enters the queue at most once.
"""

from __future__ import annotations

from collections import deque

from stepsearch.graph.base import GraphModel, Node
from stepsearch.search.base import SearchStrategy, check_endpoints
from stepsearch.search.reconstruct import path_cost, reconstruct_path
from stepsearch.search.state import FailureReason, Path, StepResult


class BreadthFirstSearch(SearchStrategy):
    """
    FIFO-frontier search with a parent map for path recovery.

    Guarantees the shortest path by edge count.
    """

    def __init__(self, graph: GraphModel, start: Node, goal: Node) -> None:
        """
        Args:
            graph: Graph to search (typically a GridGraph)
            start: Node the search starts from
            goal: Node to reach
        """
        self.graph = graph
        self.start = start
        self.goal = goal
        super().__init__()

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first search (fewest edges)"

    def _initialize(self) -> None:
        self._queue: deque[Node] = deque()
        self._visited: set[Node] = set()
        self._parents: dict[Node, Node | None] = {}
        if self._invalid is None:
            self._queue.append(self.start)
            self._visited.add(self.start)
            self._parents[self.start] = None

    def _validate(self) -> str | None:
        return check_endpoints(self.graph, self.start, self.goal)

    def frontier_snapshot(self) -> tuple[Path, ...]:
        return tuple((node,) for node in self._queue)

    @property
    def visited(self) -> frozenset:
        """Nodes ever enqueued during this run."""
        return frozenset(self._visited)

    def _advance(self) -> StepResult:
        if not self._queue:
            return self._failure(FailureReason.NO_PATH_FOUND, "frontier exhausted, no path found")

        current = self._queue.popleft()
        self._mark_expanded(current)

        if current == self.goal:
            path = reconstruct_path(self._parents, current)
            return self._success(path, path_cost(self.graph, path))

        for neighbor in self.graph.neighbors(current):
            if neighbor not in self._visited:
                self._visited.add(neighbor)
                self._parents[neighbor] = current
                self._queue.append(neighbor)

        return self._running()
