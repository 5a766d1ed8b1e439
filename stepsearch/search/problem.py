"""
Problem definitions for candidate-based (informed) search.

A problem decides where candidates start, which extensions are legal, when
a candidate is complete, and how promising it looks. Beam search and A*
share these so the two strategies differ only in how they rank and prune.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stepsearch.graph.proximity import ProximityGraph
from stepsearch.heuristics.euclidean import EuclideanHeuristic
from stepsearch.heuristics.mst import TourHeuristic
from stepsearch.search.base import check_endpoints
from stepsearch.search.state import Candidate


class SearchProblem(ABC):
    """Base class for problems solved by growing candidate paths."""

    def __init__(self, graph: ProximityGraph, start: int) -> None:
        self.graph = graph
        self.start = start

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs (e.g., 'path', 'tour')."""
        ...

    @abstractmethod
    def is_complete(self, candidate: Candidate) -> bool:
        ...

    @abstractmethod
    def expand(self, candidate: Candidate) -> list[Candidate]:
        """Children of `candidate`, one per legal next node, in neighbour order."""
        ...

    @abstractmethod
    def heuristic(self, candidate: Candidate) -> float:
        ...

    def validate(self) -> str | None:
        """Return a description of what is wrong with the input, or None."""
        return check_endpoints(self.graph, self.start)

    def root(self) -> Candidate:
        return Candidate.start(self.start)

    def score(self, candidate: Candidate) -> float:
        """Ranking key: f = cost + heuristic."""
        return candidate.cost + self.heuristic(candidate)


class PointToPointProblem(SearchProblem):
    """
    Find a path between two fixed nodes along graph edges.

    Children extend the path to graph neighbours not already on it; a
    candidate is complete once it ends on the goal.
    """

    def __init__(self, graph: ProximityGraph, start: int, goal: int) -> None:
        super().__init__(graph, start)
        self.goal = goal
        self._h = EuclideanHeuristic(graph, goal)

    @property
    def name(self) -> str:
        return "path"

    def validate(self) -> str | None:
        return check_endpoints(self.graph, self.start, self.goal)

    def is_complete(self, candidate: Candidate) -> bool:
        return candidate.last == self.goal

    def expand(self, candidate: Candidate) -> list[Candidate]:
        last = candidate.last
        return [
            candidate.extend(n, self.graph.cost(last, n))
            for n in self.graph.neighbors(last)
            if n not in candidate
        ]

    def heuristic(self, candidate: Candidate) -> float:
        return self._h(candidate.last)

    def __repr__(self) -> str:
        return f"PointToPointProblem(start={self.start}, goal={self.goal})"


class TourProblem(SearchProblem):
    """
    Build a closed tour through every node (approximate TSP).

    The graph is treated as complete: any node not yet on the path is a
    legal next step. When a child picks up the last unvisited node, the
    edge back to the start is added to its cost right away, so complete
    candidates always carry their true tour cost.
    """

    def __init__(self, graph: ProximityGraph, start: int = 0) -> None:
        super().__init__(graph, start)
        self._h = TourHeuristic(graph, start)

    @property
    def name(self) -> str:
        return "tour"

    def root(self) -> Candidate:
        # A single node is already a (zero-length) tour
        return self._close(Candidate.start(self.start))

    def is_complete(self, candidate: Candidate) -> bool:
        return len(candidate) == len(self.graph)

    def expand(self, candidate: Candidate) -> list[Candidate]:
        last = candidate.last
        children = []
        for n in self.graph.tour_neighbors(last):
            if n in candidate:
                continue
            children.append(self._close(candidate.extend(n, self.graph.cost(last, n))))
        return children

    def _close(self, candidate: Candidate) -> Candidate:
        if not self.is_complete(candidate):
            return candidate
        closing = self.graph.cost(candidate.last, self.start)
        return Candidate(path=candidate.path, cost=candidate.cost + closing, members=candidate.members)

    def heuristic(self, candidate: Candidate) -> float:
        return self._h(candidate)

    def __repr__(self) -> str:
        return f"TourProblem(start={self.start}, cities={len(self.graph)})"
