"""
Straight-line distance heuristic for point-to-point search.
"""

from __future__ import annotations

from stepsearch.graph.proximity import ProximityGraph


class EuclideanHeuristic:
    """
    Distance from a node to a fixed goal.

    Admissible on a proximity graph: every edge costs its straight-line
    length, so no path between two points is shorter than the line joining
    them.
    """

    def __init__(self, graph: ProximityGraph, goal: int) -> None:
        self._graph = graph
        self._goal = goal

    @property
    def goal(self) -> int:
        return self._goal

    def __call__(self, node: int) -> float:
        return self._graph.distance(node, self._goal)

    def __repr__(self) -> str:
        return f"EuclideanHeuristic(goal={self._goal})"
