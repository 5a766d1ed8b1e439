"""
Minimum-spanning-tree lower bound for tour construction.

    h(path) = MST(unvisited)
              + min distance from the path's last node to an unvisited node
              + min distance from the start node to an unvisited node

Any way of finishing the tour leaves the last node, threads every unvisited
node together (a spanning path, so at least the MST), and returns to the
start, so h never overestimates the remaining cost.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

from stepsearch.graph.proximity import ProximityGraph

if TYPE_CHECKING:
    from stepsearch.search.state import Candidate


def mst_cost(graph: ProximityGraph, nodes: Sequence[int]) -> float:
    """
    Total edge length of a minimum spanning tree over `nodes` (Prim's algorithm).

    Grows the tree from the first node, each round adding the cheapest edge
    between the tree and a node outside it. Returns 0.0 for zero or one node.
    """
    if len(nodes) < 2:
        return 0.0

    dist = graph.distance_matrix(nodes)
    in_tree = np.zeros(len(nodes), dtype=bool)
    in_tree[0] = True
    # Cheapest known edge from the tree to each outside node
    best = dist[0].copy()
    total = 0.0

    for _ in range(len(nodes) - 1):
        masked = np.where(in_tree, np.inf, best)
        nxt = int(np.argmin(masked))
        total += float(masked[nxt])
        in_tree[nxt] = True
        best = np.minimum(best, dist[nxt])

    return total


class TourHeuristic:
    """
    Lower bound on the cost of completing a tour from a partial path.

    Candidates that already contain every node score 0: their cost already
    includes the closing edge back to the start.
    """

    def __init__(self, graph: ProximityGraph, start: int) -> None:
        self._graph = graph
        self._start = start

    def unvisited(self, candidate: Candidate) -> list[int]:
        return [i for i in self._graph.nodes() if i not in candidate]

    def __call__(self, candidate: Candidate) -> float:
        remaining = self.unvisited(candidate)
        if not remaining:
            return 0.0

        leave = float(self._graph.distances_from(candidate.last, remaining).min())
        close = float(self._graph.distances_from(self._start, remaining).min())
        return mst_cost(self._graph, remaining) + leave + close

    def __repr__(self) -> str:
        return f"TourHeuristic(start={self._start})"
