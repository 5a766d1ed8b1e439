"""
Proximity graph over 2D points.

Each point is joined to its k nearest neighbours, and every such edge is
made symmetric. Edge cost is the Euclidean distance between the endpoints.

Usage:
    graph = ProximityGraph(points, k=3)
    graph.neighbors(0)       # k-NN adjacency, in edge discovery order
    graph.cost(0, 5)         # straight-line distance
    graph.tour_neighbors(0)  # every other node (complete-graph view)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

import faiss
import numpy as np

from stepsearch.config import DEFAULT_NEIGHBOR_COUNT
from stepsearch.graph.base import GraphModel

logger = logging.getLogger(__name__)


class ProximityGraph(GraphModel):
    """
    k-nearest-neighbour graph over a fixed point set.

    Nodes are integer indices into the point array. The full pairwise
    distance matrix is computed once, so `cost` and `distance` are lookups.

    Attributes:
        points: Array of shape (n, 2), one row per node
        k: Nearest neighbours requested per node
    """

    def __init__(
        self,
        points: np.ndarray | Sequence[Sequence[float]],
        k: int = DEFAULT_NEIGHBOR_COUNT,
    ) -> None:
        """
        Build the graph and its adjacency lists.

        Args:
            points: Array-like of shape (n, 2)
            k: Number of nearest neighbours each point selects

        Raises:
            ValueError: If points are not shaped (n, 2) or k < 1
        """
        coords = np.asarray(points, dtype=np.float64)
        if coords.size == 0:
            coords = coords.reshape(0, 2)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Points must have shape (n, 2), got {coords.shape}")
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")

        self._points = coords.copy()
        self._points.setflags(write=False)
        self._k = k

        diff = self._points[:, None, :] - self._points[None, :, :]
        self._distances = np.sqrt((diff**2).sum(axis=-1))
        self._distances.setflags(write=False)

        self._adjacency = self._build_adjacency()
        logger.debug(
            f"Built proximity graph: {len(self)} nodes, k={k}, "
            f"{sum(len(a) for a in self._adjacency) // 2} edges"
        )

    def _nearest(self) -> list[list[int]]:
        """Each node's k nearest other nodes, closest first (exact search)."""
        n = len(self._points)
        if n < 2:
            return [[] for _ in range(n)]

        index = faiss.IndexFlatL2(2)
        index.add(np.ascontiguousarray(self._points, dtype=np.float32))

        # Ask for one extra hit since a point is its own nearest neighbour
        want = min(self._k + 1, n)
        _, indices = index.search(np.ascontiguousarray(self._points, dtype=np.float32), want)

        nearest = []
        for i, row in enumerate(indices):
            hits = [int(j) for j in row if j >= 0 and j != i]
            nearest.append(hits[: self._k])
        return nearest

    def _build_adjacency(self) -> list[tuple[int, ...]]:
        """Symmetric adjacency, each list in the order its edges are discovered.

        Nodes are scanned by index and each pick i -> j adds j to i and i to j,
        so a lower-numbered node that picked i can precede i's own picks.
        """
        n = len(self._points)
        adjacency: list[list[int]] = [[] for _ in range(n)]
        for i, picks in enumerate(self._nearest()):
            for j in picks:
                if j not in adjacency[i]:
                    adjacency[i].append(j)
                if i not in adjacency[j]:
                    adjacency[j].append(i)
        return [tuple(a) for a in adjacency]

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def k(self) -> int:
        return self._k

    def position(self, node: int) -> tuple[float, float]:
        x, y = self._points[node]
        return (float(x), float(y))

    def distance(self, a: int, b: int) -> float:
        """Straight-line distance between two nodes."""
        return float(self._distances[a, b])

    def distances_from(self, node: int, others: Sequence[int]) -> np.ndarray:
        """Distances from `node` to each of `others`, in order."""
        return self._distances[node, list(others)]

    def distance_matrix(self, nodes: Sequence[int]) -> np.ndarray:
        """Pairwise distances restricted to `nodes` (rows/cols in given order)."""
        idx = list(nodes)
        return self._distances[np.ix_(idx, idx)]

    def nodes(self) -> Iterator[int]:
        return iter(range(len(self._points)))

    def neighbors(self, node: int) -> tuple[int, ...]:
        return self._adjacency[node]

    def tour_neighbors(self, node: int) -> tuple[int, ...]:
        """Every node except `node`: the complete-graph view used for tours."""
        return tuple(j for j in range(len(self._points)) if j != node)

    def cost(self, a: int, b: int) -> float:
        return self.distance(a, b)

    def __contains__(self, node: object) -> bool:
        if isinstance(node, bool) or not isinstance(node, (int, np.integer)):
            return False
        return 0 <= node < len(self._points)

    def __len__(self) -> int:
        return len(self._points)
