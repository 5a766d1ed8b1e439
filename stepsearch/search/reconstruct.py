"""
Path recovery for finished searches.

Breadth-first search only remembers each node's predecessor, so its path has
to be walked back from the goal. Candidate-based strategies carry the whole
path with them and need no reconstruction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from stepsearch.graph.base import GraphModel, Node
from stepsearch.search.state import Candidate, Path


def reconstruct_path(parents: Mapping[Node, Node | None], goal: Node) -> Path:
    """
    Follow parent links from `goal` back to the root, then reverse.

    The root is the node whose parent is None.

    Raises:
        KeyError: If `goal` (or any node on the way back) has no parent entry
    """
    path = []
    node: Node | None = goal
    while node is not None:
        path.append(node)
        node = parents[node]
    path.reverse()
    return tuple(path)


def candidate_path(candidate: Candidate) -> Path:
    """Path stored on a candidate (already start-to-end)."""
    return candidate.path


def path_cost(graph: GraphModel, path: Sequence[Node]) -> float:
    """Sum of edge costs along `path`."""
    return float(sum(graph.cost(a, b) for a, b in zip(path, path[1:])))
