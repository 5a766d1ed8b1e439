"""
Search strategies module.

Provides step-driven search over graph models:
- BreadthFirstSearch: FIFO frontier, fewest edges (grids)
- DepthFirstSearch: LIFO frontier, first path found (grids)
- BeamSearch: Width-bounded ranked candidates (proximity graphs, tours)
- AStarSearch: Unbounded ranked candidates, optimal (proximity graphs, tours)
"""

from __future__ import annotations

from stepsearch.config import DEFAULT_BEAM_WIDTH
from stepsearch.graph.base import GraphModel, Node
from stepsearch.graph.proximity import ProximityGraph
from stepsearch.search.astar import AStarSearch
from stepsearch.search.base import SearchStrategy
from stepsearch.search.beam import BeamSearch
from stepsearch.search.bfs import BreadthFirstSearch
from stepsearch.search.dfs import DepthFirstSearch
from stepsearch.search.problem import PointToPointProblem, SearchProblem, TourProblem
from stepsearch.search.state import (
    Candidate,
    Failure,
    FailureReason,
    Running,
    StepResult,
    Success,
)

__all__ = [
    "SearchStrategy",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "BeamSearch",
    "AStarSearch",
    "SearchProblem",
    "PointToPointProblem",
    "TourProblem",
    "Candidate",
    "StepResult",
    "Running",
    "Success",
    "Failure",
    "FailureReason",
    "STRATEGIES",
    "create_strategy",
]

STRATEGIES = ("bfs", "dfs", "beam", "astar")


def create_strategy(
    name: str,
    graph: GraphModel,
    start: Node,
    goal: Node | None = None,
    tour: bool = False,
    beam_width: int = DEFAULT_BEAM_WIDTH,
) -> SearchStrategy:
    """
    Build a strategy by name, ready for its first step.

    Args:
        name: Strategy identifier (bfs, dfs, beam, astar)
        graph: Graph to search
        start: Start node
        goal: Goal node (point-to-point runs)
        tour: Visit every node and return to start instead of reaching a goal
        beam_width: Beam width (beam only)

    Returns:
        Freshly initialized strategy

    Raises:
        ValueError: If the name is unknown, or the arguments do not fit it
    """
    if name not in STRATEGIES:
        available = ", ".join(STRATEGIES)
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}")

    if name in ("bfs", "dfs"):
        if tour:
            raise ValueError(f"Strategy '{name}' cannot build tours")
        if goal is None:
            raise ValueError(f"Strategy '{name}' needs a goal")
        cls = BreadthFirstSearch if name == "bfs" else DepthFirstSearch
        return cls(graph, start, goal)

    if not isinstance(graph, ProximityGraph):
        raise ValueError(f"Strategy '{name}' needs a ProximityGraph, got {type(graph).__name__}")

    if tour:
        problem: SearchProblem = TourProblem(graph, start)
    elif goal is None:
        raise ValueError(f"Strategy '{name}' needs a goal unless tour=True")
    else:
        problem = PointToPointProblem(graph, start, goal)

    if name == "beam":
        return BeamSearch(problem, beam_width=beam_width)
    return AStarSearch(problem)
