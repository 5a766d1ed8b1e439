"""
Heuristics module.

Provides admissible cost-to-go estimates for informed search:
- EuclideanHeuristic: Straight-line distance to the goal
- mst_cost: Prim's minimum spanning tree cost over a node subset
- TourHeuristic: MST lower bound for completing a tour
"""

from stepsearch.heuristics.euclidean import EuclideanHeuristic
from stepsearch.heuristics.mst import TourHeuristic, mst_cost

__all__ = [
    "EuclideanHeuristic",
    "TourHeuristic",
    "mst_cost",
]
