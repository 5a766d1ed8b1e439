"""
Graph models module.

Provides the graphs the search strategies run on:
- GraphModel: Abstract neighbour/cost interface
- GridGraph: Walled lattice, unit cost, 4-neighbour moves
- ProximityGraph: k-NN graph over 2D points, Euclidean cost
"""

from stepsearch.graph.base import GraphModel, Node
from stepsearch.graph.grid import Coord, GridGraph
from stepsearch.graph.proximity import ProximityGraph

__all__ = [
    "GraphModel",
    "Node",
    "Coord",
    "GridGraph",
    "ProximityGraph",
]
