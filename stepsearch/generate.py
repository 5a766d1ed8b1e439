"""
Random input generation for demos and benchmarks.

Nothing in the search engine calls this module: it builds finished graphs
that are handed to a strategy. Every generator takes a seed so runs can be
reproduced exactly.
"""

from __future__ import annotations

import logging

import numpy as np

from stepsearch.config import (
    COORD_MAX,
    COORD_MIN,
    DEFAULT_NEIGHBOR_COUNT,
    MAZE_COLS,
    MAZE_ROWS,
    MAZE_WALL_PROBABILITY,
    POINT_COUNT,
)
from stepsearch.graph.grid import Coord, GridGraph
from stepsearch.graph.proximity import ProximityGraph

logger = logging.getLogger(__name__)

MAZE_START: Coord = (1, 1)


def maze_goal(rows: int, cols: int) -> Coord:
    """Exit cell cut into the bottom border, centre column."""
    return (rows - 1, cols // 2)


def generate_maze(
    rows: int = MAZE_ROWS,
    cols: int = MAZE_COLS,
    wall_probability: float = MAZE_WALL_PROBABILITY,
    seed: int | None = None,
) -> GridGraph:
    """
    Random maze with a solid border and a single exit.

    Interior cells are walls with probability `wall_probability`. The
    border is all wall except the exit at `maze_goal(rows, cols)`, and the
    start cell `MAZE_START` is always open. A path between them is not
    guaranteed.

    Raises:
        ValueError: If the maze is smaller than 3x3 or the probability is
            outside [0, 1]
    """
    if rows < 3 or cols < 3:
        raise ValueError(f"Maze must be at least 3x3, got {rows}x{cols}")
    if not 0.0 <= wall_probability <= 1.0:
        raise ValueError(f"wall_probability must be in [0, 1], got {wall_probability}")

    rng = np.random.default_rng(seed)
    walls = rng.random((rows, cols)) < wall_probability

    walls[0, :] = True
    walls[-1, :] = True
    walls[:, 0] = True
    walls[:, -1] = True

    walls[maze_goal(rows, cols)] = False
    walls[MAZE_START] = False

    logger.debug(f"Generated {rows}x{cols} maze with {int(walls.sum())} walls (seed={seed})")
    return GridGraph(walls)


def generate_points(
    count: int = POINT_COUNT,
    seed: int | None = None,
    low: float = COORD_MIN,
    high: float = COORD_MAX,
) -> np.ndarray:
    """Uniform random points in [low, high) on both axes, shape (count, 2)."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=(count, 2))


def generate_proximity_graph(
    count: int = POINT_COUNT,
    k: int = DEFAULT_NEIGHBOR_COUNT,
    seed: int | None = None,
) -> ProximityGraph:
    """
    Random point set joined into a k-NN proximity graph.

    By convention node 0 is the start and node `count - 1` the goal.
    """
    return ProximityGraph(generate_points(count, seed=seed), k=k)
