"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import numpy as np
import pytest

from stepsearch.graph import GridGraph, ProximityGraph


@pytest.fixture
def open_grid() -> GridGraph:
    """Return a 3x3 grid with no walls."""
    return GridGraph.with_walls(3, 3)


@pytest.fixture
def maze() -> GridGraph:
    """Return a ring-shaped maze: start (1, 1), goal (1, 5), short way along the top."""
    return GridGraph.from_rows(
        [
            "#######",
            "#.....#",
            "#.###.#",
            "#.....#",
            "#######",
        ]
    )


@pytest.fixture
def walled_in_goal() -> GridGraph:
    """Return a grid whose goal (3, 3) is sealed off by walls."""
    return GridGraph.from_rows(
        [
            ".....",
            ".....",
            "..###",
            "..#..",
            "..#..",
        ]
    )


@pytest.fixture
def two_points() -> ProximityGraph:
    """Return two points 5 apart joined by a single edge."""
    return ProximityGraph([[0.0, 0.0], [3.0, 4.0]], k=1)


@pytest.fixture
def unit_square() -> ProximityGraph:
    """Return the corners of a unit square, in tour order."""
    return ProximityGraph([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]], k=2)


@pytest.fixture
def random_points() -> np.ndarray:
    """Return a fixed pseudo-random point set of 15 points."""
    rng = np.random.default_rng(1234)
    return rng.uniform(50.0, 550.0, size=(15, 2))
