"""
Unit tests for the grid and proximity graph models.
"""

import math

import numpy as np
import pytest

from stepsearch.graph import GridGraph, ProximityGraph


class TestGridGraph:
    """Test lattice neighbours, costs and membership."""

    def test_neighbors_order_up_down_left_right(self, open_grid):
        """Centre cell should list up, down, left, right in that order."""
        assert open_grid.neighbors((1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]

    def test_neighbors_exclude_out_of_bounds(self, open_grid):
        """Corner cell should only see its two in-bounds neighbours."""
        assert open_grid.neighbors((0, 0)) == [(1, 0), (0, 1)]

    def test_neighbors_exclude_walls(self, maze):
        """Walls never appear as neighbours."""
        assert maze.neighbors((1, 1)) == [(2, 1), (1, 2)]
        for node in maze.nodes():
            for neighbor in maze.neighbors(node):
                assert not maze.is_wall(neighbor)

    def test_cost_is_uniform(self, open_grid):
        """Every move costs 1."""
        assert open_grid.cost((0, 0), (0, 1)) == 1.0
        assert open_grid.cost((1, 1), (2, 1)) == 1.0

    def test_contains(self, maze):
        """Open in-bounds cells are nodes; walls and outside cells are not."""
        assert (1, 1) in maze
        assert (0, 0) not in maze
        assert (-1, 1) not in maze
        assert (1, 99) not in maze
        assert "not a cell" not in maze

    def test_contains_rejects_non_integer_coords(self, open_grid):
        """Coordinates must be integers to name a cell."""
        assert (1.5, 1) not in open_grid
        assert (1, 1.0) not in open_grid
        assert (True, 1) not in open_grid
        assert (np.int64(1), np.int64(1)) in open_grid

    def test_len_counts_open_cells(self, maze):
        """Length should be the number of open cells."""
        assert len(maze) == 5 + 2 + 5
        assert len(list(maze.nodes())) == len(maze)

    def test_from_rows_uneven_raises(self):
        """Rows of different lengths should be rejected."""
        with pytest.raises(ValueError):
            GridGraph.from_rows(["...", ".."])

    def test_non_2d_mask_raises(self):
        """A 1D wall mask is not a grid."""
        with pytest.raises(ValueError):
            GridGraph(np.zeros(4, dtype=bool))

    def test_empty_grid(self):
        """A grid without cells is empty."""
        grid = GridGraph.from_rows([])
        assert grid.is_empty()
        assert len(grid) == 0

    def test_all_walls_is_empty(self):
        """A grid made only of walls has no nodes."""
        assert GridGraph.from_rows(["##", "##"]).is_empty()

    def test_walls_are_read_only(self, open_grid):
        """The wall mask should not be writable after construction."""
        with pytest.raises(ValueError):
            open_grid.walls[0, 0] = True

    def test_render_marks_path(self):
        """Render should show walls, path cells and open cells."""
        grid = GridGraph.from_rows(["..#", "..."])
        assert grid.render([(0, 0), (1, 0)]) == "*.#\n*.."


class TestProximityGraph:
    """Test k-NN adjacency and Euclidean costs."""

    def test_cost_is_euclidean(self, two_points):
        """Cost should be the straight-line distance."""
        assert two_points.cost(0, 1) == pytest.approx(5.0)
        assert two_points.distance(1, 0) == pytest.approx(5.0)

    def test_adjacency_order_and_symmetry(self):
        """Collinear points with k=1 chain into a path."""
        graph = ProximityGraph([[0.0, 0.0], [1.0, 0.0], [3.0, 0.0], [7.0, 0.0]], k=1)
        assert graph.neighbors(0) == (1,)
        assert graph.neighbors(1) == (0, 2)
        assert graph.neighbors(2) == (1, 3)
        assert graph.neighbors(3) == (2,)

    def test_adjacency_in_discovery_order(self):
        """A lower-numbered node that picked this one is listed before its own pick."""
        graph = ProximityGraph([[0.0, 0.0], [1.0, 0.0], [1.9, 0.0], [10.0, 0.0]], k=1)
        assert graph._nearest()[1] == [2]
        assert graph.neighbors(1) == (0, 2)
        assert graph.neighbors(2) == (1, 3)

    def test_edges_are_symmetric(self, random_points):
        """If j is adjacent to i then i is adjacent to j."""
        graph = ProximityGraph(random_points, k=3)
        for i in graph.nodes():
            for j in graph.neighbors(i):
                assert i in graph.neighbors(j)

    def test_each_node_keeps_its_k_nearest(self, random_points):
        """Every node should be adjacent to its k closest points."""
        graph = ProximityGraph(random_points, k=3)
        for i in graph.nodes():
            order = [j for j in np.argsort(graph.distances_from(i, range(len(graph)))) if j != i]
            for j in order[:3]:
                assert int(j) in graph.neighbors(i)

    def test_no_self_loops_or_duplicates(self, random_points):
        """Adjacency lists should not contain the node itself or repeats."""
        graph = ProximityGraph(random_points, k=4)
        for i in graph.nodes():
            neighbors = graph.neighbors(i)
            assert i not in neighbors
            assert len(neighbors) == len(set(neighbors))

    def test_k_larger_than_graph(self):
        """Asking for more neighbours than exist links everything."""
        graph = ProximityGraph([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]], k=10)
        assert sorted(graph.neighbors(0)) == [1, 2]

    def test_tour_neighbors_are_all_other_nodes(self, random_points):
        """The tour view is a complete graph, independent of k-NN edges."""
        graph = ProximityGraph(random_points, k=1)
        assert graph.tour_neighbors(3) == tuple(j for j in range(15) if j != 3)

    def test_distance_matrix_subset(self, unit_square):
        """Restricted distance matrix follows the given node order."""
        sub = unit_square.distance_matrix([0, 2])
        assert sub.shape == (2, 2)
        assert sub[0, 1] == pytest.approx(math.sqrt(2))

    def test_contains(self, two_points):
        """Only valid integer indices are nodes."""
        assert 0 in two_points
        assert 1 in two_points
        assert 2 not in two_points
        assert -1 not in two_points
        assert (0, 0) not in two_points

    def test_empty_graph(self):
        """No points means an empty graph."""
        graph = ProximityGraph([])
        assert graph.is_empty()
        assert len(graph) == 0

    def test_bad_shape_raises(self):
        """Points must be 2D coordinates."""
        with pytest.raises(ValueError):
            ProximityGraph([[0.0, 0.0, 0.0]])

    def test_bad_k_raises(self):
        """k must be positive."""
        with pytest.raises(ValueError):
            ProximityGraph([[0.0, 0.0], [1.0, 1.0]], k=0)
