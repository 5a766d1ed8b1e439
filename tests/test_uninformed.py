"""
Unit tests for breadth-first and depth-first search on grids.
"""

import pytest

from stepsearch.generate import MAZE_START, generate_maze, maze_goal
from stepsearch.graph import GridGraph
from stepsearch.runner import StepScheduler
from stepsearch.search import BreadthFirstSearch, DepthFirstSearch
from stepsearch.search.state import Failure, FailureReason, Running, Success

MAZE_FROM = (1, 1)
MAZE_TO = (1, 5)


def run_to_end(strategy):
    """Step a strategy until it returns a terminal result."""
    result = strategy.step()
    while not result.is_terminal:
        result = strategy.step()
    return result


def is_connected_path(grid: GridGraph, path) -> bool:
    return all(b in grid.neighbors(a) for a, b in zip(path, path[1:]))


class TestBreadthFirstSearch:
    """Test BFS stepping and results."""

    def test_first_step_expands_start(self, open_grid):
        """First step pops the start and queues its neighbours."""
        bfs = BreadthFirstSearch(open_grid, (0, 0), (2, 2))
        result = bfs.step()
        assert isinstance(result, Running)
        assert result.step == 1
        assert result.visited == ((0, 0),)
        assert result.frontier == (((1, 0),), ((0, 1),))

    def test_shortest_path_open_grid(self, open_grid):
        """Path length matches Manhattan distance on an open grid."""
        result = run_to_end(BreadthFirstSearch(open_grid, (0, 0), (2, 2)))
        assert isinstance(result, Success)
        assert result.path[0] == (0, 0)
        assert result.path[-1] == (2, 2)
        assert len(result.path) == 5
        assert result.cost == 4.0
        assert is_connected_path(open_grid, result.path)

    def test_shortest_way_round_maze(self, maze):
        """BFS takes the short way along the top of the ring."""
        result = run_to_end(BreadthFirstSearch(maze, MAZE_FROM, MAZE_TO))
        assert result.path == ((1, 1), (1, 2), (1, 3), (1, 4), (1, 5))

    def test_sealed_goal_reports_no_path(self, walled_in_goal):
        """Exhausting the frontier reports NO_PATH_FOUND."""
        result = run_to_end(BreadthFirstSearch(walled_in_goal, (0, 0), (3, 3)))
        assert isinstance(result, Failure)
        assert result.reason == FailureReason.NO_PATH_FOUND
        assert result.frontier == ()
        assert (3, 3) not in result.visited

    def test_nodes_enqueued_at_most_once(self, walled_in_goal):
        """Total enqueues equal the number of distinct nodes expanded."""
        bfs = BreadthFirstSearch(walled_in_goal, (0, 0), (3, 3))
        enqueued = 1
        queued_before = 1
        for result in StepScheduler(bfs):
            if not result.is_terminal:
                enqueued += len(result.frontier) - (queued_before - 1)
                queued_before = len(result.frontier)
        assert enqueued == len(result.visited) == 16
        assert bfs.visited == frozenset(result.visited)

    def test_start_is_goal(self, open_grid):
        """Starting on the goal succeeds immediately with a one-node path."""
        result = BreadthFirstSearch(open_grid, (1, 1), (1, 1)).step()
        assert isinstance(result, Success)
        assert result.path == ((1, 1),)
        assert result.cost == 0.0

    def test_start_on_wall_is_invalid(self, maze):
        """A start cell that is a wall is reported as invalid input."""
        result = BreadthFirstSearch(maze, (0, 0), MAZE_TO).step()
        assert isinstance(result, Failure)
        assert result.reason == FailureReason.INVALID_GRAPH

    def test_goal_out_of_bounds_is_invalid(self, maze):
        """A goal outside the grid is reported as invalid input."""
        result = BreadthFirstSearch(maze, MAZE_FROM, (40, 40)).step()
        assert result.reason == FailureReason.INVALID_GRAPH

    def test_fractional_start_is_invalid(self, open_grid):
        """A non-integer start cell is invalid input, not a crash."""
        result = BreadthFirstSearch(open_grid, (1.5, 1), (2, 2)).step()
        assert isinstance(result, Failure)
        assert result.reason == FailureReason.INVALID_GRAPH

    @pytest.mark.parametrize("cls", [BreadthFirstSearch, DepthFirstSearch])
    def test_unhashable_start_is_invalid(self, open_grid, cls):
        """A list start is reported on the first step with empty bookkeeping."""
        result = cls(open_grid, [1, 1], (2, 2)).step()
        assert isinstance(result, Failure)
        assert result.reason == FailureReason.INVALID_GRAPH
        assert result.frontier == ()
        assert result.visited == ()

    def test_empty_grid_fails_fast(self):
        """An empty grid fails on the very first step."""
        result = BreadthFirstSearch(GridGraph.from_rows([]), (0, 0), (0, 0)).step()
        assert isinstance(result, Failure)
        assert result.reason == FailureReason.INVALID_GRAPH
        assert result.step == 1

    def test_step_after_finish_returns_same_result(self, open_grid):
        """Terminal results are sticky and cost no further work."""
        bfs = BreadthFirstSearch(open_grid, (0, 0), (0, 1))
        final = run_to_end(bfs)
        steps = bfs.steps_taken
        assert bfs.step() is final
        assert bfs.steps_taken == steps

    def test_reset_repeats_run(self, maze):
        """Resetting and re-running gives the same path."""
        bfs = BreadthFirstSearch(maze, MAZE_FROM, MAZE_TO)
        first = run_to_end(bfs)
        bfs.reset()
        assert bfs.steps_taken == 0
        second = run_to_end(bfs)
        assert first.path == second.path
        assert first.step == second.step


class TestDepthFirstSearch:
    """Test DFS stepping and results."""

    def test_explores_first_listed_neighbor_first(self, open_grid):
        """Down comes before right, so DFS hugs the left column."""
        result = run_to_end(DepthFirstSearch(open_grid, (0, 0), (2, 2)))
        assert result.path == ((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))

    def test_long_way_round_maze(self, maze):
        """DFS heads down first and takes the long way round the ring."""
        result = run_to_end(DepthFirstSearch(maze, MAZE_FROM, MAZE_TO))
        assert isinstance(result, Success)
        assert len(result.path) == 9
        assert result.cost == 8.0
        assert is_connected_path(maze, result.path)

    def test_frontier_carries_paths(self, open_grid):
        """Stack entries carry full paths; the next to pop is last."""
        result = DepthFirstSearch(open_grid, (0, 0), (2, 2)).step()
        assert result.frontier == (((0, 0), (0, 1)), ((0, 0), (1, 0)))

    def test_sealed_goal_reports_no_path(self, walled_in_goal):
        """Exhausting the stack reports NO_PATH_FOUND."""
        result = run_to_end(DepthFirstSearch(walled_in_goal, (0, 0), (3, 3)))
        assert isinstance(result, Failure)
        assert result.reason == FailureReason.NO_PATH_FOUND

    def test_paths_never_repeat_nodes(self, maze):
        """Every carried path is duplicate-free."""
        for result in StepScheduler(DepthFirstSearch(maze, MAZE_FROM, MAZE_TO)):
            for path in result.frontier:
                assert len(path) == len(set(path))


class TestBreadthVersusDepth:
    """Test properties comparing the two uninformed strategies."""

    def test_bfs_never_longer_than_dfs(self, maze):
        """BFS path is at most as long as DFS path on the fixed maze."""
        bfs = run_to_end(BreadthFirstSearch(maze, MAZE_FROM, MAZE_TO))
        dfs = run_to_end(DepthFirstSearch(maze, MAZE_FROM, MAZE_TO))
        assert len(bfs.path) < len(dfs.path)

    @pytest.mark.parametrize("seed", range(8))
    def test_bfs_never_longer_on_generated_mazes(self, seed):
        """On random mazes, both agree on solvability and BFS is never longer."""
        grid = generate_maze(15, 15, wall_probability=0.25, seed=seed)
        goal = maze_goal(15, 15)
        bfs = run_to_end(BreadthFirstSearch(grid, MAZE_START, goal))
        dfs = run_to_end(DepthFirstSearch(grid, MAZE_START, goal))
        assert type(bfs) is type(dfs)
        if isinstance(bfs, Success):
            assert len(bfs.path) <= len(dfs.path)

    def test_deterministic_repeat(self):
        """Fresh strategies on the same input give identical answers."""
        grid = generate_maze(20, 20, seed=3)
        goal = maze_goal(20, 20)
        runs = [run_to_end(DepthFirstSearch(grid, MAZE_START, goal)) for _ in range(2)]
        assert runs[0] == runs[1]
