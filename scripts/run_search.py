#!/usr/bin/env python3
"""
Search CLI - generate a random maze or point set and run a strategy on it.

Usage:
    python scripts/run_search.py --problem maze --algorithm bfs
    python scripts/run_search.py --problem maze --algorithm dfs --seed 7 --size 30
    python scripts/run_search.py --problem points --algorithm astar --neighbors 4
    python scripts/run_search.py --problem tour --algorithm beam --beam-width 5
    python scripts/run_search.py --problem points --algorithm beam --delay-ms 200 -v

Problems:
    maze    - Walled grid; start (1, 1), exit in the bottom border (bfs, dfs)
    points  - k-NN point graph; start node 0, goal the last node (beam, astar)
    tour    - Visit every point and return to node 0 (beam, astar)
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stepsearch.config import (  # noqa: E402
    DEFAULT_BEAM_WIDTH,
    DEFAULT_NEIGHBOR_COUNT,
    LOG_LEVEL,
    MAZE_ROWS,
    POINT_COUNT,
    STEP_DELAY_MS,
    TOUR_CITY_COUNT,
)
from stepsearch.generate import (  # noqa: E402
    MAZE_START,
    generate_maze,
    generate_proximity_graph,
    maze_goal,
)
from stepsearch.runner import StepScheduler  # noqa: E402
from stepsearch.search import STRATEGIES, create_strategy  # noqa: E402
from stepsearch.search.state import StepResult  # noqa: E402

logger = logging.getLogger("run_search")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a step-driven search on a generated graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--problem",
        type=str,
        default="maze",
        choices=["maze", "points", "tour"],
        help="Kind of input to generate (default: maze)",
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=None,
        choices=list(STRATEGIES),
        help="Strategy to run (default: bfs for maze, astar otherwise)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the generated input",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help=(
            f"Maze side length, or number of points "
            f"(default: {MAZE_ROWS} / {POINT_COUNT} / {TOUR_CITY_COUNT})"
        ),
    )
    parser.add_argument(
        "--neighbors",
        type=int,
        default=DEFAULT_NEIGHBOR_COUNT,
        help=f"k for the proximity graph (default: {DEFAULT_NEIGHBOR_COUNT})",
    )
    parser.add_argument(
        "--beam-width",
        type=int,
        default=DEFAULT_BEAM_WIDTH,
        help=f"Beam width for --algorithm beam (default: {DEFAULT_BEAM_WIDTH})",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Abandon the run after this many steps",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=STEP_DELAY_MS,
        help="Pause between steps to watch progress (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    algorithm = args.algorithm or ("bfs" if args.problem == "maze" else "astar")

    try:
        if args.problem == "maze":
            size = args.size or MAZE_ROWS
            graph = generate_maze(size, size, seed=args.seed)
            start, goal = MAZE_START, maze_goal(size, size)
        else:
            default_size = POINT_COUNT if args.problem == "points" else TOUR_CITY_COUNT
            size = args.size or default_size
            graph = generate_proximity_graph(size, k=args.neighbors, seed=args.seed)
            start, goal = 0, (size - 1 if args.problem == "points" else None)

        strategy = create_strategy(
            algorithm,
            graph,
            start,
            goal=goal,
            tour=args.problem == "tour",
            beam_width=args.beam_width,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print("Step Search")
    print("=" * 60)
    print(f"  Problem:   {args.problem} ({len(graph)} nodes, seed={args.seed})")
    print(f"  Start:     {start}")
    print(f"  Goal:      {goal if goal is not None else 'visit all, return to start'}")
    print(f"  Strategy:  {strategy.name} - {strategy.description}")
    print("=" * 60 + "\n")

    def pace(result: StepResult) -> None:
        logger.debug(f"step {result.step}: {len(result.frontier)} in frontier, {len(result.visited)} expanded")
        if args.delay_ms and not result.is_terminal:
            time.sleep(args.delay_ms / 1000)

    try:
        run = StepScheduler(strategy).run(max_steps=args.max_steps, on_step=pace)
    except KeyboardInterrupt:
        print("\n\nRun interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    print("=" * 60)
    if run.succeeded:
        print(f"Found a path of {len(run.path) - 1} edges, cost {run.cost:.2f}")
    elif run.finished:
        print(f"No result: {run.failure_message}")
    else:
        print(f"Abandoned after {run.steps} steps")
    print("=" * 60)

    if run.succeeded:
        if args.problem == "maze":
            print("\n" + graph.render(run.path))
        else:
            nodes = run.path + (run.path[:1] if args.problem == "tour" else ())
            print("\nPath: " + " -> ".join(str(n) for n in nodes))

    print(f"\nSteps: {run.steps}")
    print(f"Expanded: {len(run.result.visited)} nodes")
    print(f"Search time: {run.elapsed_ms:.1f}ms")

    return 0 if run.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
