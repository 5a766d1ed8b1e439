"""
Configuration constants for the stepsearch engine.

All tunable defaults are defined here. Engine classes take explicit
arguments; these values are only what callers get when they pass nothing.
Overrides are read from environment variables (or a local .env file).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Search Configuration
# =============================================================================

# Candidates kept per step by beam search
DEFAULT_BEAM_WIDTH = int(os.environ.get("STEPSEARCH_BEAM_WIDTH", "3"))

# Nearest neighbours each point connects to in a proximity graph
DEFAULT_NEIGHBOR_COUNT = int(os.environ.get("STEPSEARCH_NEIGHBORS", "3"))

# =============================================================================
# Maze Generation
# =============================================================================

MAZE_ROWS = 50
MAZE_COLS = 50

# Chance that an interior cell is a wall
MAZE_WALL_PROBABILITY = 0.3

# =============================================================================
# Point Generation
# =============================================================================

# Points in a point-to-point pathfinding graph
POINT_COUNT = 40

# Cities in a tour problem (A* cost grows factorially beyond ~10)
TOUR_CITY_COUNT = 8

# Points are placed uniformly in [COORD_MIN, COORD_MAX) on both axes
COORD_MIN = 50.0
COORD_MAX = 550.0

# =============================================================================
# Driver Configuration
# =============================================================================

# Pause between steps when a driver animates a run (milliseconds)
STEP_DELAY_MS = int(os.environ.get("STEPSEARCH_STEP_DELAY_MS", "0"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
