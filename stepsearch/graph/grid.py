"""
Walled 2D lattice graph.

Cells are addressed as (row, col). Moves go up, down, left and right, each
costing 1. Walls are removed from the graph entirely rather than being
expensive to cross.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import numpy as np

from stepsearch.graph.base import GraphModel

Coord = tuple[int, int]

# Neighbour order: up, down, left, right
_MOVES: tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

WALL_CHAR = "#"


class GridGraph(GraphModel):
    """
    Rows x cols lattice with blocked cells.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        walls: Boolean array, True where a cell is blocked
    """

    def __init__(self, walls: np.ndarray | Sequence[Sequence[int]]) -> None:
        """
        Build a grid from a 2D wall mask.

        Args:
            walls: Array-like of shape (rows, cols); truthy cells are walls

        Raises:
            ValueError: If the mask is not two-dimensional
        """
        mask = np.asarray(walls, dtype=bool)
        if mask.size == 0:
            mask = mask.reshape(0, 0)
        if mask.ndim != 2:
            raise ValueError(f"Wall mask must be 2D, got shape {mask.shape}")

        self._walls = mask.copy()
        self._walls.setflags(write=False)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> GridGraph:
        """
        Build a grid from text rows, '#' marking a wall.

        Any other character is an open cell.

        Raises:
            ValueError: If rows have different lengths
        """
        lines = list(rows)
        widths = {len(line) for line in lines}
        if len(widths) > 1:
            raise ValueError(f"Grid rows have uneven lengths: {sorted(widths)}")
        return cls([[ch == WALL_CHAR for ch in line] for line in lines])

    @classmethod
    def with_walls(cls, rows: int, cols: int, walls: Iterable[Coord] = ()) -> GridGraph:
        """Build a rows x cols grid with the given cells blocked."""
        mask = np.zeros((rows, cols), dtype=bool)
        for r, c in walls:
            mask[r, c] = True
        return cls(mask)

    @property
    def rows(self) -> int:
        return int(self._walls.shape[0])

    @property
    def cols(self) -> int:
        return int(self._walls.shape[1])

    @property
    def walls(self) -> np.ndarray:
        return self._walls

    def in_bounds(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, cell: Coord) -> bool:
        """Whether an in-bounds cell is blocked."""
        r, c = cell
        return bool(self._walls[r, c])

    def nodes(self) -> Iterator[Coord]:
        for r, c in zip(*np.nonzero(~self._walls)):
            yield (int(r), int(c))

    def neighbors(self, node: Coord) -> list[Coord]:
        r, c = node
        result = []
        for dr, dc in _MOVES:
            cell = (r + dr, c + dc)
            if self.in_bounds(cell) and not self.is_wall(cell):
                result.append(cell)
        return result

    def cost(self, a: Coord, b: Coord) -> float:
        return 1.0

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, tuple) or len(node) != 2:
            return False
        if not all(isinstance(v, (int, np.integer)) and not isinstance(v, bool) for v in node):
            return False
        return self.in_bounds(node) and not self.is_wall(node)

    def __len__(self) -> int:
        return int(self._walls.size - np.count_nonzero(self._walls))

    def render(self, path: Sequence[Coord] = ()) -> str:
        """Text picture of the grid, marking `path` cells with '*'."""
        on_path = set(path)
        lines = []
        for r in range(self.rows):
            line = []
            for c in range(self.cols):
                if self._walls[r, c]:
                    line.append(WALL_CHAR)
                elif (r, c) in on_path:
                    line.append("*")
                else:
                    line.append(".")
            lines.append("".join(line))
        return "\n".join(lines)
