"""Board representation for the playfield."""

from __future__ import annotations

from typing import List

import numpy as np
from numpy.typing import NDArray


# Dimensions of the reference board.
WIDTH = 10
HEIGHT = 15

# Value stored in cells that hold no settled block.  Any other value is the id
# of the settled block occupying the cell.
EMPTY = -1

Grid = NDArray[np.int64]


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new ``(height, width)`` grid with every cell empty."""

    return np.full((height, width), EMPTY, dtype=np.int64)


class Board:
    """Occupancy grid keyed by ``(column, row)``.

    Cells are stored row-major in a numpy array so ``grid[row, col]`` is the
    cell at column ``col`` of row ``row``.  Row ``0`` is the top of the board.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.width and 0 <= row < self.height

    def get_cell(self, col: int, row: int) -> int:
        """Return the block id at ``(col, row)`` or :data:`EMPTY`.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(col, row):
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, col: int, row: int, value: int) -> None:
        """Store ``value`` (a block id or :data:`EMPTY`) at ``(col, row)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(col, row):
            self.grid[row, col] = value
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, col: int, row: int) -> bool:
        """Return ``True`` if ``(col, row)`` holds no settled block.

        Rows above the top of the board are open space and count as empty.
        Any other off-board coordinate is treated as occupied.
        """

        if row < 0 and 0 <= col < self.width:
            return True
        if self.in_bounds(col, row):
            return bool(self.grid[row, col] == EMPTY)
        return False

    def is_row_complete(self, row: int) -> bool:
        """Return ``True`` if every cell of ``row`` is occupied."""

        return bool(np.all(self.grid[row] != EMPTY))

    def row_ids(self, row: int) -> List[int]:
        """Return the block ids stored in ``row`` (left to right, empties skipped)."""

        return [int(v) for v in self.grid[row] if v != EMPTY]

    def shift_down(self, cleared_row: int) -> None:
        """Drop every row strictly above ``cleared_row`` by one row.

        The contents of ``cleared_row`` are overwritten and row ``0`` becomes
        empty.
        """

        if cleared_row <= 0:
            self.grid[0] = EMPTY
            return
        self.grid[1 : cleared_row + 1] = self.grid[0:cleared_row].copy()
        self.grid[0] = EMPTY

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid != EMPTY))

    def clear(self) -> None:
        """Empty every cell."""

        self.grid = create_empty_grid(self.width, self.height)

    def copy(self) -> "Board":
        clone = Board(self.width, self.height)
        clone.grid = self.grid.copy()
        return clone
