"""Board representation for the block puzzle playfield."""

from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import HEIGHT, WIDTH


Grid = NDArray[np.uint8]

# Value stored in unoccupied cells.  Any other value is a ``Color`` token.
EMPTY = 0


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty grid of ``height`` rows by ``width`` columns."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Fixed-size playfield holding the colours of locked cells.

    Coordinates are ``(x, y)`` with ``x`` the column and ``y`` the row, row
    ``0`` being the top of the board.  The underlying array is indexed
    ``[y, x]``.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.grid: Grid = create_empty_grid(self.width, self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_cell(self, x: int, y: int) -> int:
        """Return the value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return int(self.grid[y, x])
        raise IndexError(f"Cell ({x}, {y}) out of bounds")

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the in-bounds cell at ``(x, y)`` is empty."""

        return self.get_cell(x, y) == EMPTY

    def write_cells(self, cells: Iterable[Tuple[int, int, int]]) -> None:
        """Overwrite each ``(x, y, value)`` cell.

        Either every cell is written or, when one of them lies outside the
        board, none are.

        Raises:
            IndexError: If any cell is outside the board.
        """

        coordinates = np.asarray(list(cells), dtype=np.int16)
        if coordinates.size == 0:
            return

        xs, ys, values = coordinates.T
        if (
            np.any(xs < 0)
            or np.any(xs >= self.width)
            or np.any(ys < 0)
            or np.any(ys >= self.height)
        ):
            raise IndexError("Cell out of bounds")
        self.grid[ys, xs] = values.astype(np.uint8)

    def clear_full_rows(self) -> int:
        """Remove every full row at once and return how many were removed.

        Rows above a removed row shift down and the same number of empty rows
        are inserted at the top, so the board keeps its height.
        """

        full_rows = np.all(self.grid != EMPTY, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def rows(self) -> List[List[int]]:
        """Return the grid as nested Python lists."""

        return self.grid.tolist()

    def copy(self) -> "Board":
        clone = Board(self.width, self.height)
        clone.grid = self.grid.copy()
        return clone
