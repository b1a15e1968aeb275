"""Board representation for the playfield."""

from __future__ import annotations

from typing import Iterable, List

import numpy as np
from numpy.typing import NDArray

from .pieces import ActivePiece


# Dimensions of the default board.
WIDTH = 10
HEIGHT = 20

EMPTY = 0

Grid = NDArray[np.uint8]


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty grid; row ``0`` is the bottom of the board."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Grid of locked cells.

    Each cell holds ``EMPTY`` or the value of the piece definition that was
    locked there, which identifies its colour.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.
        """

        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.grid[row, col] == EMPTY)
        return False

    def clear(self) -> None:
        """Empty every cell."""

        self.grid.fill(EMPTY)

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.grid[row] != EMPTY))

    def full_rows(self, rows: Iterable[int]) -> List[int]:
        """Return the full rows among ``rows``, skipping indices off the grid."""

        return [r for r in rows if 0 <= r < self.height and self.is_row_full(r)]

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def merge(self, piece: ActivePiece) -> None:
        """Write the piece's value into the empty cells it covers.

        Raises:
            IndexError: If any occupied piece cell lies outside the board.
        """

        coordinates = np.asarray(piece.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return

        rows, cols = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")

        empty = self.grid[rows, cols] == EMPTY
        self.grid[rows[empty], cols[empty]] = np.uint8(piece.value)

    def remove_rows(self, rows: Iterable[int]) -> int:
        """Delete ``rows`` and refill the top with empty rows.

        Rows are removed from the highest index down so that pending lower
        indices stay valid.  Returns the number of rows removed.
        """

        removed = 0
        for row in sorted(set(rows), reverse=True):
            remaining = np.delete(self.grid, row, axis=0)
            new_row = np.zeros((1, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((remaining, new_row))
            removed += 1
        return removed
