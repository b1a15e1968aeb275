"""Utility helpers for the engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board
from .pieces import ActivePiece


DEFAULT_TICKS_PER_SECOND = 2.0


def gravity_interval_ms(ticks_per_second: float = DEFAULT_TICKS_PER_SECOND) -> float:
    """Return the delay in milliseconds between two gravity ticks."""

    if ticks_per_second <= 0:
        raise ValueError(f"ticks_per_second must be positive, got {ticks_per_second}")
    return 1000.0 / ticks_per_second


def can_place(board: Board, piece: ActivePiece) -> bool:
    """Return ``True`` if ``piece`` may occupy its current position on ``board``.

    The piece's bounding box must start at or above row ``0`` and lie within
    the board horizontally.  Every occupied cell must then land on an empty
    board cell; cells above the top of the board count as occupied.
    """

    if piece.y < 0 or piece.x < 0 or piece.x + piece.width > board.width:
        return False
    for row, col in piece.blocks():
        if not board.is_empty(row, col):
            return False
    return True


def render_grid(board: Board, active: Optional[ActivePiece] = None) -> List[List[int]]:
    """Return a copy of the board grid with the active piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without mutating the underlying board state.  Row ``0`` is the bottom
    row; renderers flip it as their surface requires.
    """

    grid = [[int(cell) for cell in row] for row in board.grid]
    if active is not None:
        for r, c in active.blocks():
            if 0 <= r < board.height and 0 <= c < board.width:
                grid[r][c] = active.value
    return grid
