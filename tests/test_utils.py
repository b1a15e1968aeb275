from __future__ import annotations

import pytest

from blockfall.board import HEIGHT, WIDTH, Board
from blockfall.pieces import CATALOG, ActivePiece, PieceKind
from blockfall.rotation import rotate_piece
from blockfall.utils import can_place, gravity_interval_ms, render_grid


def _piece(kind: PieceKind, x: int, y: int) -> ActivePiece:
    return ActivePiece.from_definition(CATALOG[kind], x, y)


@pytest.mark.parametrize(
    "x, y",
    [(-1, 0), (0, -1), (WIDTH - 2, 0), (WIDTH, 5)],
)
def test_rejects_out_of_bounds(x: int, y: int) -> None:
    assert not can_place(Board(), _piece(PieceKind.T, x, y))


def test_bounds_use_matrix_box_not_occupied_cells() -> None:
    # The T's bottom-left matrix cell is empty but still counts for bounds.
    assert not can_place(Board(), _piece(PieceKind.T, -1, 0))
    assert can_place(Board(), _piece(PieceKind.T, WIDTH - 3, 0))


def test_rejects_overlap_with_locked_cell() -> None:
    board = Board()
    board.set_cell(1, 4, 1)
    assert not can_place(board, _piece(PieceKind.O, 3, 0))
    assert can_place(board, _piece(PieceKind.O, 5, 0))


def test_empty_matrix_cells_may_cover_locked_cells() -> None:
    board = Board()
    board.set_cell(0, 0, 1)
    assert can_place(board, _piece(PieceKind.S, 0, 0))


def test_rejects_cells_above_the_board() -> None:
    piece = _piece(PieceKind.I, 3, 17)
    rotate_piece(piece, 1)
    piece.y = HEIGHT - 3
    assert not can_place(Board(), piece)


def test_gravity_interval() -> None:
    assert gravity_interval_ms() == pytest.approx(500.0)
    assert gravity_interval_ms(4) == pytest.approx(250.0)
    with pytest.raises(ValueError):
        gravity_interval_ms(0)


def test_render_grid_overlays_without_mutating() -> None:
    board = Board()
    board.set_cell(0, 0, 1)
    piece = _piece(PieceKind.O, 4, 10)
    grid = render_grid(board, piece)
    value = CATALOG[PieceKind.O].value
    assert grid[0][0] == 1
    assert grid[10][4] == grid[11][5] == value
    assert board.filled_count() == 1
