from __future__ import annotations

import numpy as np
import pytest

from blockfall.board import EMPTY, HEIGHT, WIDTH, Board
from blockfall.pieces import CATALOG, ActivePiece, PieceKind


def test_new_board_is_empty() -> None:
    board = Board()
    assert board.grid.shape == (HEIGHT, WIDTH)
    assert board.filled_count() == 0


def test_cell_access_out_of_bounds() -> None:
    board = Board()
    with pytest.raises(IndexError):
        board.get_cell(HEIGHT, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, 1)
    assert board.is_empty(0, WIDTH) is False


def test_clear_empties_every_row() -> None:
    board = Board()
    board.grid[:] = 3
    board.clear()
    assert board.filled_count() == 0
    assert board.grid.shape == (HEIGHT, WIDTH)


def test_is_row_full() -> None:
    board = Board()
    board.grid[2] = 1
    board.set_cell(3, 0, 1)
    assert board.is_row_full(2)
    assert not board.is_row_full(3)
    assert board.full_rows(range(-1, HEIGHT + 2)) == [2]


def test_merge_writes_only_empty_cells() -> None:
    board = Board()
    other = CATALOG[PieceKind.S].value
    board.set_cell(0, 0, other)
    piece = ActivePiece.from_definition(CATALOG[PieceKind.O], x=0, y=0)
    board.merge(piece)
    value = CATALOG[PieceKind.O].value
    assert board.get_cell(0, 0) == other
    assert board.get_cell(0, 1) == value
    assert board.get_cell(1, 0) == value
    assert board.get_cell(1, 1) == value
    assert board.filled_count() == 4


def test_merge_ignores_empty_matrix_cells() -> None:
    board = Board()
    piece = ActivePiece.from_definition(CATALOG[PieceKind.T], x=0, y=0)
    board.merge(piece)
    assert board.get_cell(0, 0) == EMPTY
    assert board.filled_count() == 4


def test_merge_out_of_bounds_raises() -> None:
    board = Board()
    piece = ActivePiece.from_definition(CATALOG[PieceKind.I], x=8, y=0)
    with pytest.raises(IndexError):
        board.merge(piece)


def test_remove_rows_compacts_and_refills_top() -> None:
    board = Board()
    for row in range(HEIGHT):
        board.grid[row] = row + 1

    removed = board.remove_rows([5, 12])

    assert removed == 2
    assert board.grid.shape == (HEIGHT, WIDTH)
    expected = [row + 1 for row in range(HEIGHT) if row not in (5, 12)] + [0, 0]
    assert board.grid[:, 0].tolist() == expected
    assert np.all(board.grid[-2:] == EMPTY)


def test_merge_then_remove_keeps_cell_count_balanced() -> None:
    board = Board()
    board.grid[0, 4:] = 1
    board.set_cell(1, 6, 2)
    before = board.filled_count()
    piece = ActivePiece.from_definition(CATALOG[PieceKind.I], x=0, y=0)

    board.merge(piece)
    rows = board.full_rows(range(piece.y, piece.y + piece.height))
    removed = board.remove_rows(rows)

    assert rows == [0]
    assert board.filled_count() == before + 4 - WIDTH * removed
    assert board.grid.shape == (HEIGHT, WIDTH)
    assert board.get_cell(0, 6) == 2


def test_custom_dimensions() -> None:
    board = Board(width=6, height=8)
    assert board.grid.shape == (8, 6)
