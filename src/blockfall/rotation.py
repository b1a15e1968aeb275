"""Rotation of piece matrices and the matching origin corrections."""

from __future__ import annotations

from .pieces import ActivePiece, Matrix

# The controller only rotates one way: three quarter-turns in the
# transform's direction equal one quarter-turn in the other.
ROTATE_STEPS = 3


def rotate_matrix(matrix: Matrix, steps: int) -> Matrix:
    """Return ``matrix`` turned by ``steps`` quarter-turns in one pass.

    The transform is selected by ``steps % 4`` rather than by rotating
    repeatedly, so ``rotate_matrix(rotate_matrix(m, n), 4 - n) == m``.
    """

    steps %= 4
    height = len(matrix)
    width = len(matrix[0])
    if steps % 2:
        width, height = height, width

    if steps == 0:
        return tuple(tuple(row) for row in matrix)
    if steps == 1:
        return tuple(
            tuple(matrix[width - 1 - x][y] for x in range(width)) for y in range(height)
        )
    if steps == 2:
        return tuple(
            tuple(matrix[height - 1 - y][width - 1 - x] for x in range(width))
            for y in range(height)
        )
    return tuple(
        tuple(matrix[x][height - 1 - y] for x in range(width)) for y in range(height)
    )


def rotate_piece(piece: ActivePiece, steps: int) -> None:
    """Rotate ``piece`` in place by ``steps`` quarter-turns.

    The matrix is transformed once for the whole amount.  The origin is then
    corrected one state at a time: every step advances ``piece.rotation``
    and adds the offset pair of the state just entered.  The offset tables
    are tuned for this incremental application.
    """

    if steps < 0:
        raise ValueError(f"rotation steps must be non-negative, got {steps}")

    piece.matrix = rotate_matrix(piece.matrix, steps)
    for _ in range(steps):
        piece.rotation = (piece.rotation + 1) % 4
        dx, dy = piece.definition.offset(piece.rotation)
        piece.move(dx, dy)
