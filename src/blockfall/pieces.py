"""Piece catalog and the active falling piece.

The catalog holds the seven immutable piece definitions.  Each definition
stores its spawn matrix with row ``0`` at the bottom, a table of positional
corrections applied whenever the piece advances into a rotation state, and
a colour tag.  :class:`ActivePiece` combines one definition with the
transient state of the piece currently under control.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Tuple

Matrix = Tuple[Tuple[int, ...], ...]


class PieceKind(str, Enum):
    """Enumeration of the seven piece kinds."""

    S = "S"
    Z = "Z"
    O = "O"
    I = "I"
    J = "J"
    L = "L"
    T = "T"


@dataclass(frozen=True)
class PieceDefinition:
    """Immutable catalog entry for one piece kind."""

    kind: PieceKind
    matrix: Matrix
    rotation_offsets: Tuple[int, ...]
    color: str
    value: int

    def __post_init__(self) -> None:
        if not self.matrix or not self.matrix[0]:
            raise ValueError(f"{self.kind.value}: matrix must not be empty")
        if any(len(row) != len(self.matrix[0]) for row in self.matrix):
            raise ValueError(f"{self.kind.value}: matrix rows must have equal length")
        if len(self.rotation_offsets) != 8:
            raise ValueError(f"{self.kind.value}: expected 8 rotation offsets")

    @property
    def width(self) -> int:
        return len(self.matrix[0])

    @property
    def height(self) -> int:
        return len(self.matrix)

    def offset(self, rotation: int) -> Tuple[int, int]:
        """Return the ``(dx, dy)`` correction for entering ``rotation``."""

        index = (rotation % 4) * 2
        return self.rotation_offsets[index], self.rotation_offsets[index + 1]


_DEFINITIONS = [
    (PieceKind.S, ((0, 1, 1), (1, 1, 0)), (-1, 0, 1, 0, -1, 0, 1, 0), "green"),
    (PieceKind.Z, ((1, 1, 0), (0, 1, 1)), (-1, 0, 1, 0, -1, 0, 1, 0), "red"),
    (PieceKind.O, ((1, 1), (1, 1)), (0, 0, 0, 0, 0, 0, 0, 0), "yellow"),
    (PieceKind.I, ((1, 1, 1, 1),), (-1, 1, 1, -1, -1, 1, 1, -1), "cyan"),
    (PieceKind.J, ((1, 0, 0), (1, 1, 1)), (0, 0, 1, 0, -1, 1, 0, -1), "blue"),
    (PieceKind.L, ((1, 1, 1), (1, 0, 0)), (-1, 1, 0, -1, 0, 0, 1, 0), "orange"),
    (PieceKind.T, ((0, 1, 0), (1, 1, 1)), (0, 0, 1, 0, -1, 1, 0, -1), "purple"),
]

# Values start at 1 so that 0 can mark an empty board cell.
CATALOG: Dict[PieceKind, PieceDefinition] = {
    kind: PieceDefinition(kind, matrix, offsets, color, value)
    for value, (kind, matrix, offsets, color) in enumerate(_DEFINITIONS, start=1)
}

COLOR_BY_VALUE: Dict[int, str] = {d.value: d.color for d in CATALOG.values()}


@dataclass
class ActivePiece:
    """Piece currently controlled by the player.

    ``x``/``y`` locate the matrix cell ``[0][0]`` on the board, with ``y``
    increasing upwards.  ``width`` and ``height`` are always derived from
    the current matrix so they swap automatically after odd rotations.
    """

    definition: PieceDefinition
    matrix: Matrix
    x: int = 0
    y: int = 0
    rotation: int = 0

    @classmethod
    def from_definition(cls, definition: PieceDefinition, x: int, y: int) -> "ActivePiece":
        return cls(definition, definition.matrix, x, y)

    @property
    def kind(self) -> PieceKind:
        return self.definition.kind

    @property
    def color(self) -> str:
        return self.definition.color

    @property
    def value(self) -> int:
        return self.definition.value

    @property
    def width(self) -> int:
        return len(self.matrix[0])

    @property
    def height(self) -> int:
        return len(self.matrix)

    def move(self, dx: int, dy: int) -> None:
        """Shift the origin by ``dx`` columns and ``dy`` rows."""

        self.x += dx
        self.y += dy

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the board ``(row, col)`` of every occupied cell."""

        return [
            (self.y + r, self.x + c)
            for r, row in enumerate(self.matrix)
            for c, cell in enumerate(row)
            if cell
        ]

    def copy(self) -> "ActivePiece":
        return replace(self)
