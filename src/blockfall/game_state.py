"""Game controller driving the active piece lifecycle."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .board import Board
from .config import GameConfig
from .pieces import CATALOG, ActivePiece, PieceKind
from .rotation import ROTATE_STEPS, rotate_piece
from .utils import can_place


LOGGER = logging.getLogger(__name__)


class SpawnOutcome(str, Enum):
    """Result of placing a new active piece."""

    SPAWNED = "spawned"
    # The spawn area was blocked, so the board was wiped before spawning.
    RESET = "reset"


@dataclass(frozen=True)
class TickResult:
    """What a single gravity tick did."""

    fell: bool
    cleared_rows: Tuple[int, ...] = ()
    spawn: Optional[SpawnOutcome] = None

    @property
    def locked(self) -> bool:
        return not self.fell

    @property
    def game_over(self) -> bool:
        return self.spawn is SpawnOutcome.RESET


class GameController:
    """Own the board and the active piece and apply player commands.

    Every command works on a copy of the active piece: the change is applied
    to the copy, the copy is checked with :func:`can_place` and only then
    replaces the active piece.  Rejected commands leave the state untouched
    and report ``False``.

    ``rng`` may be any object exposing ``choice`` and ``randrange`` like
    :class:`random.Random`; it defaults to one seeded from ``config.seed``.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.board = Board(self.config.width, self.config.height)
        self.active: ActivePiece
        self.spawn()

    def _attempt(self, change: Callable[[ActivePiece], None]) -> bool:
        candidate = self.active.copy()
        change(candidate)
        if not can_place(self.board, candidate):
            return False
        self.active = candidate
        return True

    def _spawn_candidate(
        self, kind: Optional[PieceKind], rotation: Optional[int]
    ) -> ActivePiece:
        if kind is None:
            definition = self.rng.choice(list(CATALOG.values()))
        else:
            definition = CATALOG[PieceKind(kind)]
        if rotation is None:
            rotation = self.rng.randrange(4)
        x = (self.board.width - definition.width) // 2
        piece = ActivePiece.from_definition(definition, x, self.config.spawn_row)
        rotate_piece(piece, rotation % 4)
        return piece

    def spawn(
        self, kind: Optional[PieceKind] = None, rotation: Optional[int] = None
    ) -> SpawnOutcome:
        """Place a new active piece near the top of the board.

        ``kind`` and ``rotation`` default to uniform random choices.  When the
        new piece does not fit, the board is cleared and a piece is spawned
        on the empty board; this is reported as :attr:`SpawnOutcome.RESET`.
        """

        piece = self._spawn_candidate(kind, rotation)
        if can_place(self.board, piece):
            self.active = piece
            return SpawnOutcome.SPAWNED

        LOGGER.info("Spawn of %s blocked. Game over, resetting board.", piece.kind.value)
        self.board.clear()
        self.active = self._spawn_candidate(kind, rotation)
        return SpawnOutcome.RESET

    def rotate(self) -> bool:
        """Try to turn the active piece one quarter-turn."""

        return self._attempt(lambda piece: rotate_piece(piece, ROTATE_STEPS))

    def move(self, sign: int) -> bool:
        """Try to shift the active piece one column towards ``sign``."""

        dx = (sign > 0) - (sign < 0)
        return self._attempt(lambda piece: piece.move(dx, 0))

    def tick(self) -> TickResult:
        """Drop the active piece one row, locking it when it cannot fall."""

        if self._attempt(lambda piece: piece.move(0, -1)):
            return TickResult(fell=True)

        piece = self.active
        self.board.merge(piece)
        rows = self.board.full_rows(range(piece.y, piece.y + piece.height))
        self.board.remove_rows(rows)
        LOGGER.debug(
            "Locked %s at (%d, %d); cleared rows %s", piece.kind.value, piece.x, piece.y, rows
        )
        return TickResult(fell=False, cleared_rows=tuple(rows), spawn=self.spawn())
