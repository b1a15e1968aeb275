"""Falling-block puzzle engine."""

from .pieces import CATALOG, ActivePiece, PieceDefinition, PieceKind
from .board import Board
from .rotation import rotate_matrix, rotate_piece
from .config import GameConfig
from .game_state import GameController, SpawnOutcome, TickResult
from .utils import can_place, gravity_interval_ms, render_grid

__all__ = [
    "CATALOG",
    "ActivePiece",
    "PieceDefinition",
    "PieceKind",
    "Board",
    "rotate_matrix",
    "rotate_piece",
    "GameConfig",
    "GameController",
    "SpawnOutcome",
    "TickResult",
    "can_place",
    "gravity_interval_ms",
    "render_grid",
]
