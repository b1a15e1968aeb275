"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import HEIGHT, WIDTH
from .utils import DEFAULT_TICKS_PER_SECOND

SPAWN_ROW = 17

# Widest piece in the catalog.
MIN_WIDTH = 4
# A spawned or rotated piece may sit one row below the spawn row and reach
# three rows above it.
SPAWN_FLOOR = 1
SPAWN_HEADROOM = 3


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    spawn_row: int = SPAWN_ROW
    ticks_per_second: float = DEFAULT_TICKS_PER_SECOND
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH:
            raise ValueError(f"width must be at least {MIN_WIDTH}, got {self.width}")
        if self.spawn_row < SPAWN_FLOOR:
            raise ValueError(
                f"spawn_row must be at least {SPAWN_FLOOR}, got {self.spawn_row}"
            )
        if self.spawn_row + SPAWN_HEADROOM > self.height:
            raise ValueError(
                f"height {self.height} leaves no room for pieces spawned at row {self.spawn_row}"
            )
        if self.ticks_per_second <= 0:
            raise ValueError(
                f"ticks_per_second must be positive, got {self.ticks_per_second}"
            )
