"""Simple pygame front-end for the engine.

This module glues :class:`~blockfall.game_state.GameController` to a
``pygame`` window: it draws the board every frame, drives gravity from the
elapsed frame time and maps the arrow keys onto controller commands.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

import pygame

from .config import GameConfig
from .game_state import GameController
from .pieces import COLOR_BY_VALUE
from .utils import gravity_interval_ms, render_grid

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (128, 128, 128)

LOGGER = logging.getLogger(__name__)

KEY_ACTIONS: Dict[int, Callable[[GameController], object]] = {
    pygame.K_UP: lambda controller: controller.rotate(),
    pygame.K_LEFT: lambda controller: controller.move(-1),
    pygame.K_RIGHT: lambda controller: controller.move(+1),
    pygame.K_DOWN: lambda controller: controller.tick(),
}


def draw_board(screen: pygame.Surface, controller: GameController) -> None:
    """Render the locked cells and the active piece.

    Board row ``0`` is the bottom of the board, so rows are flipped onto the
    surface whose origin is the top-left corner.
    """

    board = controller.board
    cell_w = screen.get_width() / board.width
    cell_h = screen.get_height() / board.height
    screen.fill(BACKGROUND)
    for r, row in enumerate(render_grid(board, controller.active)):
        for c, value in enumerate(row):
            if not value:
                continue
            top = (board.height - 1 - r) * cell_h
            rect = pygame.Rect(int(c * cell_w), int(top), int(cell_w) + 1, int(cell_h) + 1)
            pygame.draw.rect(screen, pygame.Color(COLOR_BY_VALUE[value]), rect)


def handle_key(event: pygame.event.Event, controller: GameController) -> None:
    """Process keyboard events for piece movement."""

    action = KEY_ACTIONS.get(event.key)
    if action is not None:
        action(controller)


class GameRunner:
    """Run the render and gravity drivers until stopped."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.controller = GameController(config)
        self.interval_ms = gravity_interval_ms(self.controller.config.ticks_per_second)
        self.running = False
        self._drop_timer = 0.0

    def advance(self, dt_ms: float) -> int:
        """Add ``dt_ms`` of elapsed time and run any gravity ticks now due."""

        self._drop_timer += dt_ms
        ticks = 0
        while self._drop_timer >= self.interval_ms:
            self._drop_timer -= self.interval_ms
            result = self.controller.tick()
            if result.game_over:
                LOGGER.info("Game over. Board reset.")
            ticks += 1
        return ticks

    def stop(self) -> None:
        if not self.running:
            LOGGER.info("Stop ignored: game not running")
            return
        self.running = False

    def run(self) -> None:
        board = self.controller.board
        pygame.init()
        screen = pygame.display.set_mode((board.width * CELL_SIZE, board.height * CELL_SIZE))
        pygame.display.set_caption("Blockfall")
        clock = pygame.time.Clock()
        LOGGER.info("Game started")

        self._drop_timer = 0.0
        self.running = True
        try:
            while self.running:
                dt = clock.tick(FPS)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        handle_key(event, self.controller)
                if not self.running:
                    break
                self.advance(dt)
                draw_board(screen, self.controller)
                pygame.display.flip()
        finally:
            pygame.quit()
            LOGGER.info("Game stopped")


def main(config: Optional[GameConfig] = None) -> None:
    GameRunner(config).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
