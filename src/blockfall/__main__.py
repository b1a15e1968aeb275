"""Simple ASCII demo for the engine.

Run with: `python -m blockfall`

Prints the board with the active piece overlaid, top row first, after an
optional number of gravity ticks.  Pass ``--pygame`` to open the playable
window instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import GameConfig
from .game_state import GameController
from .pieces import COLOR_BY_VALUE
from .utils import render_grid


LOGGER = logging.getLogger(__name__)


def format_grid(grid: List[List[int]]) -> str:
    """Return ``grid`` as text, top row first, using colour initials."""

    lines = []
    for row in reversed(grid):
        lines.append("".join(COLOR_BY_VALUE[cell][0].upper() if cell else "." for cell in row))
    return "\n".join(lines)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument("--ticks", type=int, default=0, help="Gravity ticks to run before printing.")
    parser.add_argument("--pygame", action="store_true", help="Open the pygame window.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    config = GameConfig(seed=args.seed)

    if args.pygame:
        from .run_pygame import main as run_window

        run_window(config)
        return

    controller = GameController(config)
    locks = 0
    for _ in range(max(0, args.ticks)):
        if controller.tick().locked:
            locks += 1
    LOGGER.debug("Ran %d ticks, %d pieces locked", args.ticks, locks)
    print(format_grid(render_grid(controller.board, controller.active)))


if __name__ == "__main__":
    main()
