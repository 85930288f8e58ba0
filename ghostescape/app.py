"""Command that starts the game."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .game import Game
from .scenes import SceneTitle

TITLE = "GhostEscape"
WIDTH = 1280
HEIGHT = 720


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ghostescape",
        description="Escape the ghosts: move with WASD, strike with the left mouse button.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window on the title screen and run until it closes."""
    _parse_args(argv)
    game = Game.instance()
    print(f"{TITLE} running", flush=True)
    game.init(TITLE, WIDTH, HEIGHT, SceneTitle)
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())