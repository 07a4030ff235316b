"""Command line entry point: load a scene and play it."""

from __future__ import annotations

import errno
import sys
from collections.abc import Sequence

import pygame

from .errors import CubError, report
from .game import Game
from .model import S_HEIGHT, S_WIDTH
from .parsing import load_scene
from .validation import validate_scene
from .window import EventType, Window


def run_game(game: Game, window: Window) -> None:
    """Wire the game to the window's hooks and run the main loop."""

    def frame() -> None:
        if not game.running:
            window.loop_end()
            return
        window.put_image(game.render(), 0, 0)

    def on_key_press(key: int) -> None:
        game.key_press(key)
        if not game.running:
            window.loop_end()

    def on_close() -> None:
        game.close()
        window.loop_end()

    window.loop_hook(frame)
    window.hook(EventType.KEY_PRESS, on_key_press)
    window.hook(EventType.KEY_RELEASE, game.key_release)
    window.hook(EventType.DESTROY_NOTIFY, on_close)
    window.loop()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the scene file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        report(CubError("expected one argument", errno.EINVAL))
        return errno.EINVAL
    try:
        scene = validate_scene(load_scene(args[0]))
        game = Game(scene)
        game.load_textures()
    except CubError as exc:
        report(exc)
        return errno.EINVAL
    try:
        window = Window(int(S_WIDTH), int(S_HEIGHT), "Cub3D")
    except pygame.error as exc:
        report(CubError(f"could not open window: {exc}", errno.EINVAL))
        return errno.EINVAL
    try:
        run_game(game, window)
    finally:
        window.destroy()
    return 0


if __name__ == "__main__":
    sys.exit(main())