"""Window, input handling and main loop for the game."""

from __future__ import annotations

import argparse
import sys
import time
from array import array
from collections.abc import Sequence

import pygame

from .game import SCREEN_HEIGHT, SCREEN_WIDTH, Control, Game
from .render import Renderer
from .trig import get_tables

TITLE = "KillerGrass DOOM v0.1"

KEY_BINDINGS: dict[int, Control] = {
    pygame.K_w: Control.FORWARD,
    pygame.K_s: Control.BACKWARD,
    pygame.K_d: Control.STRAFE_RIGHT,
    pygame.K_a: Control.STRAFE_LEFT,
    pygame.K_LEFT: Control.TURN_LEFT,
    pygame.K_RIGHT: Control.TURN_RIGHT,
}


def pressed_controls(state) -> frozenset[Control]:
    """Translate a key-state lookup (indexed by key code) into held controls."""
    return frozenset(control for key, control in KEY_BINDINGS.items() if state[key])


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="grassdoom", description="Run the ray-casting game.")
    parser.add_argument("--width", type=_positive_int, default=SCREEN_WIDTH, help="frame width in pixels")
    parser.add_argument("--height", type=_positive_int, default=SCREEN_HEIGHT, help="frame height in pixels")
    parser.add_argument("--frames", type=_positive_int, default=None, help="stop after this many frames")
    return parser.parse_args(argv)


def _frame_surface(buffer: list[int], width: int, height: int) -> pygame.Surface:
    """Wrap a buffer of packed colours (red in the low byte) as a surface."""
    data = array("I", buffer)
    if sys.byteorder == "big":
        data.byteswap()
    return pygame.image.frombuffer(data.tobytes(), (width, height), "RGBX")


def _quit_requested() -> bool:
    quit_now = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            quit_now = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            quit_now = True
    return quit_now


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(TITLE)

        game = Game(get_tables())
        renderer = Renderer(game, args.width, args.height)

        last_time = time.perf_counter()
        frames = 0
        while args.frames is None or frames < args.frames:
            if _quit_requested():
                break
            now = time.perf_counter()
            delta_time = now - last_time
            last_time = now

            game.update(delta_time, pressed_controls(pygame.key.get_pressed()))
            frame = renderer.render()
            screen.blit(_frame_surface(frame, args.width, args.height), (0, 0))
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())