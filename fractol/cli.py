"""Command-line entry point: argument checking and the interactive viewer."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .controls import SCROLL_DOWN, SCROLL_UP, Action, apply_action, zoom
from .fractal import SIZE, Fractal, Kind
from .numbers import is_valid_number, parse_double

USAGE_MSG_1 = "Usage: ./fractol <mandel/julia/ship>"
USAGE_MSG_2 = "or: ./fractol julia <r nbr> <i nbr> (range: -2.0 to 2.0)"
WINDOW_TITLE = "Fract-ol"
PARAM_LIMIT = 2.0
# The viewer reports status 1 whenever it closes, as the original program did.
CLOSE_STATUS = 1

_PRESETS = (
    "Julia Set suggestions",
    "  0.285 0.01        → Twisted seahorse shapes",
    "  0.355 0.355       → Dense dendritic structure",
    "  0.37 -0.1         → Nebula-like spirals",
    "  -0.70176 -0.3842  → Classic Julia (connected, filled)",
    "  -0.4 0.6          → Lightning/cracked glass pattern",
    "  -0.8 0.156        → Delicate symmetric spirals",
    "  -0.7269 0.1889    → Detailed, swirling structure",
    "  0.0 0.8           → Funnel/vortex shape",
    "  -0.2 0.75         → Pinched, shell-like forms",
    "  -1.476 0.0        → Thin flower petal structures",
)


def check_arguments(argv: Sequence[str]) -> bool:
    """Return True when the arguments (program name excluded) are acceptable.

    One argument names the fractal. Three arguments are a fractal name and
    two Julia parameters, each a number in [-2.0, 2.0]; mandel and ship take
    no parameters.
    """
    if len(argv) == 1:
        return True
    if len(argv) != 3:
        return False
    name, real, imag = argv
    if name in (Kind.SHIP.value, Kind.MANDEL.value):
        return False
    if not (is_valid_number(real) and is_valid_number(imag)):
        return False
    return all(
        -PARAM_LIMIT <= parse_double(value) <= PARAM_LIMIT for value in (real, imag)
    )


def julia_presets() -> list[str]:
    """Return the lines suggesting interesting Julia parameters."""
    return list(_PRESETS)


def build_fractal(argv: Sequence[str]) -> Fractal:
    """Create the fractal the arguments ask for.

    Raises ValueError when the name is not a known fractal.
    """
    kind = Kind.from_name(argv[0])
    fractal = Fractal(kind)
    if len(argv) == 3 and kind is Kind.JULIA:
        fractal.julia = complex(parse_double(argv[1]), parse_double(argv[2]))
    return fractal


def _to_surface_array(pixels):
    import numpy as np

    flipped = pixels.T
    rgb = np.empty(flipped.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (flipped >> 16) & 0xFF
    rgb[..., 1] = (flipped >> 8) & 0xFF
    rgb[..., 2] = flipped & 0xFF
    return rgb


def run_window(fractal: Fractal) -> None:
    """Show the fractal in a window and handle input until it is closed."""
    import pygame

    from .render import render

    key_actions = {
        pygame.K_ESCAPE: Action.EXIT,
        pygame.K_LEFT: Action.LEFT,
        pygame.K_RIGHT: Action.RIGHT,
        pygame.K_UP: Action.UP,
        pygame.K_DOWN: Action.DOWN,
        pygame.K_c: Action.CYCLE_COLOR,
        pygame.K_m: Action.FEWER_ITERATIONS,
        pygame.K_p: Action.MORE_ITERATIONS,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode((SIZE, SIZE))
        pygame.display.set_caption(WINDOW_TITLE)

        def draw() -> None:
            surface = pygame.surfarray.make_surface(
                _to_surface_array(render(fractal, SIZE))
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        draw()
        running = True
        while running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                action = key_actions.get(event.key)
                if action is not None and not apply_action(fractal, action):
                    running = False
                else:
                    draw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                if event.button == SCROLL_UP:
                    zoom(fractal, x, y, 1)
                elif event.button == SCROLL_DOWN:
                    zoom(fractal, x, y, -1)
                draw()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not check_arguments(args):
        print(USAGE_MSG_1)
        print(USAGE_MSG_2)
        for line in julia_presets():
            print(line)
        return 1
    try:
        fractal = build_fractal(args)
    except ValueError as exc:
        print(exc)
        return 1
    run_window(fractal)
    return CLOSE_STATUS


if __name__ == "__main__":
    sys.exit(main())