"""Keyboard and mouse controls that change a fractal's view."""

from __future__ import annotations

from enum import IntEnum

from .fractal import Fractal

SCROLL_UP = 4
SCROLL_DOWN = 5
ZOOM_FACTOR = 1.1
PAN_STEP = 42
ITERATION_STEP = 42
ITERATION_LIMIT = 4200
COLOR_RANGE = 255 * 255 * 255


class Action(IntEnum):
    """Keyboard actions, valued by their X11 key symbols."""

    EXIT = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    CYCLE_COLOR = 99
    FEWER_ITERATIONS = 109
    MORE_ITERATIONS = 112


def zoom(fractal: Fractal, x: int, y: int, direction: int) -> None:
    """Zoom in (direction 1) or out (direction -1) keeping pixel (x, y) fixed.

    Any other direction leaves the view unchanged.
    """
    if direction == 1:
        new_zoom = fractal.zoom * ZOOM_FACTOR
    elif direction == -1:
        new_zoom = fractal.zoom / ZOOM_FACTOR
    else:
        return
    fractal.offset_x = (x / fractal.zoom + fractal.offset_x) - x / new_zoom
    fractal.offset_y = (y / fractal.zoom + fractal.offset_y) - y / new_zoom
    fractal.zoom = new_zoom


def change_iterations(fractal: Fractal, action: Action) -> None:
    """Raise or lower the iteration limit by one step, within its bounds."""
    if action is Action.FEWER_ITERATIONS:
        if fractal.max_iterations > ITERATION_STEP:
            fractal.max_iterations -= ITERATION_STEP
    elif action is Action.MORE_ITERATIONS:
        if fractal.max_iterations < ITERATION_LIMIT:
            fractal.max_iterations += ITERATION_STEP


def apply_action(fractal: Fractal, action: Action) -> bool:
    """Apply a keyboard action; return False when the viewer should close."""
    step = PAN_STEP / fractal.zoom
    if action is Action.EXIT:
        return False
    if action is Action.LEFT:
        fractal.offset_x -= step
    elif action is Action.RIGHT:
        fractal.offset_x += step
    elif action is Action.DOWN:
        fractal.offset_y += step
    elif action is Action.UP:
        fractal.offset_y -= step
    elif action is Action.CYCLE_COLOR:
        fractal.color_scheme = (fractal.color_scheme + COLOR_RANGE // 100) % COLOR_RANGE
    else:
        change_iterations(fractal, action)
    return True