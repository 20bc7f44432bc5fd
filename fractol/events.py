"""Keyboard and mouse handling that moves, zooms and refines the view."""

from __future__ import annotations

import enum

from .fractal import Fractal

__all__ = ["Key", "WHEEL_UP", "WHEEL_DOWN", "handle_key", "handle_button"]

WHEEL_UP = 4
WHEEL_DOWN = 5

_PAN_FRACTION = 0.5
_ITERATION_STEP = 5
_ZOOM_IN = 0.95
_ZOOM_OUT = 1.05


class Key(enum.IntEnum):
    """Key symbols the view responds to."""

    ESCAPE = 0xFF1B
    LEFT = 0xFF51
    UP = 0xFF52
    RIGHT = 0xFF53
    DOWN = 0xFF54
    PLUS = 0x2B
    MINUS = 0x2D
    EQUAL = 0x3D


def handle_key(fractal: Fractal, key: int) -> bool:
    """Apply a key press to ``fractal``.

    Returns False when the key asks to close the view, True otherwise.
    Arrow keys pan by half the current zoom; plus or equal adds five
    iterations and minus removes five.
    """
    pan = _PAN_FRACTION * fractal.zoom
    if key == Key.ESCAPE:
        return False
    if key == Key.LEFT:
        fractal.shift_x += pan
    elif key == Key.RIGHT:
        fractal.shift_x -= pan
    elif key == Key.UP:
        fractal.shift_y -= pan
    elif key == Key.DOWN:
        fractal.shift_y += pan
    elif key in (Key.EQUAL, Key.PLUS):
        fractal.iterations += _ITERATION_STEP
    elif key == Key.MINUS:
        fractal.iterations -= _ITERATION_STEP
    return True


def handle_button(fractal: Fractal, button: int) -> None:
    """Zoom in on a wheel-up click and out on a wheel-down click."""
    if button == WHEEL_UP:
        fractal.zoom *= _ZOOM_IN
    elif button == WHEEL_DOWN:
        fractal.zoom *= _ZOOM_OUT