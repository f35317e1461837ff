"""Keyboard and mouse handling: panning, zooming, resetting and closing."""

from __future__ import annotations

from enum import Enum

from .render import View

KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_RESET = ord("r")

BUTTON_SCROLL_UP = 4
BUTTON_SCROLL_DOWN = 5

PAN_STEP = 50
ZOOM_FACTOR = 1.1

_PAN = {
    KEY_LEFT: (PAN_STEP, 0),
    KEY_RIGHT: (-PAN_STEP, 0),
    KEY_UP: (0, PAN_STEP),
    KEY_DOWN: (0, -PAN_STEP),
}


class Action(Enum):
    """What the window should do after an event was handled."""

    NONE = "none"
    REDRAW = "redraw"
    CLOSE = "close"


def handle_key(view: View, keycode: int) -> Action:
    """Apply a key press to ``view`` and say what the window should do."""
    if keycode == KEY_ESCAPE:
        return Action.CLOSE
    if keycode in _PAN:
        dx, dy = _PAN[keycode]
        view.offset_x += dx
        view.offset_y += dy
        return Action.REDRAW
    if keycode == KEY_RESET:
        view.reset()
        return Action.REDRAW
    return Action.NONE


def handle_mouse(view: View, button: int, x: int, y: int) -> Action:
    """Zoom about the pointer on a scroll button; other buttons do nothing."""
    mouse_re = (x - view.offset_x) / view.zoom
    mouse_im = (y - view.offset_y) / view.zoom
    if button == BUTTON_SCROLL_UP:
        view.zoom *= ZOOM_FACTOR
    elif button == BUTTON_SCROLL_DOWN:
        view.zoom /= ZOOM_FACTOR
    else:
        return Action.NONE
    view.offset_x = x - mouse_re * view.zoom
    view.offset_y = y - mouse_im * view.zoom
    return Action.REDRAW