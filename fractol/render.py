"""Escape-time computation and colouring of the Mandelbrot and Julia sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

WIN_WIDTH = 800
WIN_HEIGHT = 600
MAX_ITER = 100
DEFAULT_ZOOM = 200.0
_ESCAPE_RADIUS_SQUARED = 4.0


class FractalType(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


@dataclass
class View:
    """What to draw and how the pixel grid maps onto the complex plane.

    A pixel (x, y) stands for the point ((x - offset_x) / zoom,
    (y - offset_y) / zoom). Offsets left as None centre the origin.
    """

    type: FractalType = FractalType.MANDELBROT
    julia_c: complex = 0j
    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT
    zoom: float = DEFAULT_ZOOM
    offset_x: float | None = None
    offset_y: float | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.offset_x is None:
            self.offset_x = self.width / 2.0
        if self.offset_y is None:
            self.offset_y = self.height / 2.0

    def reset(self) -> None:
        """Restore the default zoom and centre the origin."""
        self.zoom = DEFAULT_ZOOM
        self.offset_x = self.width / 2.0
        self.offset_y = self.height / 2.0


def _escape_count(x: float, y: float, cr: float, ci: float) -> int:
    iteration = 0
    while x * x + y * y <= _ESCAPE_RADIUS_SQUARED and iteration < MAX_ITER:
        x, y = x * x - y * y + cr, 2 * x * y + ci
        iteration += 1
    return iteration


def compute_mandelbrot(x0: float, y0: float) -> int:
    """Iterations before z -> z^2 + (x0 + i*y0), starting at 0, escapes."""
    return _escape_count(0.0, 0.0, float(x0), float(y0))


def compute_julia(x0: float, y0: float, c: complex) -> int:
    """Iterations before z -> z^2 + c, starting at x0 + i*y0, escapes."""
    c = complex(c)
    return _escape_count(float(x0), float(y0), c.real, c.imag)


def get_color(iteration: int) -> int:
    """Map an iteration count to a 0xRRGGBB colour; points inside are black."""
    if iteration == MAX_ITER:
        return 0x000000
    return (
        ((iteration * 15) % 256) << 16
        | ((iteration * 7) % 256) << 8
        | (iteration * 3) % 256
    )


def iteration_grid(view: View) -> np.ndarray:
    """Return the iteration count of every pixel, shaped (height, width)."""
    xs = (np.arange(view.width, dtype=np.float64) - view.offset_x) / view.zoom
    ys = (np.arange(view.height, dtype=np.float64) - view.offset_y) / view.zoom
    re, im = np.meshgrid(xs, ys)
    if view.type is FractalType.MANDELBROT:
        zr = np.zeros_like(re)
        zi = np.zeros_like(im)
        cr, ci = re, im
    else:
        zr = re.copy()
        zi = im.copy()
        c = complex(view.julia_c)
        cr, ci = c.real, c.imag

    counts = np.zeros(re.shape, dtype=np.int32)
    active = np.ones(re.shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(MAX_ITER):
            active &= zr * zr + zi * zi <= _ESCAPE_RADIUS_SQUARED
            if not active.any():
                break
            new_zr = zr * zr - zi * zi + cr
            new_zi = 2 * zr * zi + ci
            zr = np.where(active, new_zr, zr)
            zi = np.where(active, new_zi, zi)
            counts += active
    return counts


def render(view: View) -> np.ndarray:
    """Return the 0xRRGGBB colour of every pixel, shaped (height, width)."""
    counts = iteration_grid(view)
    c = counts.astype(np.uint32)
    colors = ((c * 15) % 256) << 16 | ((c * 7) % 256) << 8 | (c * 3) % 256
    colors[counts == MAX_ITER] = 0
    return colors