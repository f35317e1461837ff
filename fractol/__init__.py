"""Interactive Mandelbrot and Julia set explorer, with rendering and small text helpers."""

__version__ = "0.1.0"