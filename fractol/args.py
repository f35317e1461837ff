"""Command-line parsing for the fractal viewer."""

from __future__ import annotations

import re
from functools import reduce
from typing import Sequence

from .render import FractalType, View

_NUMBER = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")


class UsageError(Exception):
    """The command line does not name a fractal the viewer can draw."""


def _accumulate(digits: str) -> float:
    return reduce(lambda acc, ch: acc * 10.0 + (ord(ch) - ord("0")), digits, 0.0)


def parse_float(text: str) -> float:
    """Parse an optional sign, digits and an optional decimal part.

    Parsing stops at the first character that does not fit; text with
    no digits gives 0.0. Exponents and surrounding spaces are not read.
    """
    match = _NUMBER.match(text)
    sign, whole, fraction = match.groups()
    value = _accumulate(whole)
    if fraction is not None:
        divisor = reduce(lambda acc, _: acc * 10.0, fraction, 1.0)
        value += _accumulate(fraction) / divisor
    return -value if sign == "-" else value


def parse_args(argv: Sequence[str]) -> View:
    """Build the initial view from the arguments after the program name.

    Raises UsageError unless the arguments are ``mandelbrot`` or
    ``julia <real_part> <imag_part>``.
    """
    args = list(argv)
    if not args:
        raise UsageError("no fractal given")
    name = args[0]
    if name == FractalType.MANDELBROT.value:
        return View(type=FractalType.MANDELBROT)
    if name == FractalType.JULIA.value:
        if len(args) != 3:
            raise UsageError("julia needs a real and an imaginary part")
        c = complex(parse_float(args[1]), parse_float(args[2]))
        return View(type=FractalType.JULIA, julia_c=c)
    raise UsageError(f"unknown fractal {name!r}")


def usage_text() -> str:
    """Return the usage message."""
    return (
        "Usage:\n"
        "  fractol mandelbrot\n"
        "  fractol julia <real_part> <imag_part>\n"
    )