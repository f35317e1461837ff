"""Minimal printf-style formatting with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Callable

_INT_BITS = 32
_UINT_MODULUS = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_CONVERSIONS = frozenset("cspdiuxX%")


def _as_signed(value: int) -> int:
    return (int(value) - _INT_MIN) % _UINT_MODULUS + _INT_MIN


def _as_unsigned(value: int) -> int:
    return int(value) % _UINT_MODULUS


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) % 256)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": lambda v: str(_as_signed(v)),
    "i": lambda v: str(_as_signed(v)),
    "u": lambda v: str(_as_unsigned(v)),
    "x": lambda v: f"{_as_unsigned(v):x}",
    "X": lambda v: f"{_as_unsigned(v):X}",
}


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` using ``args`` and return the text.

    A '%' not followed by a known conversion is kept as it is.
    Raises TypeError when there are fewer arguments than conversions.
    """
    pieces: list[str] = []
    remaining = iter(args)
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        spec = fmt[pos + 1] if pos + 1 < length else ""
        if ch == "%" and spec in _CONVERSIONS and spec:
            if spec == "%":
                pieces.append("%")
            else:
                try:
                    value = next(remaining)
                except StopIteration:
                    raise TypeError(
                        f"not enough arguments for format string {fmt!r}"
                    ) from None
                pieces.append(_HANDLERS[spec](value))
            pos += 2
        else:
            pieces.append(ch)
            pos += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)