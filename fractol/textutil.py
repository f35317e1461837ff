"""Small text helpers: integer parsing, splitting, trimming and comparison."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    """Return the character code of an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character string, got {type(c).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    An optional sign may precede the digits. Parsing stops at the first
    non-digit; a string with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Format an integer in decimal, with a leading '-' when negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be one character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first occurrence, or None. An empty needle
    is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(length, len(haystack)))
    return None if index < 0 else index


def _compare(a: str, b: str, limit: int | None) -> int:
    count = max(len(a), len(b)) + 1
    if limit is not None:
        count = min(count, limit)
    padded_a = a + "\0"
    padded_b = b + "\0"
    for pos in range(count):
        ca = padded_a[pos] if pos < len(padded_a) else "\0"
        cb = padded_b[pos] if pos < len(padded_b) else "\0"
        if ca != cb or ca == "\0":
            return ord(ca) - ord(cb)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign of the result orders a and b."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _compare(a, b, n)


def strcmp(a: str, b: str) -> int:
    """Compare two strings; the sign of the result orders a and b."""
    return _compare(a, b, None)


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126