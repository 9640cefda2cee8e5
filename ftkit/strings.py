"""String building and splitting helpers with C-string semantics.

Integers follow 32-bit signed arithmetic where the conversion is defined in
terms of an ``int``; everything else works on ordinary Python strings.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to the 32-bit two's-complement range."""
    value &= 0xFFFFFFFF
    return value - 2**32 if value > _INT_MAX else value


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as the C library does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. A string with no digits yields 0.
    The result wraps like a 32-bit ``int``.
    """
    _require_str(s, "s")
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * number)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or beyond the end of ``s`` gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character."""
    _require_str(s, "s")
    pieces = []
    for index, ch in enumerate(s):
        mapped = f(index, ch)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(f"mapping must return a single character, got {mapped!r}")
        pieces.append(mapped)
    return "".join(pieces)


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each element of ``s`` in place.

    ``s`` is a mutable sequence of characters. When ``f`` returns a value
    other than None, that value replaces the character at its index. A
    missing sequence or function does nothing.
    """
    if s is None or f is None:
        return
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))