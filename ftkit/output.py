"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s``; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _target(stream).write(str(n))