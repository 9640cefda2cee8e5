"""Formatted output built from the single-conversion renderers.

A format is ordinary text mixed with conversions of the form
``%[flags][width][.precision]conversion``, where the conversion is one of
``c s p d i u x X %``.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, List, Optional, Sequence, TextIO, Tuple

from ftkit.conversions import (
    render_char,
    render_hex,
    render_int,
    render_ptr,
    render_str,
    render_uint,
)
from ftkit.formatspec import FormatError, FormatSpec, parse_spec

_RENDERERS = {
    "c": render_char,
    "s": render_str,
    "p": render_ptr,
    "d": render_int,
    "i": render_int,
    "u": render_uint,
    "x": render_hex,
    "X": render_hex,
}


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[Tuple[str, int]]:
    """Yield ``(text, count)`` for each literal character and each conversion."""
    values = iter(args)
    pos = 0
    while pos < len(fmt):
        if fmt[pos] != "%":
            yield fmt[pos], 1
            pos += 1
            continue
        spec, pos = parse_spec(fmt, pos)
        spec.check_rules()
        if spec.conversion == "%":
            yield "%", 1
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format: %{spec.conversion} has no value"
            ) from None
        yield _render(spec, value)


def _render(spec: FormatSpec, value: Any) -> Tuple[str, int]:
    return _RENDERERS[spec.conversion](value, spec)


def _format(fmt: str, args: Sequence[Any]) -> Tuple[str, int]:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    if not fmt:
        raise FormatError("empty format string")
    texts: List[str] = []
    total = 0
    for text, count in _pieces(fmt, args):
        texts.append(text)
        total += count
    return "".join(texts), total


def format_string(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args`` substituted.

    Raises :class:`FormatError` for an empty format or a malformed or
    incompatible conversion, and ``TypeError`` when arguments run out.
    Extra arguments are ignored.
    """
    text, _ = _format(fmt, args)
    return text


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the count of characters the conversions report as printed.
    Nothing is written if the format turns out to be invalid.
    """
    text, count = _format(fmt, args)
    (sys.stdout if file is None else file).write(text)
    return count