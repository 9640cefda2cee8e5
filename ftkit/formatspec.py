"""Conversion specifications of the form ``%[flags][width][.precision]conversion``.

Flags are counted rather than merely noted, because the compatibility
rules only apply when a flag appears exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

FLAGS = "-+0# "
CONVERSIONS = "cspdiuxX%"

_DIGITS = "0123456789"
_END = "\0"


class FormatError(ValueError):
    """A conversion specification is malformed or combines incompatible parts."""


@dataclass
class FormatSpec:
    """One parsed conversion: flag counts, field width, precision and conversion letter."""

    alternate: int = 0
    zero_pad: int = 0
    plus: int = 0
    minus: int = 0
    space: int = 0
    width: int = 0
    has_precision: bool = False
    precision: int = 0
    conversion: str = ""

    def _allows(self, conversions: str) -> bool:
        return bool(self.conversion) and self.conversion in conversions

    def check_rules(self) -> "FormatSpec":
        """Reject flags the conversion cannot take, then drop overridden flags.

        A ``-`` cancels ``0``, a ``+`` cancels the space flag, and a precision
        cancels ``0``. Returns the spec itself.
        """
        rules = (
            (self.alternate, "xX", "#"),
            (self.zero_pad, "diuxX", "0"),
            (self.plus, "di", "+"),
            (self.space, "di", "space"),
        )
        for count, allowed, name in rules:
            if count == 1 and not self._allows(allowed):
                raise FormatError(f"{name} only compatible with %{allowed}")
        if self.precision != 0 and not self._allows("sdiuxX"):
            raise FormatError("precision only compatible with %sdiuxX")
        if self.minus == 1 and self.zero_pad == 1:
            self.zero_pad = 0
        if self.space == 1 and self.plus == 1:
            self.space = 0
        if self.has_precision and self.zero_pad:
            self.zero_pad = 0
        return self


def _read_digits(fmt: str, i: int) -> Tuple[int, int]:
    """Read a run of decimal digits starting at ``i``; return (value, next index)."""
    start = i
    while i < len(fmt) and fmt[i] in _DIGITS:
        i += 1
    return (int(fmt[start:i]) if i > start else 0), i


def parse_spec(fmt: str, pos: int = 0) -> Tuple[FormatSpec, int]:
    """Parse the conversion whose ``%`` is at ``fmt[pos]``.

    Returns the spec and the index just past its conversion letter.
    Compatibility rules are not applied; call :meth:`FormatSpec.check_rules`.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    if not 0 <= pos < len(fmt) or fmt[pos] != "%":
        raise ValueError(f"no conversion starts at index {pos}")

    def at(i: int) -> str:
        return fmt[i] if i < len(fmt) else _END

    i = pos + 1
    counts = dict.fromkeys(FLAGS, 0)
    while at(i) in FLAGS:
        counts[at(i)] += 1
        i += 1

    width = 0
    if "1" <= at(i) <= "9":
        width, i = _read_digits(fmt, i)

    has_precision = False
    precision = 0
    if at(i) == ".":
        has_precision = True
        i += 1
        if at(i) in _DIGITS:
            precision, i = _read_digits(fmt, i)
        elif at(i) == "-":
            _, i = _read_digits(fmt, i + 1)

    conversion = at(i)
    if conversion not in CONVERSIONS:
        raise FormatError(
            f"invalid conversion at index {i}: expected "
            f"%[flags][width][.precision] followed by one of {CONVERSIONS}"
        )
    spec = FormatSpec(
        alternate=counts["#"],
        zero_pad=counts["0"],
        plus=counts["+"],
        minus=counts["-"],
        space=counts[" "],
        width=width,
        has_precision=has_precision,
        precision=precision,
        conversion=conversion,
    )
    return spec, i + 1