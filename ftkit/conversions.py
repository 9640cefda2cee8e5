"""Rendering of single printf conversions.

Each ``render_*`` function returns ``(text, count)``: the characters the
conversion produces and the count it contributes to the printed total.
The given spec is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ftkit.formatspec import FormatSpec

Rendered = Tuple[str, int]

_INT_MIN = -(2**31)
_INT_MIN_DIGITS = "2147483648"
_UINT_MASK = 0xFFFFFFFF
_PTR_MASK = 2**64 - 1
_NULL_TEXT = "(null)"


def _require_int(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value >= 2**31 else value


@dataclass
class _State:
    """Working copy of a spec plus the output and running count."""

    alternate: int
    zero_pad: int
    plus: int
    minus: int
    space: int
    width: int
    has_precision: bool
    precision: int
    conversion: str
    length: int = 0
    out: List[str] = field(default_factory=list)

    @classmethod
    def start(cls, spec: Optional[FormatSpec], default_conversion: str) -> "_State":
        if spec is None:
            spec = FormatSpec(conversion=default_conversion)
        return cls(
            alternate=spec.alternate,
            zero_pad=spec.zero_pad,
            plus=spec.plus,
            minus=spec.minus,
            space=spec.space,
            width=spec.width,
            has_precision=spec.has_precision,
            precision=spec.precision,
            conversion=spec.conversion or default_conversion,
        )

    def put(self, text: str) -> None:
        self.out.append(text)

    def pad(self, ch: str, limit: int) -> None:
        """Write ``ch`` until the count reaches ``limit``."""
        if self.length < limit:
            self.put(ch * (limit - self.length))
            self.length = limit

    def fill(self, nb: int) -> None:
        """Pad to the field width with zeros or spaces as the flags ask."""
        if self.has_precision and self.precision == 0 and nb == 0:
            ch = " "
        elif self.zero_pad:
            ch = "0"
        else:
            ch = " "
        self.pad(ch, self.width)

    def result(self) -> Rendered:
        return "".join(self.out), self.length


def _as_char(c: Union[str, int]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


def render_char(c: Union[str, int], spec: Optional[FormatSpec] = None) -> Rendered:
    """Render ``%c``: the character padded with spaces to the field width."""
    ch = _as_char(c)
    st = _State.start(spec, "c")
    st.length += 1
    if st.minus:
        st.put(ch)
    st.pad(" ", st.width)
    if not st.minus:
        st.put(ch)
    return st.result()


def render_str(s: Optional[str], spec: Optional[FormatSpec] = None) -> Rendered:
    """Render ``%s``; a missing string prints as ``(null)``, cut by any precision."""
    text = _NULL_TEXT if s is None else s
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    nul = text.find("\0")
    if nul != -1:
        text = text[:nul]
    st = _State.start(spec, "s")
    shown = text[: st.precision] if st.has_precision else text
    st.length += len(shown)
    if st.minus:
        st.put(shown)
    st.pad(" ", st.width)
    if not st.minus:
        st.put(shown)
    return st.result()


def _int_len(nb: int) -> int:
    if nb == _INT_MIN:
        return 11
    return len(str(nb))


def _int_digits(st: _State, nb: int) -> str:
    if nb == _INT_MIN:
        if st.precision > 10 or st.zero_pad:
            return _INT_MIN_DIGITS
        return "-" + _INT_MIN_DIGITS
    return str(nb)


def _int_body(st: _State, nb: int) -> None:
    if st.has_precision and st.precision == 0 and nb == 0:
        if st.width == 0:
            st.length = 0
        return
    if nb >= 0 and st.space:
        st.put(" ")
    elif nb >= 0 and st.plus == 1:
        st.put("+")
    if st.has_precision and st.length <= st.precision:
        if nb < 0:
            st.put("-")
            nb = _int32(-nb)
            st.precision += 1
        st.pad("0", st.precision)
    st.put(_int_digits(st, nb))


def _int_padding(st: _State, nb: int) -> int:
    if st.width and not st.minus and st.precision > st.length:
        if nb < 0:
            st.precision += 1
        st.pad(" ", st.width - (st.precision - _int_len(nb)))
        if nb < 0:
            st.put("-")
            nb = _int32(-nb)
        st.pad("0", st.width)
        return nb
    st.fill(nb)
    return nb


def render_int(n: int, spec: Optional[FormatSpec] = None) -> Rendered:
    """Render ``%d`` / ``%i`` for a value taken as a 32-bit signed integer."""
    nb = _int32(_require_int(n))
    st = _State.start(spec, "d")
    st.length += _int_len(nb)
    if nb >= 0 and (st.plus or st.space):
        st.length += 1
    if not st.minus and nb != 0 and st.width and st.width <= st.precision:
        st.zero_pad = 1
    if not st.zero_pad and st.has_precision and st.precision == 0 and nb == 0:
        st.length -= 1
    if st.minus:
        _int_body(st, nb)
    elif st.plus and nb > 0:
        st.put("+")
        st.plus = 2
    if nb < 0 and st.zero_pad:
        st.put("-")
        if nb != _INT_MIN:
            nb = -nb
        st.precision += 1
    nb = _int_padding(st, nb)
    if not st.minus:
        _int_body(st, nb)
    return st.result()


def _uint_body(st: _State, nb: int) -> None:
    if st.has_precision and st.precision == 0 and nb == 0:
        if st.width == 0:
            st.length = 0
        return
    st.pad("0", st.precision)
    st.put(str(nb))


def _uint_padding(st: _State, nb: int) -> None:
    if st.width and not st.minus and st.precision > st.length:
        st.pad(" ", st.width - (st.precision - len(str(nb))))
        st.pad("0", st.width)
        return
    st.fill(nb)


def render_uint(n: int, spec: Optional[FormatSpec] = None) -> Rendered:
    """Render ``%u`` for a value taken as a 32-bit unsigned integer."""
    nb = _require_int(n) & _UINT_MASK
    st = _State.start(spec, "u")
    st.length += len(str(nb))
    if st.has_precision and nb != 0 and st.width <= st.precision:
        st.zero_pad = 1
    if not st.zero_pad and st.has_precision and not st.precision and not nb:
        st.length -= 1
    if st.minus:
        _uint_body(st, nb)
    _uint_padding(st, nb)
    if not st.minus:
        _uint_body(st, nb)
    return st.result()


def _hex_len(st: _State, nb: int) -> int:
    prefix = 2 if (st.alternate and nb != 0) or st.conversion == "p" else 0
    return prefix + len(format(nb, "x"))


def _hex_prefix(st: _State) -> None:
    if st.alternate:
        st.put("0X" if st.conversion == "X" else "0x")


def _hex_body(st: _State, nb: int) -> None:
    if st.has_precision and not st.precision and not nb:
        if st.width == 0:
            st.length = 0
        return
    if st.zero_pad != 2 and nb != 0:
        _hex_prefix(st)
    if st.has_precision:
        st.pad("0", st.precision)
    st.put(format(nb, "X" if st.conversion == "X" else "x"))


def _hex_padding(st: _State, nb: int) -> None:
    spaces_to = st.width - (st.precision - _hex_len(st, nb))
    if st.width and not st.minus and st.precision > st.length:
        st.pad(" ", spaces_to)
        st.pad("0", st.width)
        return
    st.fill(nb)


def render_hex(n: int, spec: Optional[FormatSpec] = None) -> Rendered:
    """Render ``%x`` or ``%X`` for a value taken as a 32-bit unsigned integer."""
    nb = _require_int(n) & _UINT_MASK
    st = _State.start(spec, "x")
    if st.conversion not in ("x", "X"):
        raise ValueError(f"hexadecimal rendering needs %x or %X, got %{st.conversion}")
    if st.has_precision and nb != 0 and st.width <= st.precision:
        st.zero_pad = 1
    st.length += _hex_len(st, nb)
    if st.minus:
        _hex_body(st, nb)
    elif st.zero_pad and st.alternate:
        _hex_prefix(st)
        st.zero_pad = 2
    if st.zero_pad and st.has_precision and not st.precision and not nb:
        st.length -= 1
    if not st.zero_pad and st.has_precision and not st.precision and not nb and st.width:
        st.length -= 1
    _hex_padding(st, nb)
    if not st.minus:
        _hex_body(st, nb)
    return st.result()


def render_ptr(n: Optional[int], spec: Optional[FormatSpec] = None) -> Rendered:
    """Render ``%p``: ``0x`` and the address in lowercase hex, padded with spaces."""
    nb = 0 if n is None else _require_int(n) & _PTR_MASK
    st = _State.start(spec, "p")
    st.conversion = "p"
    st.length += _hex_len(st, nb)
    text = "0x" + format(nb, "x")
    if st.minus:
        st.put(text)
    st.pad(" ", st.width)
    if not st.minus:
        st.put(text)
    return st.result()