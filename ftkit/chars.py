"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer code.
Case conversions return a value of the same kind they were given.
"""

from __future__ import annotations

CharLike = "int | str"


def _code(c: int | str) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_digit(code: int) -> bool:
    return ord("0") <= code <= ord("9")


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return _is_digit(_code(c))


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or decimal digit."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code) or _is_digit(code)


def is_ascii(c: int | str) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character (space to tilde; DEL is not)."""
    return 32 <= _code(c) < 127


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return chr(code) if isinstance(c, str) else code