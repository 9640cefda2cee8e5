"""Searching, measuring, comparing and bounded copying of C-style strings.

Strings are ordinary Python strings. A NUL character (``"\\0"``) ends a
string, as it does in C. Positions are returned as indices rather than
pointers, and ``None`` stands for "not found".
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ftkit.chars import is_ascii

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _cstr(s: str) -> str:
    """Return ``s`` up to, but not including, its first NUL."""
    end = s.find("\0")
    return s if end == -1 else s[:end]


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(_require_str(s, "s")))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    A character outside the ASCII range is never found.
    """
    text = _cstr(_require_str(s, "s"))
    code = _code(c)
    if not is_ascii(code):
        return None
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    A character outside the ASCII range is never found.
    """
    text = _cstr(_require_str(s, "s"))
    code = _code(c)
    if not is_ascii(code):
        return None
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index where ``needle`` first occurs wholly within ``n`` characters.

    An empty needle matches at index 0; with ``n`` of 0 nothing else matches.
    """
    hay = _cstr(_require_str(haystack, "haystack"))
    pattern = _cstr(_require_str(needle, "needle"))
    if n < 0:
        raise ValueError(f"length limit must not be negative, got {n}")
    if not pattern:
        return 0
    if n == 0:
        return None
    limit = min(n, len(hay))
    index = hay.find(pattern, 0, limit)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch.

    The result is 0 when the strings agree up to ``n`` characters or up to a
    common terminator.
    """
    a = _cstr(_require_str(s1, "s1"))
    b = _cstr(_require_str(s2, "s2"))
    if n < 0:
        raise ValueError(f"length limit must not be negative, got {n}")
    for index in range(n):
        x = ord(a[index]) if index < len(a) else 0
        y = ord(b[index]) if index < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the resulting destination string and the length of ``src``;
    a length of ``size`` or more means the copy was truncated. With a size
    of 0 the destination is left as it is.
    """
    target = _cstr(_require_str(dst, "dst"))
    source = _cstr(_require_str(src, "src"))
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")
    if size == 0:
        return target, len(source)
    return source[:size - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting destination string and the length the full result
    would have had. When ``dst`` already fills the buffer, the destination
    is unchanged and the length reported is ``len(src) + size``.
    """
    target = _cstr(_require_str(dst, "dst"))
    source = _cstr(_require_str(src, "src"))
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")
    if size == 0:
        return target, len(source)
    if len(target) >= size:
        return target, len(source) + size
    room = size - len(target) - 1
    return target + source[:room], len(target) + len(source)