"""Key codes for each windowing platform, colour names and window geometry."""

from __future__ import annotations

import sys
from enum import Enum, IntEnum, auto
from typing import Dict, Optional

WINDOW_WIDTH = 1920
WINDOW_HEIGHT = 1080
MID_X = 960
MID_Y = 540
EPSILON = 1


class Platform(Enum):
    """A windowing platform with its own key codes."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"


class Key(Enum):
    """A key the viewer responds to."""

    ESC = auto()
    LEFT_ARROW = auto()
    RIGHT_ARROW = auto()
    DOWN_ARROW = auto()
    UP_ARROW = auto()
    Z = auto()
    X = auto()
    G = auto()
    F = auto()
    C = auto()
    V = auto()
    R = auto()
    O = auto()  # noqa: E741
    I = auto()  # noqa: E741
    T = auto()
    Y = auto()
    U = auto()
    A = auto()
    S = auto()
    D = auto()
    Q = auto()
    W = auto()
    E = auto()
    H = auto()
    J = auto()
    K = auto()
    L = auto()
    N = auto()
    M = auto()


class Color(IntEnum):
    """Named 24-bit RGB colours."""

    WHITE = 0xFFFFFF
    BLUE = 0x0000FF
    GREEN = 0x00FF00
    YELLOW = 0xFFFF00
    ORANGE = 0xFF6900
    RED = 0xFF0000
    PINK = 0xFF00FF
    PURPLE = 0x7800FF


_LETTERS = "ZXGFCVROITYUASDQWEHJKLNM"

_LINUX_CODES: Dict[Key, int] = {
    Key.ESC: 0xFF1B,
    Key.LEFT_ARROW: 0xFF51,
    Key.RIGHT_ARROW: 0xFF53,
    Key.DOWN_ARROW: 0xFF54,
    Key.UP_ARROW: 0xFF52,
    **{Key[letter]: ord(letter.lower()) for letter in _LETTERS},
}

_WINDOWS_CODES: Dict[Key, int] = {
    Key.ESC: 0x1B,
    Key.LEFT_ARROW: 0x25,
    Key.RIGHT_ARROW: 0x27,
    Key.DOWN_ARROW: 0x28,
    Key.UP_ARROW: 0x26,
    **{Key[letter]: ord(letter) for letter in _LETTERS},
}

_MACOS_CODES: Dict[Key, int] = {
    Key.ESC: 53,
    Key.LEFT_ARROW: 123,
    Key.RIGHT_ARROW: 124,
    Key.DOWN_ARROW: 125,
    Key.UP_ARROW: 126,
    Key.Z: 6,
    Key.X: 7,
    Key.G: 5,
    Key.F: 3,
    Key.C: 8,
    Key.V: 9,
    Key.R: 15,
    Key.O: 31,
    Key.I: 34,
    Key.T: 17,
    Key.Y: 16,
    Key.U: 32,
    Key.A: 0,
    Key.S: 1,
    Key.D: 2,
    Key.Q: 12,
    Key.W: 13,
    Key.E: 14,
    Key.H: 4,
    Key.J: 38,
    Key.K: 40,
    Key.L: 37,
    Key.N: 45,
    Key.M: 46,
}

_CODES: Dict[Platform, Dict[Key, int]] = {
    Platform.LINUX: _LINUX_CODES,
    Platform.MACOS: _MACOS_CODES,
    Platform.WINDOWS: _WINDOWS_CODES,
}

_KEYS: Dict[Platform, Dict[int, Key]] = {
    platform: {code: key for key, code in table.items()}
    for platform, table in _CODES.items()
}


def current_platform() -> Platform:
    """Return the platform this interpreter runs on; unknown systems use Linux codes."""
    if sys.platform == "darwin":
        return Platform.MACOS
    if sys.platform in ("win32", "cygwin"):
        return Platform.WINDOWS
    return Platform.LINUX


def keycode(key: Key, platform: Optional[Platform] = None) -> int:
    """Return the code ``key`` sends on ``platform`` (the current one by default)."""
    if not isinstance(key, Key):
        raise TypeError(f"expected a Key, got {type(key).__name__}")
    return _CODES[platform or current_platform()][key]


def key_for_code(code: int, platform: Optional[Platform] = None) -> Key:
    """Return the key that sends ``code`` on ``platform``; raise KeyError if none does."""
    table = _KEYS[platform or current_platform()]
    try:
        return table[code]
    except KeyError:
        raise KeyError(f"no key has code {code:#x}") from None