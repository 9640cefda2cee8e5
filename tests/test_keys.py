import sys
from unittest import mock

import pytest

from ftkit.keys import (
    Color,
    Key,
    Platform,
    current_platform,
    key_for_code,
    keycode,
)


@pytest.mark.parametrize("platform", list(Platform))
@pytest.mark.parametrize("key", list(Key))
def test_round_trip(platform, key):
    assert key_for_code(keycode(key, platform), platform) is key


@pytest.mark.parametrize("platform", list(Platform))
def test_codes_unique_per_platform(platform):
    codes = [keycode(key, platform) for key in Key]
    assert len(set(codes)) == len(codes)


def test_escape_codes_from_headers():
    assert keycode(Key.ESC, Platform.LINUX) == 0xFF1B
    assert keycode(Key.ESC, Platform.MACOS) == 53
    assert keycode(Key.ESC, Platform.WINDOWS) == 0x1B


def test_arrow_codes_linux():
    assert keycode(Key.LEFT_ARROW, Platform.LINUX) == 0xFF51
    assert keycode(Key.UP_ARROW, Platform.LINUX) == 0xFF52


def test_letters_follow_ascii_on_linux_and_windows():
    for key in (Key.A, Key.Z, Key.M, Key.Q):
        assert keycode(key, Platform.LINUX) == ord(key.name.lower())
        assert keycode(key, Platform.WINDOWS) == ord(key.name)


def test_macos_letter_codes():
    assert keycode(Key.A, Platform.MACOS) == 0
    assert keycode(Key.M, Platform.MACOS) == 46


def test_unknown_code_raises():
    with pytest.raises(KeyError):
        key_for_code(0xFFFF, Platform.LINUX)


def test_keycode_rejects_non_key():
    with pytest.raises(TypeError):
        keycode("a", Platform.LINUX)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("darwin", Platform.MACOS),
        ("win32", Platform.WINDOWS),
        ("linux", Platform.LINUX),
        ("freebsd13", Platform.LINUX),
    ],
)
def test_current_platform(name, expected):
    with mock.patch.object(sys, "platform", name):
        assert current_platform() is expected


def test_default_platform_matches_current():
    assert keycode(Key.ESC) == keycode(Key.ESC, current_platform())


@pytest.mark.parametrize(
    "value, expected",
    [
        (0xFFFFFF, "WHITE"),
        (0xFF6900, "ORANGE"),
        (0x7800FF, "PURPLE"),
    ],
)
def test_color_lookup_by_value(value, expected):
    assert Color(value) is Color[expected]


def test_color_lookup_rejects_unknown_value():
    with pytest.raises(ValueError):
        Color(0x123456)