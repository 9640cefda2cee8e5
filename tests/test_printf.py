import io

import pytest

from ftkit.formatspec import FormatError
from ftkit.printf import format_string, printf


@pytest.mark.parametrize(
    "fmt, args",
    [
        ("%d", (42,)),
        ("%i", (-7,)),
        ("%5d", (42,)),
        ("%-5d|", (42,)),
        ("%05d", (-42,)),
        ("%+d", (5,)),
        ("% d", (5,)),
        ("%.3d", (7,)),
        ("%x", (255,)),
        ("%X", (255,)),
        ("%#x", (255,)),
        ("%#X", (255,)),
        ("%08x", (255,)),
        ("%u", (3000000000,)),
        ("%c", ("a",)),
        ("%5c", ("a",)),
        ("%s", ("hi",)),
        ("%.2s", ("hello",)),
        ("%-6s|", ("ab",)),
        ("%%", ()),
        ("value: %d, name: %s%%", (3, "x")),
    ],
)
def test_matches_standard_formatting(fmt, args):
    assert format_string(fmt, *args) == fmt % args


def test_plain_text_is_copied():
    assert format_string("hello world") == "hello world"


def test_negative_hex_wraps_to_unsigned():
    assert format_string("%x", -1) == "ffffffff"


def test_negative_unsigned_wraps():
    assert format_string("%u", -1) == "4294967295"


def test_pointer_has_prefix():
    assert format_string("%p", 255) == "0xff"


def test_missing_string_prints_null():
    assert format_string("%s", None) == "(null)"


def test_printf_writes_text_and_returns_count():
    out = io.StringIO()
    count = printf("%d-%s", 12, "ab", file=out)
    assert out.getvalue() == "12-ab"
    assert count == len(out.getvalue())


def test_printf_counts_percent_literal():
    out = io.StringIO()
    count = printf("100%%", file=out)
    assert out.getvalue() == "100%"
    assert count == 4


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", "ok")
    assert capsys.readouterr().out == "ok!"
    assert count == 3


def test_extra_arguments_are_ignored():
    assert format_string("%d", 1, 2, 3) == "1"


def test_empty_format_raises():
    with pytest.raises(FormatError):
        format_string("")


def test_unknown_conversion_raises():
    with pytest.raises(FormatError):
        format_string("%q", 1)


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_string("abc%")


def test_incompatible_flag_raises():
    with pytest.raises(FormatError):
        format_string("%#d", 1)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_invalid_format_writes_nothing():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("ok %q", 1, file=out)
    assert out.getvalue() == ""


def test_non_string_format_raises():
    with pytest.raises(TypeError):
        format_string(42)