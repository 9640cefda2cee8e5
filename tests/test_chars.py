import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch)
    assert is_alnum(ch)
    assert not is_digit(ch)


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch)
    assert is_alnum(ch)
    assert not is_alpha(ch)


@pytest.mark.parametrize("ch", list(string.punctuation + " \t\n"))
def test_punctuation_and_space_are_not_alnum(ch):
    assert not is_alnum(ch)
    assert not is_alpha(ch)
    assert not is_digit(ch)


def test_non_ascii_letter_is_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("é")
    assert not is_ascii("é")


def test_integer_codes_accepted():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_digit(ord("q"))


@pytest.mark.parametrize("code", [0, 64, 127])
def test_ascii_range_inside(code):
    assert is_ascii(code)


@pytest.mark.parametrize("code", [-1, 128, 255, 1000])
def test_ascii_range_outside(code):
    assert not is_ascii(code)


def test_printable_range():
    printable = [code for code in range(256) if is_print(code)]
    assert printable == list(range(32, 127))


def test_delete_is_not_printable():
    assert not is_print(127)
    assert not is_print(31)
    assert is_print(" ")
    assert is_print("~")


@pytest.mark.parametrize("ch", list(string.ascii_uppercase))
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " é"))
def test_case_conversion_leaves_others(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_conversion_keeps_int_kind():
    assert to_lower(ord("G")) == ord("g")
    assert to_upper(ord("g")) == ord("G")
    assert to_lower(-5) == -5


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.0)
    with pytest.raises(TypeError):
        to_upper(None)