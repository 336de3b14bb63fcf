import string

import pytest

from pipex.chars import (
    has_non_digit,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", string.ascii_letters)
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", string.digits)
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alnum(ch) is True
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", ["@", "[", "`", "{", "/", ":", " ", "é"])
def test_boundaries_not_alnum(ch):
    assert is_alnum(ch) is False


def test_integer_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(-1) is False


def test_is_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_range():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("ch", ["\t", "\n", "\v", "\f", "\r", " "])
def test_is_space_true(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "\0", "\x1c", "\xa0"])
def test_is_space_false(ch):
    assert is_space(ch) is False


def test_case_conversion_round_trip():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert to_lower(upper) == lower
        assert to_upper(lower) == upper
        assert to_upper(to_lower(upper)) == upper


@pytest.mark.parametrize("ch", ["1", "@", "[", "{", "é", " "])
def test_case_conversion_leaves_others(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_conversion_keeps_int_kind():
    assert to_lower(ord("B")) == ord("b")
    assert to_upper(ord("b")) == ord("B")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


@pytest.mark.parametrize("text", ["", "123", "-123", "-", "12-3"])
def test_has_non_digit_false(text):
    assert has_non_digit(text) is False


@pytest.mark.parametrize("text", ["--1", "1a", " 1", "+1", "1-2-3"])
def test_has_non_digit_true(text):
    assert has_non_digit(text) is True