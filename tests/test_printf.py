import io

import pytest

from pipex.printf import format_hex, format_number_base, printf, sprintf


def test_percent_escape():
    assert sprintf("100%%") == "100%"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_passthrough():
    assert sprintf("<%s>", "word") == "<" + "word" + ">"


def test_null_pointer():
    assert sprintf("%p", 0) == "0x0"


@pytest.mark.parametrize("address", [1, 0xDEADBEEF, 2**64 - 1])
def test_pointer_round_trip(address):
    text = sprintf("%p", address)
    assert text.startswith("0x")
    assert int(text, 16) == address
    assert text == text.lower()


@pytest.mark.parametrize("number", [0, 7, -7, 42, 2**31 - 1, -(2**31)])
@pytest.mark.parametrize("spec", ["%d", "%i"])
def test_decimal_round_trip(spec, number):
    assert int(sprintf(spec, number)) == number


def test_decimal_wraps_to_32_bits():
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("number", [0, 10, 255, 4096, 2**32 - 1])
def test_hex_round_trip(number):
    lower = sprintf("%x", number)
    upper = sprintf("%X", number)
    assert int(lower, 16) == number
    assert int(upper, 16) == number
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_hex_of_negative_wraps():
    assert int(sprintf("%x", -1), 16) == 2**32 - 1


def test_char_from_string_and_code():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", 66) == chr(66)


def test_unknown_conversion_is_dropped():
    assert sprintf("a%qb") == "ab"


def test_unknown_conversion_consumes_no_argument():
    assert sprintf("%q%d", 5) == sprintf("%d", 5)


def test_trailing_percent_is_dropped():
    assert sprintf("abc%") == "abc"


def test_missing_argument():
    with pytest.raises(ValueError):
        sprintf("%d and %d", 1)


def test_string_conversion_rejects_numbers():
    with pytest.raises(TypeError):
        sprintf("%s", 12)


def test_integer_conversion_rejects_strings():
    with pytest.raises(TypeError):
        sprintf("%d", "12")


def test_printf_writes_and_counts():
    buffer = io.StringIO()
    count = printf("%s-%d-%x", "x", 5, 255, stream=buffer)
    assert buffer.getvalue() == sprintf("%s-%d-%x", "x", 5, 255)
    assert count == len(buffer.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s%%", "done")
    assert capsys.readouterr().out == "done%"
    assert count == len("done%")


def test_number_base_zero():
    assert format_number_base(0, "01") == "0"


@pytest.mark.parametrize("number", [1, 2, 5, 1023, 123456])
def test_number_base_round_trip(number):
    assert int(format_number_base(number, "01"), 2) == number
    assert int(format_number_base(number, "01234567"), 8) == number


def test_number_base_rejects_negative():
    with pytest.raises(ValueError):
        format_number_base(-1, "0123456789")


def test_number_base_rejects_short_base():
    with pytest.raises(ValueError):
        format_number_base(3, "x")


def test_format_hex_upper():
    assert format_hex(255, upper=True) == "FF"


@pytest.mark.parametrize("number", [0, 9, 16, 65535])
def test_format_hex_round_trip(number):
    assert int(format_hex(number), 16) == number