"""Conversions between 32-bit integers and their decimal text."""

from __future__ import annotations

from pipex.chars import is_digit, is_space

INT_MAX = 2147483647
INT_MIN = -2147483648
_WORD = 2**64


def _scan(text: str) -> tuple[int, int]:
    """Return the sign and the unsigned magnitude read from ``text``.

    Leading whitespace is skipped, one optional sign is read, then digits
    until the first non-digit. The magnitude wraps at 64 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    magnitude = 0
    while pos < length and is_digit(text[pos]):
        magnitude = (magnitude * 10 + int(text[pos])) % _WORD
        pos += 1
    return sign, magnitude


def parse_int(text: str) -> int:
    """Read a leading decimal integer the lenient way.

    Text that holds no number gives 0. A value below the 32-bit range
    gives 0 and one above it gives -1.
    """
    sign, magnitude = _scan(text)
    if sign < 0 and magnitude > -INT_MIN:
        return 0
    if sign > 0 and magnitude > INT_MAX:
        return -1
    return sign * magnitude


def parse_int_checked(text: str) -> int:
    """Read a leading decimal integer, raising ``OverflowError`` outside 32 bits."""
    sign, magnitude = _scan(text)
    if (sign < 0 and magnitude > -INT_MIN) or (sign > 0 and magnitude > INT_MAX):
        raise OverflowError(f"{text.strip()!r} does not fit in a 32-bit integer")
    return sign * magnitude


def int_to_str(number: int) -> str:
    """Decimal text of a 32-bit integer."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit integer")
    return str(number)