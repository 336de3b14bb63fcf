"""A small ``printf`` supporting the ``c s d i u x X p %`` conversions.

There are no flags, widths or precisions: the character after ``%``
selects the conversion. An unknown conversion character is dropped
together with its ``%`` and consumes no argument; a ``%`` that ends the
format is dropped as well. Integer arguments are reduced to the width of
the C type the conversion reads: 32 bits for ``d i u x X``, 64 bits for
``p``.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, Optional, TextIO

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
DECIMAL = "0123456789"
NULL_TEXT = "(null)"

_UINT_MOD = 2**32
_INT_LIMIT = 2**31
_POINTER_MOD = 2**64
_BYTE_MOD = 256
_MISSING = object()


def _integer(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value %= _UINT_MOD
    return value - _UINT_MOD if value >= _INT_LIMIT else value


def format_number_base(number: int, base: str) -> str:
    """Digits of a non-negative ``number`` written with the digit set ``base``."""
    if len(base) < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")
    if number < 0:
        raise ValueError(f"expected a non-negative number, got {number}")
    radix = len(base)
    digits = []
    while True:
        number, remainder = divmod(number, radix)
        digits.append(base[remainder])
        if not number:
            break
    return "".join(reversed(digits))


def format_hex(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative ``number``, without a prefix."""
    return format_number_base(number, HEX_UPPER if upper else HEX_LOWER)


def _signed(value: Any) -> str:
    number = _as_int32(_integer(value, "d"))
    text = format_number_base(abs(number), DECIMAL)
    return "-" + text if number < 0 else text


def _unsigned(value: Any) -> str:
    return format_number_base(_integer(value, "u") % _UINT_MOD, DECIMAL)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_integer(value, "c") % _BYTE_MOD)


def _string(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _hex_lower(value: Any) -> str:
    return format_hex(_integer(value, "x") % _UINT_MOD)


def _hex_upper(value: Any) -> str:
    return format_hex(_integer(value, "X") % _UINT_MOD, upper=True)


def _pointer(value: Any) -> str:
    return "0x" + format_hex(_integer(value, "p") % _POINTER_MOD)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "c": _char,
    "s": _string,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        return ""
    value = next(values, _MISSING)
    if value is _MISSING:
        raise ValueError(f"not enough arguments for %{spec}")
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)