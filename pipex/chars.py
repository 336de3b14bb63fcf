"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Only the ASCII ranges are recognised, whatever the
locale or the Unicode properties of the character.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_SPACES = frozenset(map(ord, "\t\n\v\f\r "))


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def is_space(c: CharLike) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return or space."""
    return _code(c) in _SPACES


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def has_non_digit(text: str) -> bool:
    """True if ``text`` holds anything other than digits and one minus sign.

    A single ``-`` is tolerated wherever it stands; a second one counts
    as a non-digit.
    """
    seen_minus = False
    for ch in text:
        if ch == "-" and not seen_minus:
            seen_minus = True
        elif not is_digit(ch):
            return True
    return False