"""String helpers with the bounded and C-string semantics the tools rely on.

Positions are returned as indices into the text. ``None`` means that
nothing was found. A character searched for as ``"\\0"`` matches the
end of the text, as it would match a string terminator.
"""

from __future__ import annotations

from typing import Callable, Optional

_NUL = "\0"


def _check_char(char: str, what: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"{what} must be a single character, got {char!r}")


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    _check_char(sep, "separator")
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Number of non-empty words in ``text`` separated by ``sep``."""
    return len(split_words(text, sep))


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_size(start, "start")
    _check_size(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Index of the first ``needle`` that lies wholly in ``haystack[:limit]``.

    An empty needle is found at index 0.
    """
    _check_size(limit, "limit")
    if not needle:
        return 0
    index = haystack.find(needle, 0, min(limit, len(haystack)))
    return index if index >= 0 else None


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; ``"\\0"`` matches the end."""
    _check_char(char, "character")
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; ``"\\0"`` matches the end."""
    _check_char(char, "character")
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def compare_bounded(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters.

    Returns the difference of the codes of the first characters that
    differ, zero if none do. The end of a string counts as code 0.
    """
    _check_size(limit, "limit")
    for pos in range(limit):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is not below ``size``.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` slots.

    Returns the resulting text and the length the result would have had
    without truncation, measured from ``min(len(dst), size)``. If ``dst``
    already fills the buffer it is returned unchanged.
    """
    _check_size(size, "size")
    dst_len = min(len(dst), size)
    total = dst_len + len(src)
    if dst_len == size:
        return dst, total
    room = size - dst_len - 1
    return dst + src[:room], total


def join(first: str, second: str) -> str:
    """The two strings one after the other."""
    return first + second


def trim(text: str, charset: str) -> str:
    """Remove the characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))