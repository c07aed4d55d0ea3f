"""Bounded string copying, comparison, searching and trimming."""

from __future__ import annotations

from operator import index as _as_index
from typing import Callable

__all__ = [
    "join",
    "bounded_copy",
    "bounded_concat",
    "map_chars",
    "iter_chars",
    "compare",
    "find_substring",
    "trim",
    "substring",
]


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _require_size(value, name: str) -> int:
    size = _as_index(value)
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")
    return size


def join(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of src, so truncation
    happened whenever the second value is not smaller than size.
    """
    src = _require_str(src, "src")
    size = _require_size(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When dst already fills the buffer it is left alone and the
    length reported is size plus the length of src.
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    size = _require_size(size, "size")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def map_chars(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    s = _require_str(s, "s")
    return "".join(func(position, char) for position, char in enumerate(s))


def iter_chars(s: str, func: Callable[[int, str], object]) -> None:
    """Call func(index, char) on every character of s, for its side effects."""
    s = _require_str(s, "s")
    for position, char in enumerate(s):
        func(position, char)


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when they agree. A limit of 0
    gives -1.
    """
    s1 = _require_str(s1, "s1")
    s2 = _require_str(s2, "s2")
    n = _require_size(n, "n")
    if n == 0:
        return -1
    for position in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b:
            return a - b
    return 0


def find_substring(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first needle lying wholly within the first length characters.

    An empty needle is found at 0; None means no match.
    """
    haystack = _require_str(haystack, "haystack")
    needle = _require_str(needle, "needle")
    length = _require_size(length, "length")
    if not needle:
        return 0
    for position in range(min(len(haystack), length)):
        if position + len(needle) > length:
            break
        if haystack.startswith(needle, position):
            return position
    return None


def trim(s: str, charset: str) -> str:
    """Strip every character found in charset from both ends of s."""
    s = _require_str(s, "s")
    charset = _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def substring(s: str, start: int, length: int) -> str:
    """Return at most length characters of s from position start.

    A start at or past the end gives an empty string.
    """
    s = _require_str(s, "s")
    start = _require_size(start, "start")
    length = _require_size(length, "length")
    if start >= len(s):
        return ""
    return s[start : start + length]