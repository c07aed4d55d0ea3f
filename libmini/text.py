"""Character classification, number parsing and basic string helpers."""

from __future__ import annotations

from operator import index as _as_index

__all__ = [
    "absolute",
    "parse_int",
    "parse_long",
    "parse_float",
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
    "int_to_str",
    "split",
    "find_char",
    "rfind_char",
]

_SPACES = frozenset("\t\n\v\f\r ")
_DIGITS = "0123456789"


def absolute(n):
    """Return the absolute value of an int or float."""
    return -n if n < 0 else n


def _code(c) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return _as_index(c)


def _prefix(text: str) -> tuple[bool, int] | None:
    """Skip leading whitespace and at most one sign.

    Returns (negative, position of the first digit), or None when more
    than one sign is present.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    negative = False
    signs = 0
    while pos < len(text) and text[pos] in "+-":
        if signs:
            return None
        signs += 1
        negative = text[pos] == "-"
        pos += 1
    return negative, pos


def _leading_digits(text: str, pos: int) -> str:
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return text[pos:end]


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _parse_integer(text: str | None, bits: int) -> int:
    if not text:
        return 0
    prefix = _prefix(text)
    if prefix is None:
        return 0
    negative, pos = prefix
    digits = _leading_digits(text, pos)
    value = int(digits) if digits else 0
    return _wrap(-value if negative else value, bits)


def parse_int(text: str | None) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. A second sign, or no input at all, yields 0.
    """
    return _parse_integer(text, 32)


def parse_long(text: str | None) -> int:
    """Parse a leading decimal integer, wrapping to 64 bits."""
    return _parse_integer(text, 64)


def parse_float(text: str | None) -> float:
    """Parse a leading decimal number with an optional '.' or ',' fraction."""
    if not text:
        return 0.0
    prefix = _prefix(text)
    if prefix is None:
        return 0.0
    negative, pos = prefix
    whole = _leading_digits(text, pos)
    number = 0.0
    for digit in whole:
        number = number * 10 + (ord(digit) - 48)
    pos += len(whole)
    if pos < len(text) and text[pos] in ".,":
        fraction = 0.0
        power = 10.0
        for digit in _leading_digits(text, pos + 1):
            fraction += (ord(digit) - 48) / power
            power *= 10
        number += fraction
    return -number if negative else number


def is_alnum(c) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(c) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c) -> bool:
    """True for the ASCII digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_print(c) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert_case(c, low: str, high: str, delta: int):
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c):
    """Lower-case an ASCII letter; other characters come back unchanged."""
    return _convert_case(c, "A", "Z", 32)


def to_upper(c):
    """Upper-case an ASCII letter; other characters come back unchanged."""
    return _convert_case(c, "a", "z", -32)


def int_to_str(n: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{_as_index(n):d}"


def split(s: str, sep: str) -> list[str]:
    """Split s on a single separator character, dropping empty pieces.

    An empty separator (or NUL) leaves the string whole.
    """
    if len(sep) > 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep in ("", "\0"):
        return [s] if s else []
    return [piece for piece in s.split(sep) if piece]


def _target(c) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_as_index(c) & 0xFF)


def find_char(s: str, c) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for NUL finds the terminator at len(s).
    """
    pos = (s + "\0").find(_target(c))
    return None if pos < 0 else pos


def rfind_char(s: str, c) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Searching for NUL finds the terminator at len(s).
    """
    pos = (s + "\0").rfind(_target(c))
    return None if pos < 0 else pos