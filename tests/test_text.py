import pytest

from libmini.text import (
    absolute,
    find_char,
    int_to_str,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    parse_float,
    parse_int,
    parse_long,
    rfind_char,
    split,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("value", [-7, 0, 7, -2.5, 2.5])
def test_absolute_is_non_negative_and_preserves_magnitude(value):
    result = absolute(value)
    assert result >= 0
    assert result in (value, -value)


def test_parse_int_skips_whitespace_and_stops_at_non_digit():
    assert parse_int(" \t\n-42abc") == -42
    assert parse_int("+17 18") == 17


@pytest.mark.parametrize("text", ["+-5", "-+5", "--5", "++5", None, "", "abc"])
def test_parse_int_invalid_prefix_gives_zero(text):
    assert parse_int(text) == 0


@pytest.mark.parametrize("n", [0, 1, -1, 123456, -2147483648, 2147483647])
def test_int_round_trip(n):
    assert parse_int(int_to_str(n)) == n


def test_int_to_str_minimum():
    assert int_to_str(-2147483648) == "-2147483648"


def test_parse_int_wraps_to_32_bits():
    assert parse_int("2147483648") == -2147483648


def test_parse_long_does_not_wrap_at_32_bits():
    assert parse_long("2147483648") == 2147483648
    assert parse_long("-+1") == 0


def test_parse_long_wraps_to_64_bits():
    assert parse_long("9223372036854775808") == parse_long("-9223372036854775808")


def test_parse_float_accepts_dot_and_comma():
    assert parse_float("3.5") == 3.5
    assert parse_float("  1,25xyz") == 1.25
    assert parse_float("-0.5") == -0.5


def test_parse_float_integer_only_and_invalid():
    assert parse_float("12") == 12.0
    assert parse_float("+-1.5") == 0.0
    assert parse_float(None) == 0.0


@pytest.mark.parametrize(
    "char, alpha, digit",
    [("a", True, False), ("Z", True, False), ("5", False, True), ("#", False, False)],
)
def test_classification(char, alpha, digit):
    assert is_alpha(char) is alpha
    assert is_digit(char) is digit
    assert is_alnum(char) is (alpha or digit)
    assert is_alpha(ord(char)) is alpha


def test_ascii_and_print_bounds():
    assert is_ascii(0) and is_ascii(127)
    assert not is_ascii(128) and not is_ascii(-1)
    assert is_print(" ") and is_print("~")
    assert not is_print("\x7f") and not is_print("\n")


def test_classification_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("char", ["a", "m", "z", "A", "Q", "Z", "1", "!"])
def test_case_conversion_round_trip(char):
    assert to_lower(to_upper(char)) == char.lower()
    assert to_upper(to_lower(char)) == char.upper()


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("A")) == ord("a")
    assert to_lower(ord("é")) == ord("é")


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_with_nul_separator_keeps_whole_string():
    assert split("abc", "") == ["abc"]
    assert split("a b", "\0") == ["a b"]


def test_split_join_invariant():
    text = "a:bb::ccc:"
    pieces = split(text, ":")
    assert ":".join(pieces) == text.strip(":").replace("::", ":")
    assert all(":" not in piece and piece for piece in pieces)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_find_char_and_rfind_char():
    text = "hello"
    assert find_char(text, "l") == text.index("l")
    assert rfind_char(text, "l") == text.rindex("l")
    assert find_char(text, "z") is None
    assert rfind_char(text, "z") is None


def test_find_terminator():
    assert find_char("hello", "\0") == len("hello")
    assert rfind_char("hello", 0) == len("hello")


def test_find_char_int_is_truncated_to_byte():
    assert find_char("hello", ord("e") + 256) == "hello".index("e")