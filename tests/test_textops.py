import pytest

from sigtalk.textops import (
    atoi,
    itoa,
    split,
    strchr,
    strmapi,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("number", [0, 7, -7, 42, -2147483648, 2147483647, 1000])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r+123") == 123
    assert atoi("   -42abc") == -42


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_itoa_extremes_match_source_strings():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    words = ["a", "bb", "ccc"]
    assert split("|".join(words), "|") == words


def test_split_requires_single_char():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim("abc", "") == "abc"


def test_strtrim_keeps_inner_chars():
    assert strtrim("--a-b--", "-") == "a-b"


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"


def test_substr_past_end_is_empty():
    assert substr("hi", 5, 2) == ""
    assert substr("hi", 2, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hi", -1, 2)
    with pytest.raises(ValueError):
        substr("hi", 0, -1)


def test_strchr_and_strrchr_positions():
    text = "banana"
    first = strchr(text, "a")
    last = strrchr(text, "a")
    assert text[first] == "a" and "a" not in text[:first]
    assert text[last] == "a" and "a" not in text[last + 1:]
    assert first <= last


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None


def test_nul_finds_end_of_text():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_requires_single_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")
    with pytest.raises(ValueError):
        strrchr("abc", "")


def test_strmapi_applies_index_and_char():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("abc", lambda i, c: c) == "abc"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strmapi_empty():
    assert strmapi("", lambda i, c: "x") == ""