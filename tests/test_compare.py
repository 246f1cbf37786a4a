import pytest

from sigtalk.compare import memcmp, strncmp, strnstr


def test_strnstr_empty_needle_is_found_at_start():
    assert strnstr("anything", "", 3) == 0


def test_strnstr_found_index_points_at_needle():
    haystack = "lorem ipsum dolor"
    index = strnstr(haystack, "dolor", len(haystack))
    assert haystack[index:index + len("dolor")] == "dolor"
    assert "dolor" not in haystack[:index + len("dolor") - 1]


def test_strnstr_match_must_fit_within_limit():
    haystack = "foo bar"
    assert strnstr(haystack, "bar", len(haystack) - 1) is None
    assert strnstr(haystack, "bar", len(haystack)) == haystack.index("bar")


def test_strnstr_limit_beyond_length():
    assert strnstr("abc", "c", 100) == 2


def test_strnstr_missing_needle():
    assert strnstr("abcdef", "xyz", 6) is None


def test_strnstr_negative_limit():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)


def test_strncmp_equal_strings():
    assert strncmp("minitalk", "minitalk", 8) == 0


def test_strncmp_zero_limit_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_ignores_difference_after_limit():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_returns_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strncmp_shorter_string_compares_as_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_stops_at_nul():
    assert strncmp("a\0x", "a\0y", 3) == 0


def test_strncmp_bytes_are_unsigned():
    assert strncmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_strncmp_rejects_other_types():
    with pytest.raises(TypeError):
        strncmp(12, "12", 2)


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_unsigned_difference():
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF


def test_memcmp_does_not_stop_at_nul():
    assert memcmp(b"\0a", b"\0b", 2) == ord("a") - ord("b")


def test_memcmp_only_first_bytes():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_accepts_bytearray():
    assert memcmp(bytearray(b"xy"), b"xz", 2) == ord("y") - ord("z")


def test_memcmp_limit_too_large():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcmp_rejects_text():
    with pytest.raises(TypeError):
        memcmp("ab", b"ab", 2)