import pytest

from minifmt.text import (
    atoi,
    strchr,
    strdup,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
    strlen as length,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "(null)"])
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strlen_null_marker():
    assert strlen("(null)") == 6


@pytest.mark.parametrize("s, c", [("hello", "l"), ("hello", "h"), ("abcabc", "c"), ("xyz", ord("y"))])
def test_strchr_finds_first(s, c):
    target = c if isinstance(c, str) else chr(c)
    index = strchr(s, c)
    assert s[index] == target
    assert target not in s[:index]


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_is_end():
    assert strchr("hello", 0) == len("hello")


def test_strchr_int_truncated_to_byte():
    assert strchr("hello", ord("e") + 256) == strchr("hello", "e")


@pytest.mark.parametrize("s, c", [("hello", "l"), ("abcabc", "a"), ("abcabc", "c")])
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("hello", "he")


def test_strncmp_equal():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_is_code_difference():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_equal_beyond_end():
    assert strncmp("ab", "ab", 100) == 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apricot", 7) == -strncmp("apricot", "apple", 7)


def test_strncmp_negative_size():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_limit():
    big = "foo bar baz"
    index = strnstr(big, "bar", len(big))
    assert big[index:index + len("bar")] == "bar"


def test_strnstr_match_must_fit_in_limit():
    big = "foo bar baz"
    start = big.index("bar")
    assert strnstr(big, "bar", start + 2) is None
    assert strnstr(big, "bar", start + 3) == start


def test_strnstr_empty_little():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("foo", "xyz", 3) is None


def test_strlcpy_fits():
    assert strlcpy("foo", 10) == ("foo", 3)


def test_strlcpy_truncates():
    copied, total = strlcpy("hello world", 6)
    assert copied == "hello"
    assert total == len("hello world")
    assert len(copied) == 6 - 1


def test_strlcpy_zero_size():
    assert strlcpy("foo", 0) == ("", 3)


def test_strlcpy_minus_sign():
    assert strlcpy("-", 2) == ("-", 1)


def test_strlcat_appends():
    result, total = strlcat("-", "2147483648", 12)
    assert result == "-2147483648"
    assert total == len(result)


def test_strlcat_truncates():
    result, total = strlcat("abc", "defgh", 6)
    assert result == "abcde"
    assert len(result) == 6 - 1
    assert total == len("abc") + len("defgh")


def test_strlcat_full_destination():
    result, total = strlcat("abcdef", "xyz", 4)
    assert result == "abcdef"
    assert total == 4 + len("xyz")


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -3)


def test_strdup_equal_copy():
    original = "foo"
    assert strdup(original) == original
    assert strdup("") == ""


def test_atoi_int_min():
    assert atoi("-2147483648") == -2147483648


def test_atoi_int_max():
    assert atoi("2147483647") == 2147483647


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_atoi_whitespace_and_sign():
    assert atoi(" \t\n\f\r\v+42abc") == 42
    assert atoi("   -17 and more") == -17


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("+-5") == 0
    assert atoi("  -") == 0


@pytest.mark.parametrize("n", [0, 1, 9, 10, 12345, -1, -999, 2147483647])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_length_alias_consistent():
    assert length("abc") == strlen("abc")