import pytest

from ftls.libft.strings import (
    strchr,
    strcmp,
    strequ,
    striter,
    striteri,
    strjoin,
    strlcat,
    strlen,
    strmap,
    strmapi,
    strncat,
    strncmp,
    strncpy,
)


def test_strlen_none_is_zero():
    assert strlen(None) == 0


def test_strlen_matches_length():
    word = "directory"
    assert strlen(word) == len(word)


def test_strcmp_equal_is_zero():
    assert strcmp("ft_ls", "ft_ls") == 0


def test_strcmp_difference_of_first_mismatch():
    assert strcmp("abc", "abd") == ord("c") - ord("d")


def test_strcmp_prefix_sorts_first():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_missing_is_minus_one():
    assert strcmp(None, "a") == -1
    assert strcmp("a", None) == -1


def test_strcmp_is_antisymmetric():
    pairs = [("a", "b"), ("Zeta", "alpha"), (".", ".."), ("", "x")]
    for a, b in pairs:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_agrees_with_strcmp_for_large_n():
    for a, b in [("abc", "abd"), ("ab", "abc"), ("same", "same")]:
        assert strncmp(a, b, 100) == strcmp(a, b)


def test_strequ():
    assert strequ("x", "x") is True
    assert strequ("x", "y") is False
    assert strequ(None, "x") is False


def test_strchr_finds_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strchr_missing_is_none():
    assert strchr("hello", "z") is None


def test_strchr_terminator_is_end():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strchr_accepts_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") is None


def test_strncat_takes_prefix():
    assert strncat("ab", "cdef", 2) == "ab" + "cd"
    assert strncat("ab", "cd", 10) == "abcd"


def test_strlcat_fits():
    result, total = strlcat("ab", "cde", 10)
    assert result == "abcde"
    assert total == len("ab") + len("cde")


def test_strlcat_truncates_to_buffer():
    result, total = strlcat("ab", "cdef", 4)
    assert len(result) == 4 - 1
    assert result.startswith("ab")
    assert total == len("ab") + len("cdef")


def test_strlcat_size_below_dst():
    result, total = strlcat("abcdef", "xy", 3)
    assert result == "abcdef"
    assert total == len("xy") + 3


def test_strncpy_pads_and_truncates():
    padded = strncpy("ab", 5)
    assert len(padded) == 5
    assert padded.rstrip("\0") == "ab"
    assert strncpy("abcdef", 3) == "abc"


def test_strncpy_negative_length():
    with pytest.raises(ValueError):
        strncpy("ab", -1)


def test_strmap_applies_function():
    assert strmap("abc", str.upper) == "ABC"
    assert strmap(None, str.upper) is None


def test_strmapi_drops_empty_results():
    result = strmapi("abcd", lambda i, c: c if i % 2 == 0 else "\0")
    assert result == "ac"


def test_strmapi_receives_indices():
    seen = []
    strmapi("xyz", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_striter_replaces_characters():
    assert striter("abc", lambda c: c.upper() if c == "b" else None) == "aBc"


def test_striter_without_function_keeps_string():
    assert striter("abc", None) == "abc"


def test_striteri_uses_index():
    result = striteri("aaaa", lambda i, c: str(i) if i >= 2 else None)
    assert result == "aa23"
    assert len(result) == len("aaaa")