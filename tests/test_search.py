import pytest

from ftkit.search import strchr, strlcat, strlcpy, strlen, strncmp, strnstr, strrchr


@pytest.mark.parametrize("s", ["", "a", "pneumonoultramicroscopic", "mini cooper"])
def test_strlen_matches_len_without_nul(s):
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


def test_strchr_finds_first_occurrence():
    s = "pneumonoultramicroscopic"
    index = strchr(s, "m")
    assert s[index] == "m"
    assert "m" not in s[:index]


def test_strchr_accepts_integer_code():
    s = "pneumonoultramicroscopic"
    assert strchr(s, ord("m")) == strchr(s, "m")


def test_strchr_missing_returns_none():
    assert strchr("abc", "z") is None


def test_strchr_nul_finds_terminator():
    s = "hello"
    assert strchr(s, 0) == len(s)


def test_strchr_non_ascii_code_not_found():
    assert strchr("abc", 200) is None


def test_strrchr_finds_last_occurrence():
    s = "pneumono"
    index = strrchr(s, "n")
    assert s[index] == "n"
    assert "n" not in s[index + 1:]
    assert index >= strchr(s, "n")


def test_strrchr_nul_and_missing():
    s = "pneumono"
    assert strrchr(s, "\0") == len(s)
    assert strrchr(s, "z") is None


def test_strchr_rejects_multi_character_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strnstr_empty_needle_matches_at_start():
    assert strnstr("haystack", "", 0) == 0


def test_strnstr_zero_limit_finds_nothing():
    assert strnstr("haystack", "hay", 0) is None


def test_strnstr_finds_overlapping_prefix_case():
    haystack = "ababac"
    index = strnstr(haystack, "abac", 15)
    assert haystack[index:index + len("abac")] == "abac"


def test_strnstr_needle_must_fit_in_limit():
    haystack = "ababac"
    assert strnstr(haystack, "abac", len(haystack) - 1) is None
    assert strnstr(haystack, "abac", len(haystack)) is not None


def test_strnstr_missing_needle():
    assert strnstr("abcdef", "xyz", 6) is None


def test_strncmp_zero_length_is_equal():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcdefghijklmnop", 6) == 0


def test_strncmp_differs_past_prefix():
    assert strncmp("abcdef", "abcdefghijklmnop", 7) < 0
    assert strncmp("abcdefghijklmnop", "abcdef", 7) > 0


def test_strncmp_returns_character_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_is_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strlcpy_copies_within_size():
    src = "testing"
    result, length = strlcpy("", src, 10)
    assert result == src
    assert length == len(src)


def test_strlcpy_truncates():
    src = "testing"
    result, length = strlcpy("old", src, 4)
    assert result == src[:3]
    assert length == len(src)


def test_strlcpy_size_zero_leaves_destination():
    result, length = strlcpy("keep", "testing", 0)
    assert result == "keep"
    assert length == len("testing")


def test_strlcat_appends_within_size():
    result, length = strlcat("one", "two", 20)
    assert result == "one" + "two"
    assert length == len("one") + len("two")


def test_strlcat_truncates_append():
    result, length = strlcat("one", "twothree", 6)
    assert result == "one" + "tw"
    assert length == len("one") + len("twothree")


def test_strlcat_destination_fills_buffer():
    src = "AAAAAAAAA"
    result, length = strlcat("B", src, 1)
    assert result == "B"
    assert length == len(src) + 1


def test_strlcat_size_zero():
    result, length = strlcat("B", "AAA", 0)
    assert result == "B"
    assert length == len("AAA")


def test_negative_limits_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)
    with pytest.raises(ValueError):
        strlcpy("a", "b", -1)