import pytest

from cubscene.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strcmp,
    strrchr,
    strtrim,
    substr,
)


def test_strchr_finds_first_occurrence():
    text = "hello world"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_missing_and_none():
    assert strchr("abc", "z") is None
    assert strchr(None, "a") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")


def test_strchr_rejects_multi_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    text = "hello world"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]
    assert index > strchr(text, "o")


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "z") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strcmp_equal_and_ordering():
    assert strcmp("same", "same") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


def test_strcmp_prefix_difference():
    assert strcmp("abc", "ab") == ord("c")
    assert strcmp("ab", "abc") == -ord("c")


def test_strcmp_antisymmetric():
    pairs = [("apple", "apricot"), ("x", ""), ("NO", "SO")]
    for a, b in pairs:
        assert strcmp(a, b) == -strcmp(b, a)


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")
    assert strncmp("anything", "different", 0) == 0


def test_strncmp_stops_at_end():
    assert strncmp("ab", "ab", 10) == 0
    assert strncmp("ab", "abc", 10) == -ord("c")


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_basic():
    haystack = "textures/north.xpm"
    needle = "north"
    index = strnstr(haystack, needle, len(needle))
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_empty_needle_and_none():
    assert strnstr("abc", "", 0) == 0
    assert strnstr(None, "a", 5) is None


def test_strnstr_needle_longer_than_limit():
    assert strnstr("abcdef", "cde", 2) is None


def test_strnstr_missing():
    assert strnstr("abcdef", "xyz", 10) is None


def test_strjoin():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strlcpy_truncates_and_reports_length():
    src = "hello"
    copied, length = strlcpy(src, 3)
    assert length == len(src)
    assert len(copied) == 2
    assert src.startswith(copied)


def test_strlcpy_fits_whole():
    src = "hi"
    assert strlcpy(src, 10) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcat_appends_within_size():
    dst, src = "ab", "cdef"
    result, total = strlcat(dst, src, 5)
    assert total == len(dst) + len(src)
    assert len(result) == 4
    assert result.startswith(dst)
    assert src.startswith(result[len(dst):])


def test_strlcat_size_too_small():
    dst, src = "abcd", "ef"
    assert strlcat(dst, src, 3) == (dst, 3 + len(src))


def test_strlcat_enough_room():
    assert strlcat("ab", "cd", 100) == ("ab" + "cd", len("abcd"))


def test_strmapi_uses_index_and_char():
    text = "abc"
    result = strmapi(text, lambda i, c: c.upper() if i % 2 == 0 else c)
    assert len(result) == len(text)
    assert result[0] == "A"
    assert result[1] == "b"


def test_strmapi_none_inputs():
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_in_place():
    chars = list("abcd")
    seen = []

    def func(index, char):
        seen.append(index)
        return char.upper() if index >= 2 else None

    striteri(chars, func)
    assert seen == [0, 1, 2, 3]
    assert "".join(chars) == "abCD"


def test_striteri_empty_does_nothing():
    chars = []
    calls = []
    striteri(chars, lambda i, c: calls.append(i))
    assert chars == []
    assert calls == []


def test_strtrim():
    assert strtrim("  \tEA ./east.xpm \n", " \t\n") == "EA ./east.xpm"
    assert strtrim("xxyxx", "x") == "y"
    assert strtrim("", " ") == ""


def test_strtrim_all_trimmed_and_none():
    assert strtrim("    ", " ") == ""
    assert strtrim(None, " ") is None
    assert strtrim("abc", None) is None
    assert strtrim(" a ", "") == " a "


def test_substr():
    text = "cub3D scene"
    assert substr(text, 0, 3) == text[:3]
    assert substr(text, 6, 100) == text[6:]
    assert substr(text, len(text) + 1, 5) == ""
    assert substr(text, len(text), 5) == ""


def test_substr_none_and_negative():
    assert substr(None, 0, 1) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_split_drops_empty_pieces():
    words = split("  F 220,100   0  ", " ")
    assert "" not in words
    assert " ".join(words) == "F 220,100 0"


def test_split_round_trip_on_commas():
    parts = ["220", "100", "0"]
    assert split(",".join(parts), ",") == parts
    assert split(",,," + ",".join(parts) + ",,", ",") == parts


def test_split_edge_cases():
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split(None, " ") is None
    assert split("word", "\0") == ["word"]
    with pytest.raises(ValueError):
        split("a b", "")