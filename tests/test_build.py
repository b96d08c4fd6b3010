import pytest

from ftkit.build import split, strdup, striteri, strjoin, strmapi, strtrim, substr


def test_strdup_equal_copy():
    original = "hello world"
    assert strdup(original) == original
    assert strdup("") == ""


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_inside():
    s = "Hello, world"
    assert substr(s, 7, 5) == s[7:12]


def test_substr_clamped_to_end():
    s = "Hello"
    assert substr(s, 2, 100) == s[2:]


def test_substr_start_at_end_and_beyond():
    assert substr("Hello", len("Hello"), 3) == ""
    assert substr("Hello", 99, 3) == ""


@pytest.mark.parametrize("start,length", [(0, 0), (0, 3), (1, 2), (4, 10)])
def test_substr_length_bound(start, length):
    s = "abcdef"
    result = substr(s, start, length)
    assert len(result) <= length
    assert s.find(result, start) == start


def test_substr_errors():
    with pytest.raises(TypeError):
        substr(None, 0, 1)
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_strjoin_concatenates():
    assert strjoin("foo", "bar") == "foo" + "bar"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin("a", None)


def test_strtrim_both_ends():
    assert strtrim("xxhelloyx", "xy") == "hello"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  padded  ", "") == "  padded  "


def test_strtrim_inner_characters_kept():
    result = strtrim("--a-b--", "-")
    assert result[0] != "-" and result[-1] != "-"
    assert "-" in result


def test_split_drops_empty_words():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_empty_and_delimiters_only():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_accepts_code_point():
    assert split("a,b,,c", ord(",")) == split("a,b,,c", ",")


def test_split_rejoin_round_trip():
    s = "one,two,three"
    assert ",".join(split(s, ",")) == s


def test_split_no_delimiter_gives_whole():
    assert split("word", " ") == ["word"]


def test_split_bad_delimiter():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_uses_index_and_char():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"


def test_strmapi_identity_round_trip():
    s = "unchanged text"
    assert strmapi(s, lambda i, ch: ch) == s


def test_striteri_modifies_in_place():
    chars = list("hello")
    striteri(chars, lambda i, ch: ch.upper() if i == 0 else None)
    assert "".join(chars) == "Hello"


def test_striteri_passes_every_index():
    chars = list("abc")
    seen = []
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("abc"))
    assert chars == list("abc")


def test_striteri_none_is_ignored():
    calls = []
    assert striteri(None, lambda i, ch: calls.append(i)) is None
    assert calls == []