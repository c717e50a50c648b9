import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.strings import (
    charstr,
    split,
    strconv,
    strdel,
    strins,
    strjoin,
    strmapi,
    strpad,
    strsubst,
    strtrim,
    substr,
)

_text = st.text(alphabet="ab xy-", max_size=30)


@given(st.integers(min_value=0, max_value=50))
def test_charstr_length_and_content(number):
    result = charstr(number, "z")
    assert len(result) == number
    assert set(result) <= {"z"}


def test_charstr_negative_raises():
    with pytest.raises(ValueError):
        charstr(-1, "a")


def test_charstr_requires_single_character():
    with pytest.raises(ValueError):
        charstr(3, "ab")


def test_split_collapses_delimiters():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_only_delimiters_gives_empty_list():
    assert split("----", "-") == []


@given(_text)
def test_split_invariants(s):
    words = split(s, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == s.replace(" ", "")


def test_strconv_applies_function():
    assert strconv("abc", str.upper) == "ABC"


@given(_text)
def test_strconv_identity(s):
    assert strconv(s, lambda ch: ch) == s


def test_strdel_removes_character():
    assert strdel("abc", 1) == "ac"


def test_strdel_at_end_is_noop():
    assert strdel("abc", 3) == "abc"


def test_strdel_out_of_range():
    with pytest.raises(IndexError):
        strdel("abc", 4)


@given(_text, st.data())
def test_strins_then_strdel_round_trip(s, data):
    position = data.draw(st.integers(min_value=0, max_value=len(s)))
    inserted = strins(s, "!", position)
    assert len(inserted) == len(s) + 1
    assert inserted[position] == "!"
    assert strdel(inserted, position) == s


def test_strins_past_end_returns_input():
    assert strins("abc", ".", 4) == "abc"


@given(_text, _text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strmapi_passes_indices():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    assert strmapi("abcd", record) == "abcd"
    assert seen == [0, 1, 2, 3]


def test_strmapi_uses_results():
    assert strmapi("abc", lambda i, ch: ch.upper() if i == 1 else ch) == "aBc"


@given(_text, st.integers(min_value=-20, max_value=20))
def test_strpad_sides(s, num):
    padded = strpad(s, "0", num)
    assert len(padded) == len(s) + abs(num)
    if num < 0:
        assert padded.endswith(s)
        assert padded[: abs(num)] == "0" * abs(num)
    else:
        assert padded.startswith(s)
        assert padded[len(s) :] == "0" * num


def test_strsubst_replaces():
    assert strsubst("hello world", "world", "there") == "hello there"


def test_strsubst_first_only():
    assert strsubst("aXaX", "X", "") == "aaX"


def test_strsubst_none_deletes():
    assert strsubst("abcabc", "bc", None) == "aabc"


def test_strsubst_missing_raises():
    with pytest.raises(ValueError):
        strsubst("abc", "z", "y")


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_everything():
    assert strtrim("xyxy", "xy") == ""


@given(_text)
def test_strtrim_invariants(s):
    trimmed = strtrim(s, " -")
    assert trimmed in s
    if trimmed:
        assert trimmed[0] not in " -"
        assert trimmed[-1] not in " -"


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 2) == ""


@given(_text, st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_substr_bounds(s, start, length):
    part = substr(s, start, length)
    assert len(part) <= length
    assert part in s


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)