import pytest

from ftkit.chars import to_upper
from ftkit.transform import count_words, split, strjoin, strmapi, striteri, strtrim


def test_strtrim_source_example():
    assert strtrim("123456", "1256") == "34"


@pytest.mark.parametrize(
    "s, charset",
    [("  hello  ", " "), ("xyxhixyx", "xy"), ("abc", "z"), ("-a-b-", "-")],
)
def test_strtrim_invariants(s, charset):
    result = strtrim(s, charset)
    assert result in s
    if result:
        assert result[0] not in charset
        assert result[-1] not in charset


def test_strtrim_everything_in_set():
    assert strtrim("aaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("abc", "") == "abc"


def test_strtrim_empty_input():
    assert strtrim("", "x") == ""


def test_strtrim_stops_at_nul():
    assert strtrim("xabx\0x", "x") == "ab"


def test_strjoin_source_example():
    s1, s2 = "Hola ", "mundo"
    assert strjoin(s1, s2) == s1 + s2


def test_strjoin_one_missing():
    assert strjoin(None, "abc") == "abc"
    assert strjoin("abc", None) == "abc"


def test_strjoin_both_missing():
    with pytest.raises(ValueError):
        strjoin(None, None)


def test_strjoin_stops_at_nul():
    assert strjoin("ab\0cd", "ef") == "abef"


def test_split_source_example():
    s = "      gfdgf biiu asd    "
    assert split(s, " ") == ["gfdgf", "biiu", "asd"]
    assert count_words(s, " ") == len(split(s, " "))


@pytest.mark.parametrize("s", ["", "   ", "a", " a b  c ", "a,,b", ",,,"])
def test_split_invariants(s):
    sep = " " if " " in s or not s else ","
    parts = split(s, sep)
    assert all(parts)
    assert all(sep not in p for p in parts)
    assert "".join(parts) == s.replace(sep, "")
    assert count_words(s, sep) == len(parts)


def test_count_words_empty():
    assert count_words("", " ") == 0
    assert count_words("    ", " ") == 0


def test_split_accepts_int_separator():
    assert split("a b", ord(" ")) == split("a b", " ")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strmapi_source_example():
    s = "hola mundo"
    assert strmapi(s, lambda i, c: to_upper(c)) == s.upper()


def test_strmapi_passes_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    s = "abc"
    assert strmapi(s, record) == s
    assert seen == list(range(len(s)))


def test_strmapi_stops_at_nul():
    assert len(strmapi("ab\0cd", lambda i, c: c)) == 2


def test_strmapi_rejects_bad_result():
    with pytest.raises(ValueError):
        strmapi("abc", lambda i, c: c * 2)


def test_striteri_modifies_list_in_place():
    chars = list("hello")

    def upper(i, buf):
        buf[i] = to_upper(buf[i])

    assert striteri(chars, upper) is None
    assert chars == list("hello".upper())


def test_striteri_stops_at_terminator():
    buf = bytearray(b"ab\0cd")

    def upper(i, b):
        b[i] = to_upper(b[i])

    striteri(buf, upper)
    assert buf[:2] == b"ab".upper()
    assert buf[3:] == b"cd"


def test_striteri_visits_every_index():
    seen = []
    striteri(list("xyz"), lambda i, buf: seen.append(i))
    assert seen == list(range(3))