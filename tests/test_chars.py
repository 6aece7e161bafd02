import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = range(128)


def test_source_examples():
    assert is_alnum(".") is False
    assert is_alpha("?") is False
    assert is_digit("a") is False
    assert to_lower("A") == "a"
    assert to_upper("a") == "A"


@pytest.mark.parametrize("code", ASCII)
def test_classifiers_agree_with_ascii_semantics(code):
    ch = chr(code)
    assert is_alpha(code) == ch.isalpha()
    assert is_digit(code) == ch.isdigit()
    assert is_alnum(code) == ch.isalnum()
    assert is_print(code) == ch.isprintable()
    assert is_ascii(code) is True


def test_str_and_int_inputs_agree():
    for code in ASCII:
        assert is_alnum(chr(code)) == is_alnum(code)
        assert is_print(chr(code)) == is_print(code)


@pytest.mark.parametrize("ch", ["ñ", "é", "٣", "Ä"])
def test_non_ascii_letters_and_digits_are_rejected(ch):
    assert is_alpha(ch) is False
    assert is_digit(ch) is False
    assert is_alnum(ch) is False
    assert is_ascii(ch) is False


@pytest.mark.parametrize("code", [-1, 128, 255, 1000])
def test_is_ascii_bounds(code):
    assert is_ascii(code) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_conversion_matches_ascii_methods():
    for code in ASCII:
        ch = chr(code)
        assert to_lower(ch) == (ch.lower() if ch.isalpha() else ch)
        assert to_upper(ch) == (ch.upper() if ch.isalpha() else ch)


def test_case_conversion_keeps_int_type():
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("q")) == ord("Q")
    assert to_upper(ord("5")) == ord("5")


def test_case_round_trip():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(ch)) == ch


def test_non_ascii_unchanged_by_case_conversion():
    assert to_upper("ñ") == "ñ"
    assert to_lower("Ä") == "Ä"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_lower("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.0)
    with pytest.raises(TypeError):
        to_upper(None)