import pytest

from skimmer.util import (
    accumulate_text_width,
    atoi,
    depends_on_items,
    escape_single_quote,
    reshape_string,
    str_lines,
)


def test_accumulate_text_width():
    assert accumulate_text_width("abcdefg", 8) == [1, 2, 3, 4, 5, 6, 7]
    assert accumulate_text_width("ab中de国g", 8) == [1, 2, 4, 5, 6, 8, 9]
    assert accumulate_text_width("ab\tdefg", 8) == [1, 2, 8, 9, 10, 11, 12]
    assert accumulate_text_width("ab中\te国g", 8) == [1, 2, 4, 8, 9, 11, 12]


def test_accumulate_text_width_empty():
    assert accumulate_text_width("", 8) == []


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("abc", 10, (0, 3)),
        ("a\tbc", 8, (0, 10)),
        ("a\tb\tc", 10, (0, 17)),
        ("a\t中b\tc", 8, (0, 17)),
        ("a\t中b\tc012345", 8, (0, 23)),
    ],
)
def test_reshape_string(text, width, expected):
    assert reshape_string(text, width, 0, 0, 8) == expected


def test_reshape_string_empty():
    assert reshape_string("", 10, 0, 0, 8) == (0, 0)


def test_reshape_string_shift_keeps_within_text():
    text = "x" * 40 + "MM"
    shift, full = reshape_string(text, 10, 40, 42, 8)
    assert full == 42
    assert 0 <= shift <= full - 10
    assert shift + 10 >= 42


def test_escape_single_quote():
    assert escape_single_quote("'a'\0") == "'\\''a'\\''\\0"


def test_escape_single_quote_plain_text_unchanged():
    assert escape_single_quote("abc def") == "abc def"


def test_atoi_unsigned():
    assert atoi("") is None
    assert atoi("1") == 1
    assert atoi("8589934592") == 8589934592
    assert atoi("a1") == 1
    assert atoi("1b") == 1
    assert atoi("a1b") == 1
    assert atoi("-1") is None


def test_atoi_signed_32():
    assert atoi("a-1b", signed=True, bits=32) == -1
    assert atoi("8589934592", signed=True, bits=32) is None
    assert atoi("+'123'", signed=True, bits=32) == 123


@pytest.mark.parametrize("cmd", ["{}", "echo {}", "{1..}", "{+}", "{ }", "{-1}"])
def test_depends_on_items_true(cmd):
    assert depends_on_items(cmd) is True


@pytest.mark.parametrize("cmd", ["echo hi", "{q}", "{cq}", "{n}", ""])
def test_depends_on_items_false(cmd):
    assert depends_on_items(cmd) is False


def test_str_lines():
    assert str_lines("a\nb\n\n  ") == ["a", "b"]
    assert str_lines("single") == ["single"]