"""Tests for string operations."""

import re

import pytest

from seqkit.strings import repeat, split


@pytest.mark.parametrize(
    "string, n, expected",
    [
        ("ab", 3, "ababab"),
        ("x", 0, ""),
        ("x", -2, ""),
        ("x", 1, "x"),
        ("", 5, ""),
    ],
)
def test_repeat(string, n, expected):
    assert repeat(string, n) == expected


def test_repeat_defaults():
    assert repeat() == ""
    assert repeat("abc") == "abc"


def test_repeat_invalid_types():
    with pytest.raises(TypeError, match="string must be a str"):
        repeat(5, 2)
    with pytest.raises(TypeError, match="n must be an integer"):
        repeat("a", 2.0)


@pytest.mark.parametrize(
    "string, separator, limit, expected",
    [
        ("a,b,c", ",", None, ["a", "b", "c"]),
        ("a,b,c", ",", 2, ["a", "b"]),
        ("a,b", ",", 5, ["a", "b"]),
        ("a,b", ",", 0, []),
        ("a,b", ",", -1, []),
        ("a-b_c", re.compile(r"[-_]"), None, ["a", "b", "c"]),
        ("a1b2c", re.compile(r"(\d)"), 3, ["a", "1", "b"]),
        ("abc", "", None, ["a", "b", "c"]),
        ("abc", "", 2, ["a", "b"]),
        ("  a  b ", None, None, ["a", "b"]),
        ("a,,b", ",", None, ["a", "", "b"]),
        ("", ",", None, [""]),
        ("", "", None, []),
    ],
)
def test_split(string, separator, limit, expected):
    assert split(string, separator, limit) == expected


def test_split_defaults():
    assert split() == []
    assert split("one two") == ["one", "two"]


def test_split_invalid_separator():
    with pytest.raises(TypeError, match="separator must be"):
        split("a,b", 1)


def test_split_invalid_limit():
    with pytest.raises(TypeError, match="limit must be an integer"):
        split("a,b", ",", "2")


def test_split_without_separator_splits_on_whitespace():
    assert split("one") == ["one"]
    assert split(" one\ttwo\n") == ["one", "two"]
    assert split("   ") == []
