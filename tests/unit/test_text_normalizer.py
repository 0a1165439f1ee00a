"""Unit tests for markup stripping and whitespace normalization."""

import pytest

from domain.parsers.text import normalize


@pytest.mark.parametrize("raw", ["", None])
def test_empty_input_gives_empty_string(raw):
    assert normalize(raw) == ""


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("<p>Hello <b>world</b></p>", "Hello world"),
        ("<!-- note -->text", "text"),
        ("before <div class='x'", "before"),
        ("<br/>a<br>b", "ab"),
    ],
)
def test_strips_tags(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["1 < n < 10", "a <= b", "x<5", "if a<=b then", "a < b > c"],
)
def test_keeps_inequalities(raw):
    assert normalize(raw) == raw


def test_collapses_horizontal_whitespace():
    assert normalize("a   \t  b") == "a b"


def test_trims_each_line():
    assert normalize("  first line  \n\t second line\t") == "first line\nsecond line"


def test_collapses_blank_lines_to_one_paragraph_break():
    assert normalize("para one\n\n\n\n\npara two") == "para one\n\npara two"
    assert normalize("para one\n \n\t\n \npara two") == "para one\n\npara two"


def test_keeps_single_paragraph_break():
    assert normalize("a\n\nb") == "a\n\nb"


def test_normalizes_carriage_returns():
    assert normalize("a\r\nb\rc") == "a\nb\nc"


def test_trims_whole_result():
    assert normalize("\n\n  <p> text </p>  \n\n") == "text"
