"""Tests for line normalization helpers."""

from docblock import helpers


def test_splits_on_line_feed() -> None:
    assert helpers.normalize_lines_from_string("a\nb\nc") == ["a", "b", "c"]


def test_splits_on_crlf_and_lone_cr() -> None:
    """Mixed terminators produce the same lines as plain line feeds."""

    mixed = helpers.normalize_lines_from_string("a\r\nb\nc\rd")
    assert mixed == ["a", "b", "c", "d"]


def test_trailing_terminator_adds_no_line() -> None:
    assert helpers.normalize_lines_from_string("a\nb\n") == ["a", "b"]
    assert helpers.normalize_lines_from_string("a\r\n") == ["a"]
    assert helpers.normalize_lines_from_string("\n") == [""]


def test_interior_and_leading_blank_lines_are_kept() -> None:
    lines = helpers.normalize_lines_from_string("\n  \na\n\nb")
    assert lines == ["", "  ", "a", "", "b"]


def test_byte_order_mark_is_dropped() -> None:
    assert helpers.normalize_lines_from_string("\ufeffa\nb") == ["a", "b"]
    assert helpers.normalize_lines_from_string("\ufeff") == []


def test_empty_input_yields_no_lines() -> None:
    assert helpers.normalize_lines_from_string("") == []
    assert helpers.normalize_lines_from_string(None) == []


def test_trailing_whitespace_is_preserved() -> None:
    assert helpers.normalize_lines_from_string("a  \r\n b") == ["a  ", " b"]


def test_is_blank() -> None:
    assert helpers.is_blank("")
    assert helpers.is_blank(" \t ")
    assert not helpers.is_blank(" x ")
