"""Tests for the content model enumeration."""

import pytest

from docblock import ContentModel


def test_parse_accepts_names_and_members() -> None:
    assert ContentModel.parse("verbatim") is ContentModel.VERBATIM
    assert ContentModel.parse(" RAW ") is ContentModel.RAW
    assert ContentModel.parse(ContentModel.EMPTY) is ContentModel.EMPTY


def test_parse_defaults_to_simple() -> None:
    assert ContentModel.parse(None) is ContentModel.SIMPLE


def test_parse_rejects_unknown_models() -> None:
    with pytest.raises(ValueError):
        ContentModel.parse("pass")


def test_line_oriented_models() -> None:
    oriented = {model for model in ContentModel if model.line_oriented}
    assert oriented == {ContentModel.VERBATIM, ContentModel.RAW}
