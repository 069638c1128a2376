"""Common type aliases for block structures."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .abstract_block import AbstractBlock  # noqa: F401


LineList = list[str]
SubList = list[str]
AttributeMap = dict[str, Any]
BlockList = list["AbstractBlock"]
Source = Union[str, Sequence[str]]
