"""Converters turning blocks into their final output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .abstract_block import AbstractBlock


class Converter(Protocol):
    """Object producing the output of a single block."""

    def convert(self, node: AbstractBlock) -> str | None: ...


class ContentConverter:
    """Converter that outputs the block's rendered content unchanged."""

    def convert(self, node: AbstractBlock) -> str | None:
        return node.content()
