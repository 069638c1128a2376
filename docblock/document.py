"""Root of a block tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .abstract_block import AbstractBlock
from .converter import ContentConverter, Converter
from .substitutors import SubstitutionPipeline, Substitutor


class Document(AbstractBlock):
    """Compound root block owning the substitution pipeline and converter.

    Attributes:
        substitutor: Pipeline used by every block in the tree.
        converter: Converter used when aggregating compound content.
    """

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        substitutor: SubstitutionPipeline | None = None,
        converter: Converter | None = None,
    ) -> None:
        super().__init__(None, "document")
        self.document = self
        self.attributes = dict(attributes or {})
        self.substitutor: SubstitutionPipeline = (
            substitutor if substitutor is not None else Substitutor()
        )
        self.converter: Converter = (
            converter if converter is not None else ContentConverter()
        )

    def render(self) -> str:
        """Return the aggregated content of all top-level blocks."""
        return self.content() or ""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}@{id(self)} "
            f"{{ attributes: {len(self.attributes)}, "
            f"blocks: {len(self.blocks)} }}"
        )
