"""Supertype shared by blocks and documents."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, overload

from .content_model import ContentModel
from .helpers import EOL
from .types import AttributeMap, BlockList, LineList, Source

if TYPE_CHECKING:
    from .document import Document


class AbstractBlock:
    """Node of the block tree.

    Holds the links to the parent and owning document, the child blocks used
    by compound content and the metadata shared by every kind of block.

    Attributes:
        parent: Enclosing block, ``None`` for the document root.
        document: Document owning the tree, ``None`` for detached blocks.
        context: Tag naming the kind of block, such as ``"paragraph"``.
        blocks: Ordered child blocks.
        attributes: Per-block metadata.
        style: Block style, if any.
        id: Block identifier, if any.
        title: Block title, if any.
    """

    def __init__(self, parent: AbstractBlock | None, context: str) -> None:
        self.parent = parent
        self.document: Document | None = parent.document if parent else None
        self.context = context
        self.blocks: BlockList = []
        self.attributes: AttributeMap = {}
        self.style: str | None = None
        self.id: str | None = None
        self.title: str | None = None
        self._content_model = ContentModel.COMPOUND

    @property
    def content_model(self) -> ContentModel:
        return self._content_model

    @property
    def node_name(self) -> str:
        return self.context

    def attr(self, name: str, default: Any = None) -> Any:  # noqa: ANN401
        """Return attribute ``name`` of this block or ``default``."""
        return self.attributes.get(name, default)

    def has_blocks(self) -> bool:
        return bool(self.blocks)

    def append(self, block: AbstractBlock) -> AbstractBlock:
        """Attach ``block`` as the last child of this block.

        Args:
            block: Child to append; its parent and document are updated.

        Returns:
            The appended block.
        """

        block.parent = self
        block.document = self.document
        self.blocks.append(block)
        return block

    def convert(self) -> str | None:
        """Return the output of this block using the document's converter."""

        # Detached blocks have no converter to hand off to.
        if self.document is None:
            return self.content()
        return self.document.converter.convert(self)

    def content(self) -> str | None:
        """Aggregate the output of the child blocks.

        Returns:
            Converted children joined with :data:`~docblock.helpers.EOL`,
            skipping children without content.
        """

        results = [block.convert() for block in self.blocks]
        return EOL.join(result for result in results if result is not None)

    @overload
    def apply_subs(self, source: str, subs: Sequence[str]) -> str: ...

    @overload
    def apply_subs(
        self, source: Sequence[str], subs: Sequence[str]
    ) -> LineList: ...

    def apply_subs(
        self, source: Source, subs: Sequence[str]
    ) -> str | LineList:
        """Run ``source`` through the document's substitution pipeline.

        Args:
            source: Joined text or a sequence of lines.
            subs: Substitution names in application order.

        Returns:
            Substituted text of the same shape as ``source``. Without a
            document the source is returned unchanged, lines as a new list.
        """

        if self.document is None:
            return source if isinstance(source, str) else list(source)
        return self.document.substitutor(source, subs)
