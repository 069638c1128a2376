"""Leaf and compound blocks holding raw source lines."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from attrs import define, field

from .abstract_block import AbstractBlock
from .content_model import ContentModel
from .helpers import EOL, is_blank, normalize_lines_from_string
from .types import AttributeMap, LineList, Source, SubList


def _attributes(value: Mapping[str, Any] | None) -> AttributeMap:
    return dict(value or {})


def _subs(value: Any) -> SubList:  # noqa: ANN401
    # A lone name is one substitution, not a sequence of letters.
    if isinstance(value, str):
        return [value] if value else []
    return list(value or [])


@define(slots=True)
class BlockOptions:
    """Options used to initialize a block.

    Attributes:
        content_model: How the lines are processed. Strings such as
            ``"verbatim"`` are accepted; unknown names raise ``ValueError``.
        attributes: Key/value metadata for the block.
        subs: Names of the substitutions to apply, in order.
        source: Raw source as a string or a sequence of lines.
    """

    content_model: ContentModel = field(
        default=ContentModel.SIMPLE, converter=ContentModel.parse
    )
    attributes: AttributeMap = field(factory=dict, converter=_attributes)
    subs: SubList = field(factory=list, converter=_subs)
    source: Source | None = None


BlockOptionsLike = Union[BlockOptions, Mapping[str, Any], None]

# Keys of an options mapping read by the block; others are ignored.
OPTION_KEYS = ("content_model", "attributes", "subs", "source")


class Block(AbstractBlock):
    """Block of content rendered from its source lines.

    Example:
        >>> opts = {"content_model": "verbatim", "source": "\\nx = 1\\n\\n"}
        >>> block = Block(None, "listing", opts)
        >>> block.lines
        ['', 'x = 1', '']
        >>> block.content()
        'x = 1'

    Attributes:
        lines: Raw source lines, owned by this block and mutable until the
            block is rendered.
        subs: Substitution names applied by :meth:`content`.
    """

    def __init__(
        self,
        parent: AbstractBlock | None,
        context: str,
        opts: BlockOptionsLike = None,
    ) -> None:
        super().__init__(parent, context)
        self.lines: LineList = []

        if opts is None:
            opts = BlockOptions()
        elif not isinstance(opts, BlockOptions):
            opts = BlockOptions(
                **{key: opts[key] for key in OPTION_KEYS if key in opts}
            )

        self._content_model = opts.content_model
        self.attributes = dict(opts.attributes)
        self.subs: SubList = list(opts.subs)

        raw_source = opts.source
        if isinstance(raw_source, str):
            self.lines = normalize_lines_from_string(raw_source)
        elif raw_source:
            self.lines = list(raw_source)

    @property
    def blockname(self) -> str:
        return self.context

    def content(self) -> str | None:
        """Return the block content with its substitutions applied.

        Returns:
            Rendered text, or ``None`` when the block has no content: always
            for ``EMPTY`` blocks, and for verbatim or raw blocks whose
            substituted lines are empty.
        """

        model = self._content_model
        if model is ContentModel.COMPOUND:
            return super().content()
        if model is ContentModel.SIMPLE:
            return self.apply_subs(EOL.join(self.lines), self.subs)
        if model.line_oriented:
            return self._verbatim_content()
        return None

    def _verbatim_content(self) -> str | None:
        result = self.apply_subs(list(self.lines), self.subs)
        if len(result) < 2:
            return result[0] if result else None

        # Trim surrounding blank lines, keep the interior ones.
        start = 0
        end = len(result)
        while start < end and is_blank(result[start]):
            start += 1
        while end > start and is_blank(result[end - 1]):
            end -= 1
        return EOL.join(result[start:end])

    def source(self) -> str:
        """Return the raw lines joined, without any substitution applied."""
        return EOL.join(self.lines)

    def __repr__(self) -> str:
        if self._content_model is ContentModel.COMPOUND:
            summary = f"blocks: {len(self.blocks)}"
        else:
            summary = f"lines: {len(self.lines)}"
        return (
            f"{type(self).__name__}@{id(self)} {{ "
            f"context: {self.context!r}, "
            f"content_model: {self._content_model.value!r}, "
            f"style: {self.style!r}, {summary} }}"
        )

    __str__ = __repr__
