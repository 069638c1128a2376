"""Content models controlling how block lines become rendered content."""

from __future__ import annotations

from enum import Enum


class ContentModel(Enum):
    """Closed set of content-handling policies for a block.

    Attributes:
        COMPOUND: Content comes from nested child blocks.
        SIMPLE: Lines form one logical paragraph and are substituted joined.
        VERBATIM: Line structure is preserved, surrounding blank lines are
            trimmed.
        RAW: Same line handling as ``VERBATIM`` for passthrough content.
        EMPTY: The block has no content.
    """

    COMPOUND = "compound"
    SIMPLE = "simple"
    VERBATIM = "verbatim"
    RAW = "raw"
    EMPTY = "empty"

    @classmethod
    def parse(cls, value: ContentModel | str | None) -> ContentModel:
        """Convert ``value`` to a content model.

        Args:
            value: Existing member, member value such as ``"verbatim"`` or
                ``None`` for the default.

        Returns:
            The matching member; ``SIMPLE`` when ``value`` is ``None``.

        Raises:
            ValueError: If ``value`` names no content model.
        """

        if value is None:
            return cls.SIMPLE
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    @property
    def line_oriented(self) -> bool:
        """Whether substitutions run on the line sequence, not joined text."""
        return self in (ContentModel.VERBATIM, ContentModel.RAW)
