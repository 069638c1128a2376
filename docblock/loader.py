"""Build block trees from structured definition files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml  # type: ignore[import-untyped]

from .abstract_block import AbstractBlock
from .block import Block, BlockOptions
from .content_model import ContentModel
from .document import Document
from .json_utils import json_loads
from .substitutors import SubstitutionPipeline

logger = logging.getLogger(__name__)

# Types for definition mappings.
JSONDict = Dict[str, Any]

# Keys holding block metadata that live on the supertype, not in options.
_NODE_KEYS = ("style", "id", "title")


class DefinitionError(ValueError):
    """Raised when a block definition cannot be turned into a block."""


def load_definition(path: Path) -> JSONDict:
    """Read a block definition file from ``path``.

    Args:
        path: Location of the JSON or YAML definition.

    Returns:
        Parsed definition mapping.

    Throws:
        DefinitionError: If the file does not hold a mapping.
    """

    text = path.read_text(encoding="utf-8")

    # Decode JSON or YAML depending on file extension.
    if path.suffix == ".json":
        data = json_loads(text)
    else:
        data = yaml.safe_load(text)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DefinitionError(f"{path}: expected a mapping at the top level")
    return data


def _is_string_list(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _build_block(
    parent: AbstractBlock, data: Any, where: str  # noqa: ANN401
) -> Block:
    """Create a block from ``data`` and append it to ``parent``.

    Args:
        parent: Block receiving the new child.
        data: Definition mapping of the block.
        where: Location of the definition, used in error messages.

    Returns:
        The appended block, with its children built recursively.
    """

    if not isinstance(data, dict):
        raise DefinitionError(f"{where}: block definition must be a mapping")

    context = data.get("context")
    if not context:
        raise DefinitionError(f"{where}: missing block context")

    try:
        content_model = ContentModel.parse(data.get("content_model"))
    except ValueError as exc:
        raise DefinitionError(
            f"{where}: unknown content model {data.get('content_model')!r}"
        ) from exc

    attributes = data.get("attributes")
    if attributes is not None and not isinstance(attributes, dict):
        raise DefinitionError(f"{where}: attributes must be a mapping")

    subs = data.get("subs")
    if subs is not None and not (
        isinstance(subs, str) or _is_string_list(subs)
    ):
        raise DefinitionError(
            f"{where}: subs must be a name or a list of names"
        )

    source = data.get("source")
    if source is not None and not (
        isinstance(source, str) or _is_string_list(source)
    ):
        raise DefinitionError(
            f"{where}: source must be a string or a list of lines"
        )

    opts = BlockOptions(
        content_model=content_model,
        attributes=attributes,
        subs=subs,
        source=source,
    )

    block = Block(parent, str(context), opts)
    for key in _NODE_KEYS:
        if data.get(key) is not None:
            setattr(block, key, str(data[key]))
    parent.append(block)

    children = data.get("blocks") or []
    if children and block.content_model is not ContentModel.COMPOUND:
        # Children of non-compound blocks never contribute to the content.
        logger.warning(
            f"{where}: {block.content_model.value} block {context!r} "
            f"has {len(children)} nested blocks that will not be rendered"
        )
    for idx, child in enumerate(children):
        _build_block(block, child, f"{where}.blocks[{idx}]")

    return block


def build_document(
    data: JSONDict, substitutor: SubstitutionPipeline | None = None
) -> Document:
    """Create a document and its block tree from a definition mapping.

    Args:
        data: Mapping with optional ``attributes`` and ``blocks`` keys.
        substitutor: Substitution pipeline for the document.

    Returns:
        The populated ``Document``.
    """

    doc = Document(attributes=data.get("attributes"), substitutor=substitutor)
    for idx, block_data in enumerate(data.get("blocks") or []):
        _build_block(doc, block_data, f"blocks[{idx}]")

    logger.debug(f"Built document with {len(doc.blocks)} top-level blocks")
    return doc


def load_document(
    path: Path, substitutor: SubstitutionPipeline | None = None
) -> Document:
    """Read ``path`` and build the document it defines."""
    return build_document(load_definition(path), substitutor)


def block_to_dict(block: AbstractBlock) -> JSONDict:
    """Export ``block`` and its children as plain data.

    Args:
        block: Block to export.

    Returns:
        Mapping with the block metadata, raw source and rendered content.
    """

    source = block.source() if isinstance(block, Block) else ""
    subs = list(block.subs) if isinstance(block, Block) else []
    return {
        "context": block.context,
        "content_model": block.content_model.value,
        "style": block.style,
        "id": block.id,
        "title": block.title,
        "attributes": dict(block.attributes),
        "subs": subs,
        "source": source,
        "content": block.content(),
        "blocks": [block_to_dict(child) for child in block.blocks],
    }


def document_to_dict(doc: Document) -> JSONDict:
    """Export a document as plain data suitable for JSON or YAML."""

    return {
        "attributes": dict(doc.attributes),
        "content": doc.render(),
        "blocks": [block_to_dict(block) for block in doc.blocks],
    }
