"""Block model for document-conversion pipelines."""

from .abstract_block import AbstractBlock
from .block import Block, BlockOptions
from .content_model import ContentModel
from .converter import ContentConverter
from .document import Document
from .helpers import EOL, normalize_lines_from_string
from .substitutors import Substitutor

__all__ = [
    "AbstractBlock",
    "Block",
    "BlockOptions",
    "ContentConverter",
    "ContentModel",
    "Document",
    "EOL",
    "Substitutor",
    "normalize_lines_from_string",
]
