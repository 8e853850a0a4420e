"""NEGRA export to CoNLL-X coreference converter."""

__version__ = "0.1.0"

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core import ConversionConfig, ConversionPipeline, SpanStore, convert_text
from .errors import (
    ConversionError,
    DuplicateKeyError,
    ParseError,
    StructureError,
    UnresolvedReferenceError,
)

__all__ = [
    "ConversionConfig",
    "ConversionPipeline",
    "SpanStore",
    "convert_text",
    "ConversionError",
    "DuplicateKeyError",
    "ParseError",
    "StructureError",
    "UnresolvedReferenceError",
]
