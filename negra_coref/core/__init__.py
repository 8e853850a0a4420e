"""
Conversion stages: export reading, tree building, coreference resolution, output
"""

from .models import AnnotatedSentence, AnnotatedToken, CorefLink, Directive, Node, NodeKind, Sentence
from .export import ExportReader, read_sentences
from .tree import SentenceTree, build_tree
from .coref import extract_directives, parse_comment
from .store import SpanStore
from .annotate import annotate_sentence
from .writer import ConllWriter, format_links
from .pipeline import ConversionConfig, ConversionPipeline, convert_text

__all__ = [
    "AnnotatedSentence",
    "AnnotatedToken",
    "CorefLink",
    "Directive",
    "Node",
    "NodeKind",
    "Sentence",
    "ExportReader",
    "read_sentences",
    "SentenceTree",
    "build_tree",
    "extract_directives",
    "parse_comment",
    "SpanStore",
    "annotate_sentence",
    "ConllWriter",
    "format_links",
    "ConversionConfig",
    "ConversionPipeline",
    "convert_text",
]
