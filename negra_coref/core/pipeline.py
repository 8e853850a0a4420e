"""Export-to-CoNLL conversion pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, TextIO

from pydantic import BaseModel, Field

from ..errors import ConversionError
from ..utils.config import ConfigManager
from .annotate import annotate_sentence
from .coref import extract_directives
from .export import ExportReader
from .models import AnnotatedSentence, Sentence
from .store import SpanStore
from .tree import build_tree
from .writer import ConllWriter

logger = logging.getLogger(__name__)


class ConversionConfig(BaseModel):
    """Validated settings for one conversion run."""

    encoding: str = "utf-8"
    format_version: int = Field(default=4, ge=3, le=4, description="Export format used when the file has no #FORMAT line")
    relations: List[str] = Field(default_factory=lambda: ["coreferential"], min_length=1)
    empty_marker: str = Field(default="_", min_length=1)
    keep_comments: bool = Field(default=False, description="Append each token's export comment to the coreference column")

    @classmethod
    def from_manager(cls, manager: ConfigManager) -> "ConversionConfig":
        return cls(
            encoding=manager.get("reader.encoding", "utf-8"),
            format_version=manager.get("reader.format_version", 4),
            relations=manager.get("coref.relations", ["coreferential"]),
            empty_marker=manager.get("writer.empty_marker", "_"),
            keep_comments=manager.get("writer.keep_comments", False),
        )


@dataclass
class ConversionStats:
    sentences: int = 0
    tokens: int = 0
    links: int = 0
    directives: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "sentences": self.sentences,
            "tokens": self.tokens,
            "links": self.links,
            "directives": self.directives,
        }


@dataclass
class ConversionPipeline:
    """
    Single forward pass over an export corpus.

    Per sentence:
    1. Build the tree and compute node spans
    2. Register all spans in the store
    3. Extract directives from node comments
    4. Resolve directives for every token against the store

    The store outlives the sentences, since any later sentence may refer
    back to any earlier node. Sentence order is therefore significant.
    """

    config: ConversionConfig = field(default_factory=ConversionConfig)
    store: SpanStore = field(default_factory=SpanStore)
    stats: ConversionStats = field(default_factory=ConversionStats)

    def process_sentence(self, sentence: Sentence) -> AnnotatedSentence:
        tree = build_tree(sentence)
        tree.register(self.store)
        directives = extract_directives(tree, self.config.relations)
        annotated = annotate_sentence(tree, directives, self.store)

        self.stats.sentences += 1
        self.stats.tokens += len(annotated.tokens)
        self.stats.links += annotated.link_count
        self.stats.directives += sum(len(found) for found in directives.values())
        return annotated

    def annotate(self, sentences: Iterable[Sentence]) -> Iterator[AnnotatedSentence]:
        """Lazily annotate a sentence stream, in order."""

        for sentence in sentences:
            try:
                yield self.process_sentence(sentence)
            except ConversionError as exc:
                logger.error(f"Conversion stopped at sentence {sentence.sentence_id}: {exc}")
                raise

    def convert(self, lines: Iterable[str], output: TextIO) -> ConversionStats:
        """Read export lines and write the annotated tokens to `output`."""

        reader = ExportReader(lines, self.config.format_version)
        writer = ConllWriter(
            output,
            empty_marker=self.config.empty_marker,
            keep_comments=self.config.keep_comments,
        )
        for annotated in self.annotate(reader):
            writer.write_sentence(annotated)

        logger.info(
            f"Converted {self.stats.sentences} sentences, {self.stats.tokens} tokens, "
            f"{self.stats.links} coreference links"
        )
        return self.stats

    def convert_file(self, input_path: Path, output: TextIO) -> ConversionStats:
        with open(input_path, "r", encoding=self.config.encoding) as f:
            return self.convert(f, output)


def convert_text(text: str, config: Optional[ConversionConfig] = None) -> str:
    """Convert a whole export document held in memory; mainly for tests and scripting."""

    output = StringIO()
    ConversionPipeline(config or ConversionConfig()).convert(text.splitlines(), output)
    return output.getvalue()
