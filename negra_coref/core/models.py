"""Core data models for export-to-CoNLL conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

# Terminal indices dominated by a node, ascending.
Span = Tuple[int, ...]

# Parent id of top-level nodes; also the id of the virtual root.
ROOT_ID = 0


class NodeKind(str, Enum):
    TERMINAL = "terminal"
    NONTERMINAL = "nonterminal"


@dataclass(slots=True)
class Node:
    """
    A single tree node read from an export line.

    Terminals and nonterminals share this record; `kind` tells them apart.
    For terminals `label` is the word form, for nonterminals the category.
    """

    node_id: int
    kind: NodeKind
    label: str
    edge: str
    parent_id: int
    morph: str = "--"
    comment: Optional[str] = None
    line_number: Optional[int] = None
    # terminal-only
    index: Optional[int] = None
    lemma: Optional[str] = None
    tag: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind is NodeKind.TERMINAL


@dataclass(slots=True)
class Sentence:
    """One `#BOS ... #EOS` block."""

    sentence_id: int
    terminals: List[Node] = field(default_factory=list)
    nonterminals: List[Node] = field(default_factory=list)
    comment: Optional[str] = None
    line_number: Optional[int] = None

    @property
    def nodes(self) -> List[Node]:
        return self.terminals + self.nonterminals


@dataclass(frozen=True, slots=True)
class Directive:
    """Coreference link from a node to an antecedent node."""

    source_node_id: int
    relation: str
    target_sentence_id: int
    target_node_id: int


@dataclass(frozen=True, slots=True)
class CorefLink:
    """A resolved directive: antecedent sentence and the span it dominates."""

    sentence_id: int
    span: Span


@dataclass(slots=True)
class AnnotatedToken:
    terminal: Node
    links: List[CorefLink] = field(default_factory=list)


@dataclass(slots=True)
class AnnotatedSentence:
    sentence_id: int
    tokens: List[AnnotatedToken] = field(default_factory=list)

    @property
    def link_count(self) -> int:
        return sum(len(token.links) for token in self.tokens)
