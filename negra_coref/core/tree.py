"""Tree assembly and span computation for a single sentence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from ..errors import DuplicateKeyError, StructureError
from .models import ROOT_ID, Node, Sentence, Span
from .store import SpanStore

logger = logging.getLogger(__name__)


@dataclass
class SentenceTree:
    """
    Arena of a sentence's nodes indexed by node id.

    `children` and `spans` include the virtual root (id 0), which has no
    entry in `nodes`.
    """

    sentence: Sentence
    nodes: Dict[int, Node] = field(default_factory=dict)
    children: Dict[int, List[int]] = field(default_factory=dict)
    spans: Dict[int, Span] = field(default_factory=dict)

    @property
    def sentence_id(self) -> int:
        return self.sentence.sentence_id

    @property
    def terminals(self) -> List[Node]:
        return self.sentence.terminals

    def span(self, node_id: int) -> Span:
        return self.spans[node_id]

    def ancestors(self, node_id: int) -> Iterator[Node]:
        """Yield the node itself, then each parent up to the top node."""

        while node_id != ROOT_ID:
            node = self.nodes[node_id]
            yield node
            node_id = node.parent_id

    def register(self, store: SpanStore) -> None:
        """Insert every node span, virtual root included, into `store`."""

        for node_id, span in self.spans.items():
            store.insert(self.sentence_id, node_id, span)


def build_tree(sentence: Sentence) -> SentenceTree:
    """Index the sentence's nodes, validate parent links and compute spans."""

    tree = SentenceTree(sentence=sentence)
    sid = sentence.sentence_id

    for node in sentence.nodes:
        if node.node_id == ROOT_ID or node.node_id in tree.nodes:
            raise DuplicateKeyError(
                "Node id used twice in sentence",
                sentence_id=sid,
                node_id=node.node_id,
                line_number=node.line_number,
            )
        tree.nodes[node.node_id] = node

    tree.children[ROOT_ID] = []
    for node_id in tree.nodes:
        tree.children[node_id] = []
    for node in sentence.nodes:
        if node.parent_id not in tree.children:
            raise StructureError(
                f"Unknown parent id {node.parent_id}",
                sentence_id=sid,
                node_id=node.node_id,
                line_number=node.line_number,
            )
        parent = tree.nodes.get(node.parent_id)
        if parent is not None and parent.is_terminal:
            raise StructureError(
                f"Parent id {node.parent_id} is a terminal",
                sentence_id=sid,
                node_id=node.node_id,
                line_number=node.line_number,
            )
        tree.children[node.parent_id].append(node.node_id)

    _check_acyclic(tree)
    _compute_spans(tree)
    logger.debug("Built tree for sentence %d with %d nodes", sid, len(tree.nodes))
    return tree


def _check_acyclic(tree: SentenceTree) -> None:
    limit = len(tree.nodes)
    for start in tree.nodes:
        node_id = start
        steps = 0
        while node_id != ROOT_ID:
            if steps > limit:
                raise StructureError(
                    "Cyclic parent chain",
                    sentence_id=tree.sentence_id,
                    node_id=start,
                    line_number=tree.nodes[start].line_number,
                )
            node_id = tree.nodes[node_id].parent_id
            steps += 1


def _compute_spans(tree: SentenceTree) -> None:
    # iterative post-order from the virtual root
    stack = [(ROOT_ID, False)]
    while stack:
        node_id, expanded = stack.pop()
        if not expanded:
            stack.append((node_id, True))
            for child in tree.children[node_id]:
                stack.append((child, False))
            continue

        node = tree.nodes.get(node_id)
        if node is not None and node.is_terminal:
            tree.spans[node_id] = (node.index,)
        else:
            indices: List[int] = []
            for child in tree.children[node_id]:
                indices.extend(tree.spans[child])
            tree.spans[node_id] = tuple(sorted(indices))
