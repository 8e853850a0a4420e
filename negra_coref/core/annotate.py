"""Per-token coreference annotation."""

from __future__ import annotations

import logging
from typing import Dict, List

from ..errors import UnresolvedReferenceError
from .models import AnnotatedSentence, AnnotatedToken, CorefLink, Directive, Node
from .store import SpanStore
from .tree import SentenceTree

logger = logging.getLogger(__name__)


def resolve_directive(directive: Directive, store: SpanStore) -> CorefLink:
    span = store.resolve(directive.target_sentence_id, directive.target_node_id)
    return CorefLink(sentence_id=directive.target_sentence_id, span=span)


def annotate_token(
    tree: SentenceTree,
    terminal: Node,
    directives: Dict[int, List[Directive]],
    store: SpanStore,
) -> AnnotatedToken:
    """
    Collect the links of every directive dominating `terminal`.

    Nodes are visited from the terminal upwards; a node's own directives
    keep their comment order. Links are not deduplicated.
    """

    token = AnnotatedToken(terminal=terminal)
    for node in tree.ancestors(terminal.node_id):
        for directive in directives.get(node.node_id, ()):
            try:
                token.links.append(resolve_directive(directive, store))
            except UnresolvedReferenceError as exc:
                raise UnresolvedReferenceError(
                    f"Cannot resolve {directive.relation} reference to "
                    f"{directive.target_sentence_id}:{directive.target_node_id}: {exc.message}",
                    sentence_id=tree.sentence_id,
                    node_id=node.node_id,
                    line_number=node.line_number,
                ) from exc
    return token


def annotate_sentence(
    tree: SentenceTree,
    directives: Dict[int, List[Directive]],
    store: SpanStore,
) -> AnnotatedSentence:
    annotated = AnnotatedSentence(sentence_id=tree.sentence_id)
    for terminal in tree.terminals:
        annotated.tokens.append(annotate_token(tree, terminal, directives, store))
    if annotated.link_count:
        logger.debug("Sentence %d: %d coreference links", tree.sentence_id, annotated.link_count)
    return annotated
