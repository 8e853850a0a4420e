"""Extraction of coreference directives from node comments."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import ParseError
from .models import Directive, Node
from .tree import SentenceTree

DEFAULT_RELATIONS = ("coreferential",)

_REFERENCE_RE = re.compile(r"^R=(?P<relation>[A-Za-z_-]+)\.(?P<target>.*)$")
_TARGET_RE = re.compile(r"^(?P<sentence>\d+):(?P<node>\d+)$")


def parse_comment(
    comment: Optional[str],
    relations: Iterable[str] = DEFAULT_RELATIONS,
) -> List[Tuple[str, int, int]]:
    """
    Return `(relation, sentence_id, node_id)` for each reference in a comment.

    A comment is split on whitespace and every `R=<relation>.<sid>:<nid>`
    part with a wanted relation counts, in order of appearance. Text that
    is not a reference is ignored. A wanted relation with a malformed
    target raises ValueError.
    """

    if not comment:
        return []
    wanted = set(relations)
    references = []
    for part in comment.split():
        match = _REFERENCE_RE.match(part)
        if not match or match.group("relation") not in wanted:
            continue
        target = _TARGET_RE.match(match.group("target"))
        if not target:
            raise ValueError(f"Malformed reference {part!r}, expected R=relation.sentence_id:node_id")
        references.append((match.group("relation"), int(target.group("sentence")), int(target.group("node"))))
    return references


def node_directives(node: Node, sentence_id: int, relations: Iterable[str] = DEFAULT_RELATIONS) -> List[Directive]:
    try:
        references = parse_comment(node.comment, relations)
    except ValueError as exc:
        raise ParseError(str(exc), sentence_id=sentence_id, node_id=node.node_id, line_number=node.line_number) from exc
    return [
        Directive(
            source_node_id=node.node_id,
            relation=relation,
            target_sentence_id=target_sentence,
            target_node_id=target_node,
        )
        for relation, target_sentence, target_node in references
    ]


def extract_directives(
    tree: SentenceTree,
    relations: Iterable[str] = DEFAULT_RELATIONS,
) -> Dict[int, List[Directive]]:
    """Map node id to the directives in that node's comment (nodes without any are left out)."""

    relations = tuple(relations)
    directives: Dict[int, List[Directive]] = {}
    for node_id, node in tree.nodes.items():
        found = node_directives(node, tree.sentence_id, relations)
        if found:
            directives[node_id] = found
    return directives
