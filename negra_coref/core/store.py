"""Corpus-wide store of node spans."""

from __future__ import annotations

from typing import Dict, Set, Tuple

from ..errors import DuplicateKeyError, UnresolvedReferenceError
from .models import Span


class SpanStore:
    """
    Append-only mapping of `(sentence_id, node_id)` to the node's span.

    Entries live for the whole run: any later sentence may point back at
    any earlier node, so nothing is evicted.
    """

    def __init__(self) -> None:
        self._spans: Dict[Tuple[int, int], Span] = {}
        self._sentences: Set[int] = set()

    def insert(self, sentence_id: int, node_id: int, span: Span) -> None:
        key = (sentence_id, node_id)
        if key in self._spans:
            raise DuplicateKeyError(
                "Span already registered",
                sentence_id=sentence_id,
                node_id=node_id,
            )
        self._spans[key] = span
        self._sentences.add(sentence_id)

    def resolve(self, sentence_id: int, node_id: int) -> Span:
        try:
            return self._spans[(sentence_id, node_id)]
        except KeyError:
            if sentence_id in self._sentences:
                reason = "No such node in sentence"
            else:
                reason = "Sentence not read yet (forward reference or unknown sentence)"
            raise UnresolvedReferenceError(
                reason,
                sentence_id=sentence_id,
                node_id=node_id,
            ) from None

    def __contains__(self, key: Tuple[int, int]) -> bool:
        return key in self._spans

    def __len__(self) -> int:
        return len(self._spans)

    @property
    def sentence_count(self) -> int:
        return len(self._sentences)
