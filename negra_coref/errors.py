"""Exceptions raised while converting an export corpus."""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """
    Base class for every fatal conversion error.

    Carries enough context (sentence id, node id, line number) to locate
    the offending input. Missing context is simply left out of the message.
    """

    def __init__(
        self,
        message: str,
        *,
        sentence_id: Optional[int] = None,
        node_id: Optional[int] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.message = message
        self.sentence_id = sentence_id
        self.node_id = node_id
        self.line_number = line_number
        super().__init__(self._render())

    def _render(self) -> str:
        context = []
        if self.line_number is not None:
            context.append(f"line {self.line_number}")
        if self.sentence_id is not None:
            context.append(f"sentence {self.sentence_id}")
        if self.node_id is not None:
            context.append(f"node {self.node_id}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class ParseError(ConversionError):
    """Malformed export line, bad integer field or missing sentence terminator."""


class StructureError(ConversionError):
    """Unknown parent id or cyclic parent chain inside a sentence."""


class UnresolvedReferenceError(ConversionError):
    """A directive points at a (sentence, node) pair not seen so far."""


class DuplicateKeyError(ConversionError):
    """A node id was registered twice."""
