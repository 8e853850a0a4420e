"""CoNLL-X style output with a trailing coreference column."""

from __future__ import annotations

from typing import Iterable, List, Optional, TextIO

from .models import AnnotatedSentence, AnnotatedToken, CorefLink

EMPTY = "_"


def format_links(links: Iterable[CorefLink]) -> Optional[str]:
    """Render links as `coref:[(sid,[i,j]),...]|`, or None when there are none."""

    pairs = [
        f"({link.sentence_id},[{','.join(str(index) for index in sorted(link.span))}])"
        for link in links
    ]
    if not pairs:
        return None
    return f"coref:[{','.join(pairs)}]|"


def _column(value: Optional[str]) -> str:
    if value is None or value in ("", "--"):
        return EMPTY
    return value


class ConllWriter:
    """Writes annotated sentences, one token per line and a blank line after each sentence."""

    def __init__(self, stream: TextIO, empty_marker: str = EMPTY, keep_comments: bool = False):
        self.stream = stream
        self.empty_marker = empty_marker
        self.keep_comments = keep_comments
        self.sentences_written = 0
        self.tokens_written = 0

    def format_token(self, position: int, token: AnnotatedToken) -> str:
        terminal = token.terminal
        coref = format_links(token.links) or ""
        if self.keep_comments and terminal.comment:
            coref += f"comment:{terminal.comment}|"
        columns: List[str] = [
            str(position),
            terminal.label,
            _column(terminal.lemma),
            _column(terminal.tag),
            _column(terminal.tag),
            _column(terminal.morph),
            EMPTY,
            _column(terminal.edge),
            EMPTY,
            EMPTY,
            coref or self.empty_marker,
        ]
        return "\t".join(columns)

    def write_sentence(self, sentence: AnnotatedSentence) -> None:
        # the whole block is formatted before anything is written
        lines = [self.format_token(position, token) for position, token in enumerate(sentence.tokens, start=1)]
        self.stream.write("".join(f"{line}\n" for line in lines) + "\n")
        self.sentences_written += 1
        self.tokens_written += len(lines)
