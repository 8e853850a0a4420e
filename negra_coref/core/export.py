"""Reader for NEGRA export files (format versions 3 and 4)."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ..errors import ParseError
from .models import Node, NodeKind, Sentence

logger = logging.getLogger(__name__)

DEFAULT_FORMAT_VERSION = 4
SUPPORTED_FORMAT_VERSIONS = (3, 4)

_FORMAT_RE = re.compile(r"^#FORMAT\s+(\S+)")
_BOT_RE = re.compile(r"^#BOT\b")
_EOT_RE = re.compile(r"^#EOT\b")
_BOS_RE = re.compile(r"^#BOS\s+(\S+)(.*)$")
_EOS_RE = re.compile(r"^#EOS(?:\s+(\S+))?")
# nonterminal ids run from 500 to 999; any other line is a terminal, even "#1"
_NONTERMINAL_RE = re.compile(r"^#[5-9]\d\d(?:\s|$)")

# Mandatory columns per line kind, excluding secondary edges and comment.
_COLUMNS = {
    (3, NodeKind.TERMINAL): ("form", "tag", "morph", "edge", "parent"),
    (4, NodeKind.TERMINAL): ("form", "lemma", "tag", "morph", "edge", "parent"),
    (3, NodeKind.NONTERMINAL): ("id", "cat", "morph", "edge", "parent"),
    (4, NodeKind.NONTERMINAL): ("id", "lemma", "cat", "morph", "edge", "parent"),
}


def split_comment(line: str) -> Tuple[str, Optional[str]]:
    """Split a line into its columns part and the trailing `%%` comment."""

    body, sep, comment = line.partition("%%")
    if not sep:
        return body, None
    comment = comment.strip()
    return body, comment or None


def _parse_int(value: str, what: str, line_number: int, sentence_id: Optional[int]) -> int:
    try:
        return int(value)
    except ValueError:
        raise ParseError(
            f"Expected integer {what}, got {value!r}",
            sentence_id=sentence_id,
            line_number=line_number,
        ) from None


class ExportReader:
    """
    Lazily turns export text into `Sentence` records.

    The reader consumes its line source once, front to back. A `#FORMAT`
    line in the file overrides the version given at construction.
    """

    def __init__(self, lines: Iterable[str], format_version: Optional[int] = None):
        self._lines = lines
        self.format_version = format_version or DEFAULT_FORMAT_VERSION
        if self.format_version not in SUPPORTED_FORMAT_VERSIONS:
            raise ParseError(f"Unsupported export format version {self.format_version}")

    def __iter__(self) -> Iterator[Sentence]:
        current: Optional[Sentence] = None
        in_table = False
        line_number = 0

        for line_number, raw in self._numbered_lines():
            line = raw.rstrip("\r\n")
            stripped = line.strip()

            if in_table:
                if _EOT_RE.match(stripped):
                    in_table = False
                continue

            if current is None:
                if not stripped or stripped.startswith("%%"):
                    continue
                if _FORMAT_RE.match(stripped):
                    self._set_format(stripped, line_number)
                elif _BOT_RE.match(stripped):
                    in_table = True
                elif _BOS_RE.match(stripped):
                    current = self._open_sentence(stripped, line_number)
                elif _EOS_RE.match(stripped):
                    raise ParseError("#EOS outside of a sentence", line_number=line_number)
                else:
                    raise ParseError(
                        f"Unexpected line outside of a sentence: {stripped[:40]!r}",
                        line_number=line_number,
                    )
                continue

            if not stripped or stripped.startswith("%%"):
                continue
            if _BOS_RE.match(stripped):
                raise ParseError(
                    "#BOS before the previous sentence was closed",
                    sentence_id=current.sentence_id,
                    line_number=line_number,
                )
            eos = _EOS_RE.match(stripped)
            if eos:
                self._close_sentence(current, eos.group(1), line_number)
                logger.debug(
                    "Read sentence %d (%d terminals, %d nonterminals)",
                    current.sentence_id,
                    len(current.terminals),
                    len(current.nonterminals),
                )
                yield current
                current = None
            elif _NONTERMINAL_RE.match(stripped):
                current.nonterminals.append(self._parse_node(line, NodeKind.NONTERMINAL, current, line_number))
            else:
                current.terminals.append(self._parse_node(line, NodeKind.TERMINAL, current, line_number))

        if current is not None:
            raise ParseError(
                "End of input before #EOS",
                sentence_id=current.sentence_id,
                line_number=line_number,
            )

    # ------------------------------------------------------------------
    # Internal helpers

    def _numbered_lines(self) -> Iterator[Tuple[int, str]]:
        lines = iter(self._lines)
        line_number = 0
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except UnicodeDecodeError as exc:
                # decoding happens in chunks, so the position is approximate
                raise ParseError(
                    f"Cannot decode input after line {line_number}: {exc.reason}",
                    line_number=line_number + 1,
                ) from exc
            line_number += 1
            yield line_number, raw

    def _set_format(self, line: str, line_number: int) -> None:
        value = _FORMAT_RE.match(line).group(1)
        version = _parse_int(value, "format version", line_number, None)
        if version not in SUPPORTED_FORMAT_VERSIONS:
            raise ParseError(f"Unsupported export format version {version}", line_number=line_number)
        self.format_version = version

    def _open_sentence(self, line: str, line_number: int) -> Sentence:
        match = _BOS_RE.match(line)
        sentence_id = _parse_int(match.group(1), "sentence id", line_number, None)
        if sentence_id < 0:
            raise ParseError("Negative sentence id", sentence_id=sentence_id, line_number=line_number)
        _, comment = split_comment(match.group(2))
        return Sentence(sentence_id=sentence_id, comment=comment, line_number=line_number)

    def _close_sentence(self, sentence: Sentence, raw_id: Optional[str], line_number: int) -> None:
        if raw_id is None:
            return
        eos_id = _parse_int(raw_id, "sentence id", line_number, sentence.sentence_id)
        if eos_id != sentence.sentence_id:
            raise ParseError(
                f"#EOS {eos_id} does not match #BOS {sentence.sentence_id}",
                sentence_id=sentence.sentence_id,
                line_number=line_number,
            )

    def _parse_node(self, line: str, kind: NodeKind, sentence: Sentence, line_number: int) -> Node:
        body, comment = split_comment(line)
        columns: List[str] = body.split()
        names = _COLUMNS[(self.format_version, kind)]
        if len(columns) < len(names):
            raise ParseError(
                f"{kind.value.capitalize()} line has {len(columns)} columns, expected at least {len(names)}",
                sentence_id=sentence.sentence_id,
                line_number=line_number,
            )
        fields = dict(zip(names, columns))
        # anything past the parent column is secondary edges, which are not kept
        parent_id = _parse_int(fields["parent"], "parent id", line_number, sentence.sentence_id)

        if kind is NodeKind.TERMINAL:
            index = len(sentence.terminals)
            return Node(
                node_id=index + 1,
                kind=kind,
                label=fields["form"],
                edge=fields["edge"],
                parent_id=parent_id,
                morph=fields["morph"],
                comment=comment,
                line_number=line_number,
                index=index,
                lemma=fields.get("lemma"),
                tag=fields["tag"],
            )

        node_id = _parse_int(fields["id"][1:], "node id", line_number, sentence.sentence_id)
        return Node(
            node_id=node_id,
            kind=kind,
            label=fields["cat"],
            edge=fields["edge"],
            parent_id=parent_id,
            morph=fields["morph"],
            comment=comment,
            line_number=line_number,
        )


def read_sentences(
    path: Path,
    encoding: str = "utf-8",
    format_version: Optional[int] = None,
) -> Iterator[Sentence]:
    """Yield the sentences of an export file on disk."""

    with open(path, "r", encoding=encoding) as f:
        yield from ExportReader(f, format_version)
