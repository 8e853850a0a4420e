"""Tests for the export format reader."""

import io

import pytest

from negra_coref.core.export import ExportReader, read_sentences, split_comment
from negra_coref.core.models import NodeKind
from negra_coref.errors import ParseError


def _read(text, format_version=None):
    return list(ExportReader(text.splitlines(), format_version))


class TestSentenceRecords:
    """Sentence boundaries and node fields."""

    def test_reads_all_sentences_in_order(self, sample_export):
        """Sentences come out in file order with all their nodes."""
        sentences = _read(sample_export)

        assert [s.sentence_id for s in sentences] == [0, 1, 2]
        assert [len(s.terminals) for s in sentences] == [4, 9, 4]
        assert [len(s.nonterminals) for s in sentences] == [2, 2, 2]

    def test_terminal_fields_format_4(self, sample_export):
        """Format 4 terminal columns land in the right fields."""
        sentence = _read(sample_export)[1]
        ihn = sentence.terminals[6]

        assert ihn.kind is NodeKind.TERMINAL
        assert ihn.label == "ihn"
        assert ihn.lemma == "er"
        assert ihn.tag == "PPER"
        assert ihn.morph == "3asm"
        assert ihn.edge == "OA"
        assert ihn.parent_id == 501
        assert ihn.comment == "R=coreferential.0:500"
        assert ihn.index == 6
        assert ihn.node_id == 7

    def test_nonterminal_fields(self, sample_export):
        """Nonterminal columns land in the right fields."""
        sentence = _read(sample_export)[0]
        pp = sentence.nonterminals[1]

        assert pp.kind is NodeKind.NONTERMINAL
        assert pp.node_id == 510
        assert pp.label == "PP"
        assert pp.edge == "MNR"
        assert pp.parent_id == 500
        assert pp.comment is None

    def test_line_numbers_point_into_file(self, sample_export):
        """Sentences and nodes remember their line numbers."""
        sentence = _read(sample_export)[0]

        assert sentence.line_number == 6
        assert sentence.terminals[0].line_number == 7

    def test_format_3_columns(self):
        """#FORMAT 3 switches to the lemma-less layout."""
        text = "\n".join([
            "#FORMAT 3",
            "#BOS 4",
            "Hallo\tITJ\t--\t--\t500",
            "#500\tS\t--\t--\t0\t%% R=coreferential.1:500",
            "#EOS 4",
        ])
        sentence = _read(text)[0]

        assert sentence.terminals[0].tag == "ITJ"
        assert sentence.terminals[0].lemma is None
        assert sentence.nonterminals[0].label == "S"
        assert sentence.nonterminals[0].comment == "R=coreferential.1:500"

    def test_configured_version_used_without_format_line(self):
        """The configured version applies when the file has no #FORMAT line."""
        text = "#BOS 1\nHallo\tITJ\t--\t--\t0\n#EOS 1\n"

        sentence = _read(text, format_version=3)[0]

        assert sentence.terminals[0].tag == "ITJ"

    def test_hash_digit_word_form_is_a_terminal(self):
        """A word form like "#1" stays a terminal."""
        text = "#BOS 1\n#1\t#1\tNN\t--\tHD\t0\n#EOS 1\n"

        sentence = _read(text)[0]

        assert [t.label for t in sentence.terminals] == ["#1"]
        assert sentence.nonterminals == []

    def test_nonterminal_ids_from_500(self):
        """Only #500 to #999 lines are read as nonterminals."""
        text = "#BOS 1\n#99\t#99\tCARD\t--\tNK\t999\n#999\t--\tNP\t--\t--\t0\n#EOS 1\n"

        sentence = _read(text)[0]

        assert [t.label for t in sentence.terminals] == ["#99"]
        assert [n.node_id for n in sentence.nonterminals] == [999]

    def test_secondary_edges_are_skipped(self):
        """Secondary edge columns do not change the parent."""
        text = "#BOS 1\nwer\twer\tPWS\tnsm\tSB\t500\tSB\t501\n#500\t--\tS\t--\t--\t0\n#501\t--\tS\t--\t--\t0\n#EOS 1\n"

        sentence = _read(text)[0]

        assert sentence.terminals[0].parent_id == 500

    def test_header_comment_kept(self):
        """The #BOS comment is kept on the sentence."""
        text = "#BOS 3 1 0 0 %% first page\nHallo\tHallo\tITJ\t--\t--\t0\n#EOS 3\n"

        assert _read(text)[0].comment == "first page"

    def test_reader_is_lazy(self, sample_export):
        """Sentences are yielded one at a time."""
        iterator = iter(ExportReader(sample_export.splitlines()))

        first = next(iterator)

        assert first.sentence_id == 0

    def test_read_sentences_from_file(self, sample_path):
        """read_sentences opens and reads a file."""
        sentences = list(read_sentences(sample_path))

        assert len(sentences) == 3


class TestParseErrors:
    """Malformed input is rejected with location details."""

    def test_missing_eos(self):
        """Input ending inside a sentence is an error."""
        text = "#BOS 1\nHallo\tHallo\tITJ\t--\t--\t0\n"

        with pytest.raises(ParseError) as exc_info:
            _read(text)

        assert exc_info.value.sentence_id == 1
        assert "#EOS" in str(exc_info.value)

    def test_too_few_columns(self):
        """Short lines are reported with their line number."""
        text = "#BOS 1\nHallo\tITJ\t0\n#EOS 1\n"

        with pytest.raises(ParseError) as exc_info:
            _read(text)

        assert exc_info.value.line_number == 2
        assert "line 2" in str(exc_info.value)

    def test_non_integer_parent(self):
        """A non-numeric parent id is an error."""
        text = "#BOS 1\nHallo\tHallo\tITJ\t--\t--\tfoo\n#EOS 1\n"

        with pytest.raises(ParseError, match="parent id"):
            _read(text)

    def test_non_integer_sentence_id(self):
        """A non-numeric sentence id is an error."""
        with pytest.raises(ParseError, match="sentence id"):
            _read("#BOS eins\n#EOS eins\n")

    def test_undecodable_bytes(self):
        """Bytes that do not decode raise a located ParseError."""
        stream = io.TextIOWrapper(io.BytesIO(b"#BOS 1\nM\xe4nner\tMann\tNN\t--\tHD\t0\n#EOS 1\n"), encoding="utf-8")

        with pytest.raises(ParseError, match="Cannot decode") as exc_info:
            list(ExportReader(stream))

        assert exc_info.value.line_number is not None

    def test_mismatched_eos(self):
        """#EOS must repeat the #BOS id."""
        with pytest.raises(ParseError, match="does not match"):
            _read("#BOS 1\nHallo\tHallo\tITJ\t--\t--\t0\n#EOS 2\n")

    def test_nested_bos(self):
        """A sentence cannot open inside another."""
        with pytest.raises(ParseError, match="closed"):
            _read("#BOS 1\n#BOS 2\n#EOS 2\n")

    def test_eos_outside_sentence(self):
        """#EOS without #BOS is an error."""
        with pytest.raises(ParseError, match="outside"):
            _read("#EOS 1\n")

    def test_unsupported_format(self):
        """Unknown format versions are rejected."""
        with pytest.raises(ParseError, match="Unsupported"):
            _read("#FORMAT 5\n")


class TestSplitComment:

    def test_no_comment(self):
        """Lines without %% have no comment."""
        assert split_comment("a b c") == ("a b c", None)

    def test_comment(self):
        """Text after %% is the comment."""
        body, comment = split_comment("#500 -- NP -- SB 0 %% R=coreferential.1:500 ")
        assert body.split() == ["#500", "--", "NP", "--", "SB", "0"]
        assert comment == "R=coreferential.1:500"

    def test_empty_comment(self):
        """A bare %% gives no comment."""
        assert split_comment("x %%")[1] is None
