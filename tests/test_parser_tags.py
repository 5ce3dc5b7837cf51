"""Tests for commitjournal.parser.tags module."""

import pytest

from commitjournal.parser import extract_tags
from commitjournal.parser.constants import RE_TAGS


class TestExtractTags:
    """Tests for extract_tags function."""

    def test_no_tags(self):
        """Test text without markers is returned unchanged."""
        assert extract_tags("Just some text") == ([], "Just some text")

    def test_single_marker(self):
        """Test a single marker with several tags."""
        tags, text = extract_tags("Support foo :api,core:")
        assert tags == ["api", "core"]
        assert text == "Support foo"

    def test_tags_are_stripped(self):
        """Test whitespace around tags is removed."""
        tags, _ = extract_tags("Text : a , b :")
        assert tags == ["a", "b"]

    def test_empty_pieces_are_kept(self):
        """Test empty tag pieces are kept in order."""
        tags, _ = extract_tags("Text :a,,b:")
        assert tags == ["a", "", "b"]

    def test_multiple_markers_in_order(self):
        """Test tags from several markers keep their order."""
        tags, text = extract_tags("One :a: two :b,c:")
        assert tags == ["a", "b", "c"]
        assert text == "One two"

    def test_marker_requires_leading_space(self):
        """Test a marker not preceded by a space is not a tag."""
        assert extract_tags("key:value:") == ([], "key:value:")

    def test_marker_does_not_span_lines(self):
        """Test a marker cannot cross a newline."""
        text = "first :a\nb: second"
        assert extract_tags(text) == ([], text)

    def test_multiline_text(self):
        """Test markers are found on every line."""
        tags, text = extract_tags("line one :x:\nline two :y:")
        assert tags == ["x", "y"]
        assert text == "line one\nline two"

    @pytest.mark.parametrize("text", [
        "Plain text",
        "A sentence with time 10:30: done",
        "s  :q::z:",
        "x :a :b:",
    ])
    def test_idempotent(self, text):
        """Test the cleaned text never contains further markers."""
        _, cleaned = extract_tags(text)
        assert RE_TAGS.search(cleaned) is None
        assert extract_tags(cleaned) == ([], cleaned)

    def test_removal_exposing_new_marker(self):
        """Test markers exposed by a removal are extracted too."""
        tags, text = extract_tags("s  :q::z:")
        assert tags == ["q", "z"]
        assert text == "s"

    def test_round_trip(self):
        """Test appending a marker to text and extracting it again."""
        tags, text = extract_tags("Fix the parser" + " :a,b:")
        assert tags == ["a", "b"]
        assert text == "Fix the parser"


class TestExtractTagsBytes:
    """Tests for extract_tags with bytes input."""

    def test_valid_utf8(self):
        """Test UTF-8 bytes are decoded and scanned."""
        tags, text = extract_tags("Füge hinzu :de:".encode("utf-8"))
        assert tags == ["de"]
        assert text == "Füge hinzu"

    def test_invalid_bytes_produce_no_tags(self):
        """Test undecodable bytes yield no tags instead of failing."""
        tags, text = extract_tags(b"bad \xff\xfe :tag:")
        assert tags == []
        assert "bad" in text
