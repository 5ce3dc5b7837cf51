"""Tests for commitjournal.parser.commit module."""

import pytest

from commitjournal.parser import (
    CommitMessageLengthError,
    CommitParser,
    FooterElement,
    FooterParsingError,
    ListBlock,
    ParagraphBlock,
    ParagraphElement,
    ParsedCommit,
    SummaryElement,
    SummaryParsingError,
    parse_commit_message,
)


class TestParseCommitMessage:
    """Tests for parse_commit_message function."""

    def test_summary_paragraph_and_footer(self):
        """Test a message with summary, paragraph and footer."""
        message = "AB-1 [Added] Support foo :api,core:\n\nSome details.\n\nCloses: AB-1"

        parsed = parse_commit_message(message)

        assert parsed == ParsedCommit(
            summary=SummaryElement(
                prefix="AB-1",
                category="Added",
                text="Support foo",
                tags=["api", "core"],
            ),
            body=[ParagraphBlock(paragraph=ParagraphElement(text="Some details.", tags=[]))],
            footer=[FooterElement(key="Closes", value="AB-1")],
        )

    def test_list_body(self):
        """Test a list block becomes one list body element."""
        message = "[Fixed] crash on startup\n\n- [Added] thing one\n- [Fixed] thing two"

        parsed = parse_commit_message(message)

        assert len(parsed.body) == 1
        assert isinstance(parsed.body[0], ListBlock)
        assert [i.category for i in parsed.body[0].items] == ["Added", "Fixed"]
        assert [i.text for i in parsed.body[0].items] == ["thing one", "thing two"]

    def test_summary_only(self):
        """Test a message with only a summary."""
        parsed = parse_commit_message("[Changed] defaults\n")
        assert parsed.summary.text == "defaults"
        assert parsed.body == ()
        assert parsed.footer == ()

    def test_block_order(self, sample_message):
        """Test body and footer keep their own block order."""
        parsed = parse_commit_message(sample_message)

        assert [type(e) for e in parsed.body] == [ParagraphBlock, ListBlock]
        assert [f.key for f in parsed.footer] == ["Closes", "Reviewed-by"]
        assert parsed.body[1].items[1].tags == ("internal",)
        assert parsed.body[1].items[2].category == ""

    def test_footer_blocks_are_collected_separately(self):
        """Test footer blocks between body blocks go to the footer."""
        message = "[Added] x\n\nRefs: AB-1\n\nMore text.\n\nCloses: AB-2"

        parsed = parse_commit_message(message)

        assert [f.value for f in parsed.footer] == ["AB-1", "AB-2"]
        assert len(parsed.body) == 1
        assert parsed.body[0].paragraph.text == "More text."

    def test_footer_wins_over_list(self):
        """Test a block with list and footer lines is parsed as footer."""
        parsed = parse_commit_message("[Added] x\n\n- item\nKey: value")
        assert parsed.body == ()
        assert parsed.footer == (FooterElement(key="Key", value="value"),)

    def test_malformed_list_line_is_dropped(self):
        """Test list parsing tolerates malformed lines."""
        parsed = parse_commit_message("[Added] x\n\n- [Fixed] good\n  not an item")
        assert len(parsed.body[0].items) == 1

    def test_blank_blocks_are_skipped(self):
        """Test extra blank lines do not create empty paragraphs."""
        parsed = parse_commit_message("[Added] x\n\n\n\nText\n\n")
        assert len(parsed.body) == 1
        assert parsed.body[0].paragraph.text == "Text"

    def test_summary_is_trimmed(self):
        """Test whitespace around the summary block is ignored."""
        parsed = parse_commit_message("  \n[Removed] old flag  ")
        assert parsed.summary.category == "Removed"
        assert parsed.summary.text == "old flag"

    @pytest.mark.parametrize("message", ["", "   ", "\n", "\n\n[Added] x"])
    def test_empty_first_block(self, message):
        """Test an empty first block fails with a length error."""
        with pytest.raises(CommitMessageLengthError):
            parse_commit_message(message)

    def test_invalid_summary(self):
        """Test an invalid summary fails with the offending line."""
        with pytest.raises(SummaryParsingError) as exc_info:
            parse_commit_message("not a valid summary line\n\nBody.")

        assert exc_info.value.line == "not a valid summary line"

    def test_footer_failure_aborts(self, mocker):
        """Test a footer failure aborts the whole parse."""
        mocker.patch(
            "commitjournal.parser.commit.parse_footer_block",
            side_effect=FooterParsingError("Closes: AB-1"),
        )

        with pytest.raises(FooterParsingError) as exc_info:
            parse_commit_message("[Added] x\n\nCloses: AB-1")

        assert exc_info.value.block == "Closes: AB-1"


    def test_parsed_commit_is_immutable(self):
        """Test body and footer sequences cannot be changed in place."""
        parsed = parse_commit_message("[Added] x\n\n- item\n\nCloses: AB-1")

        with pytest.raises(AttributeError):
            parsed.footer.append(FooterElement(key="Refs", value="AB-2"))
        with pytest.raises(AttributeError):
            parsed.body[0].items.append(parsed.body[0].items[0])
        with pytest.raises(Exception):
            parsed.footer = ()

        assert len(parsed.footer) == 1
        assert len(parsed.body[0].items) == 1


class TestCommitParser:
    """Tests for the CommitParser class."""

    def test_parse_single(self):
        """Test the method form matches the function."""
        message = "[Added] x\n\nText"
        assert CommitParser().parse_commit_message(message) == parse_commit_message(message)

    def test_parse_many_skips_invalid(self):
        """Test invalid messages are skipped by default."""
        parsed = CommitParser().parse_commit_messages(
            ["[Added] one", "invalid", "", "[Fixed] two"]
        )
        assert [p.summary.text for p in parsed] == ["one", "two"]

    def test_parse_many_logs_skipped(self, caplog):
        """Test skipped messages are logged as warnings."""
        with caplog.at_level("WARNING"):
            CommitParser().parse_commit_messages(["invalid"])

        assert "invalid" in caplog.text

    def test_parse_many_strict(self):
        """Test invalid messages raise when skipping is disabled."""
        with pytest.raises(SummaryParsingError):
            CommitParser().parse_commit_messages(["invalid"], skip_unparsable=False)
