"""Unit tests for the CCI listing parser."""

import pytest

from cci_triage.errors import MalformedDiffLine, ParseError
from cci_triage.parsing import parse_listing, parse_diff_token, parse_byte_delta

from samples import SMILEY_LISTING, WORD_COUNT_LISTING


class TestParseListing:
    """Tests for parse_listing."""

    def test_page_with_two_diffs(self):
        """Test a single entry with two diffs."""
        listing = parse_listing(SMILEY_LISTING)

        assert len(listing) == 1
        page = listing.pages[0]
        assert page.title == "Smiley (1956 film)"
        assert page.edit_count == 2
        assert not page.is_new_page
        assert [d.rev_id for d in page.diffs] == [476809081, 446793589]
        assert [d.token for d in page.diffs] == [
            "[[Special:Diff/476809081|(+460)]]", "[[Special:Diff/446793589|(+205)]]"]
        assert [d.byte_delta for d in page.diffs] == [460, 205]
        assert all(d.page_title == "Smiley (1956 film)" for d in page.diffs)

    def test_entries_without_line_breaks(self):
        """Test entries concatenated on one line, with new page markers."""
        listing = parse_listing(WORD_COUNT_LISTING)

        assert [p.title for p in listing.pages] == ["Urmitz", "SP-354"]
        assert all(p.is_new_page for p in listing.pages)
        assert [d.rev_id for d in listing.diffs()] == [154400451, 255072765]

    def test_order_preserved(self):
        """Test page and diff order across several lines."""
        text = (
            "== Pages 1 through 3 ==\n"
            "*[[:Beta]] (2 edits): [[Special:Diff/30|(+10)]][[Special:Diff/20|(+5)]]\n"
            "*[[:Alpha]] (1 edit): [[Special:Diff/10|(-3)]]\n"
        )
        listing = parse_listing(text)

        assert [p.title for p in listing.pages] == ["Beta", "Alpha"]
        assert [d.rev_id for d in listing.diffs()] == [30, 20, 10]

    def test_malformed_entries_skipped(self):
        """Test that entries without diffs and stray lines are skipped."""
        text = (
            "Some introduction text.\n"
            "*[[:No diffs]] (1 edit): nothing here\n"
            "*[[:Good]] (1 edit): [[Special:Diff/5|(+100)]]\n"
            "* random [[link]]\n"
        )
        listing = parse_listing(text)

        assert [p.title for p in listing.pages] == ["Good"]

    def test_malformed_line_not_attached_to_previous_page(self):
        """Test that diffs on a line without a valid heading are dropped, not chained."""
        text = (
            "*[[:A]] (1 edit): [[Special:Diff/1|(+1)]]\n"
            "*[[B]] (1 edit): [[Special:Diff/2|(+2)]]"
        )
        listing = parse_listing(text)

        assert [p.title for p in listing.pages] == ["A"]
        assert [d.rev_id for d in listing.diffs()] == [1]

    def test_heading_without_colon_stops_at_line_end(self):
        text = (
            "*[[:A]] (1 edit)\n"
            "[[Special:Diff/1|(+1)]]\n"
            "*[[:C]] (1 edit): [[Special:Diff/3|(+3)]]"
        )
        listing = parse_listing(text)

        assert [p.title for p in listing.pages] == ["C"]
        assert [d.rev_id for d in listing.diffs()] == [3]

    def test_duplicate_ids_skipped(self):
        """Test that a diff listed twice only appears once."""
        text = (
            "*[[:A]] (2 edits): [[Special:Diff/1|(+10)]][[Special:Diff/1|(+10)]]\n"
            "*[[:B]] (1 edit): [[Special:Diff/1|(+10)]][[Special:Diff/2|(+20)]]\n"
        )
        listing = parse_listing(text)

        assert [d.rev_id for d in listing.diffs()] == [1, 2]
        assert [p.title for p in listing.pages] == ["A", "B"]

    @pytest.mark.parametrize("text", ["", "No listing here.", "*[[:Page]] (1 edit):"])
    def test_no_pages(self, text):
        """Test that text without entries raises ParseError."""
        with pytest.raises(ParseError):
            parse_listing(text)


class TestDiffTokens:
    """Tests for diff token and byte delta parsing."""

    def test_byte_delta_forms(self):
        assert parse_byte_delta("(+460)") == 460
        assert parse_byte_delta("(-12)") == -12
        assert parse_byte_delta("(−12)") == -12
        assert parse_byte_delta("(+1,234)") == 1234
        assert parse_byte_delta("(0)") == 0
        assert parse_byte_delta("diff") is None
        assert parse_byte_delta(None) is None

    def test_token_without_label(self):
        ref = parse_diff_token("[[Special:Diff/42]]", "Page")
        assert ref.rev_id == 42
        assert ref.byte_delta is None
        assert ref.token == "[[Special:Diff/42]]"

    def test_not_a_token(self):
        with pytest.raises(MalformedDiffLine):
            parse_diff_token("[[Special:Contributions/Example]]", "Page")
