"""Tests for the highlight module."""

import pytest
from plag_basic.core.highlight import (
    merge_intervals,
    coverage_percent,
    segment_words,
    project,
    project_result,
    project_results
)
from plag_basic.core.types import PlagiarismResult, TextSegment, CleanTexts

WORDS = ["a", "b", "c", "d", "e"]


def segments(*pairs):
    return [TextSegment(text=text, bold=bold) for text, bold in pairs]


class TestMergeIntervals:
    """Test cases for merge_intervals."""

    def test_overlapping_and_adjacent(self):
        """Test overlapping and touching ranges are joined."""
        assert merge_intervals([(3, 5), (0, 2), (1, 3)]) == [(0, 5)]
        assert merge_intervals([(0, 2), (2, 4)]) == [(0, 4)]

    def test_disjoint(self):
        """Test separate ranges stay separate and sorted."""
        assert merge_intervals([(4, 5), (0, 1)]) == [(0, 1), (4, 5)]

    def test_empty(self):
        """Test no ranges."""
        assert merge_intervals([]) == []


class TestSegmentWords:
    """Test cases for segment_words."""

    def test_first_words_bold(self):
        """Test a covered prefix."""
        assert segment_words(WORDS, [(0, 2)]) == segments(("a b", True), ("c d e", False))

    def test_last_words_bold(self):
        """Test a covered suffix."""
        assert segment_words(WORDS, [(2, 5)]) == segments(("a b", False), ("c d e", True))

    def test_no_bold(self):
        """Test nothing covered."""
        assert segment_words(WORDS, []) == segments(("a b c d e", False))

    def test_all_bold(self):
        """Test everything covered."""
        assert segment_words(WORDS, [(0, 5)]) == segments(("a b c d e", True))

    def test_both_ends_bold(self):
        """Test non-contiguous coverage at both ends."""
        assert segment_words(WORDS, [(0, 1), (4, 5)]) == segments(
            ("a", True), ("b c d", False), ("e", True)
        )

    def test_single_words_bold(self):
        """Test alternating single words."""
        assert segment_words(WORDS, [(0, 1), (2, 3)]) == segments(
            ("a", True), ("b", False), ("c", True), ("d e", False)
        )

    def test_empty_words(self):
        """Test an empty text gives no segments."""
        assert segment_words([], []) == []


class TestProject:
    """Test cases for project and coverage."""

    def test_coverage_truncates(self):
        """Test coverage is a truncated whole percent."""
        assert coverage_percent(2, 5) == 40
        assert coverage_percent(1, 3) == 33
        assert coverage_percent(2, 3) == 66
        assert coverage_percent(29, 100) == 29
        assert coverage_percent(0, 0) == 0

    def test_project(self):
        """Test segments and coverage of one text."""
        display, percent = project(WORDS, [(0, 2), (1, 2)])

        assert display == segments(("a b", True), ("c d e", False))
        assert percent == 40

    def test_project_uncovered(self):
        """Test a text with no locations."""
        display, percent = project(WORDS, [])
        assert display == segments(("a b c d e", False))
        assert percent == 0


class TestProjectResult:
    """Test cases for projecting plagiarism results."""

    def make_result(self, trusted_owner1=False, count=2):
        return PlagiarismResult(
            owner_id1="one",
            owner_id2="two",
            matching_fragments=[("a b", "a b"), ("d e", "d e")][:count],
            matching_fragments_locations=[([(0, 2)], [(3, 5)]), ([(3, 5)], [(0, 2), (3, 5)])][:count],
            trusted_owner1=trusted_owner1
        )

    def test_uses_all_fragments_per_side(self):
        """Test coverage unions the locations of every matching fragment."""
        texts = CleanTexts(untrusted={"one": WORDS, "two": ["a", "b", "x", "d", "e", "f"]})
        highlighted = project_result(self.make_result(), texts)

        assert highlighted.text_display1 == segments(("a b", True), ("c", False), ("d e", True))
        assert highlighted.text1_plag_percent == 80
        assert highlighted.text_display2 == segments(("a b", True), ("x", False), ("d e", True), ("f", False))
        assert highlighted.text2_plag_percent == 66
        assert highlighted.match_count == 2

    def test_trusted_side_lookup(self):
        """Test the first side is read from the trusted texts when flagged."""
        texts = CleanTexts(
            trusted={"one": WORDS},
            untrusted={"one": ["z"] * 5, "two": WORDS}
        )
        highlighted = project_result(self.make_result(trusted_owner1=True), texts)

        assert highlighted.text_display1[0].text == "a b"
        assert highlighted.trusted_owner1

    def test_missing_owner(self):
        """Test a missing text raises KeyError."""
        with pytest.raises(KeyError, match="one"):
            project_result(self.make_result(), CleanTexts(untrusted={"two": WORDS}))

    def test_project_results_sorted(self):
        """Test results are projected most significant first."""
        texts = CleanTexts(untrusted={"one": WORDS, "two": WORDS})
        projected = project_results([self.make_result(count=1), self.make_result(count=2)], texts)

        assert [p.match_count for p in projected] == [2, 1]
