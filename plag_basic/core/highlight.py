"""Projection of matched fragment locations onto highlighted text runs."""

from typing import List, Tuple

from .detector import sort_results
from .types import (
    FragmentLocation,
    PlagiarismResult,
    TextSegment,
    HighlightedResult,
    CleanTexts
)


def merge_intervals(locations: List[FragmentLocation]) -> List[FragmentLocation]:
    """
    Union half-open [start, end) ranges.

    Overlapping and adjacent ranges are merged. Empty ranges are dropped.

    Args:
        locations: Ranges in any order

    Returns:
        Sorted, disjoint ranges
    """
    intervals = sorted((start, end) for start, end in locations if end > start)
    if not intervals:
        return []

    merged = [intervals[0]]
    for start, end in intervals[1:]:
        if start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def covered_count(intervals: List[FragmentLocation], total: int) -> int:
    """Number of word indices below total covered by merged intervals."""
    return sum(max(0, min(end, total) - start) for start, end in intervals if start < total)


def coverage_percent(covered: int, total: int) -> int:
    """Covered share of a text in whole percent, truncated."""
    if total <= 0:
        return 0
    return covered * 100 // total


def segment_words(words: List[str], intervals: List[FragmentLocation]) -> List[TextSegment]:
    """
    Split words into alternating bold and plain runs.

    Args:
        words: Normalized words of one text
        intervals: Merged covered ranges

    Returns:
        Non-empty segments in text order
    """
    covered = set()
    for start, end in intervals:
        covered.update(range(start, end))

    segments = []
    current: List[str] = []
    bold = False
    for i, word in enumerate(words):
        is_covered = i in covered
        if current and is_covered != bold:
            segments.append(TextSegment(text=" ".join(current), bold=bold))
            current = []
        bold = is_covered
        current.append(word)

    if current:
        segments.append(TextSegment(text=" ".join(current), bold=bold))
    return segments


def project(words: List[str], locations: List[FragmentLocation]) -> Tuple[List[TextSegment], int]:
    """
    Highlight the covered words of one text.

    Args:
        words: Normalized words of the text
        locations: Matched fragment locations in that text

    Returns:
        Tuple of (segments, coverage percent)
    """
    intervals = merge_intervals(locations)
    percent = coverage_percent(covered_count(intervals, len(words)), len(words))
    return segment_words(words, intervals), percent


def project_result(result: PlagiarismResult, texts: CleanTexts) -> HighlightedResult:
    """Prepare both sides of a result for display."""
    words1 = texts.lookup(result.owner_id1, trusted=result.trusted_owner1)
    words2 = texts.lookup(result.owner_id2, trusted=False)
    display1, percent1 = project(words1, result.locations_for(0))
    display2, percent2 = project(words2, result.locations_for(1))

    return HighlightedResult(
        owner_id1=result.owner_id1,
        owner_id2=result.owner_id2,
        trusted_owner1=result.trusted_owner1,
        equal_fragments=result.equal_fragments,
        match_count=len(result.matching_fragments),
        text_display1=display1,
        text_display2=display2,
        text1_plag_percent=percent1,
        text2_plag_percent=percent2
    )


def project_results(results: List[PlagiarismResult], texts: CleanTexts) -> List[HighlightedResult]:
    """Project results in order, most significant first."""
    return [project_result(result, texts) for result in sort_results(results)]
