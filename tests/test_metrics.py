"""Tests for the metrics module."""

import pytest
from pydantic import ValidationError

from plag_basic.core.metrics import (
    EqualMetric,
    EditDistanceMetric,
    is_match,
    levenshtein_distance,
    metric_from_name
)


class TestMetrics:
    """Test cases for fragment metrics."""

    def test_equal(self):
        """Test the equality metric."""
        assert is_match(EqualMetric(), "a", "a")
        assert is_match(EqualMetric(), "the cat sat", "the cat sat")
        assert not is_match(EqualMetric(), "the cat sat", "the cat sit")

    def test_edit_distance_cutoff_is_inclusive(self):
        """Test the edit distance boundary."""
        assert is_match(EditDistanceMetric(cutoff=2), "abcd", "ac")
        assert not is_match(EditDistanceMetric(cutoff=1), "abcd", "ac")

    def test_edit_distance_counts_spaces(self):
        """Test distance is measured over the joined fragment string."""
        assert levenshtein_distance("the cat", "thecat") == 1
        assert levenshtein_distance("the cat", "the bat") == 1
        assert is_match(EditDistanceMetric(cutoff=0), "the cat", "the cat")

    def test_negative_cutoff_rejected(self):
        """Test that the cutoff cannot be negative."""
        with pytest.raises(ValidationError):
            EditDistanceMetric(cutoff=-1)

    def test_metric_from_name(self):
        """Test building metrics from CLI names."""
        assert metric_from_name("equal", 3) == EqualMetric()
        assert metric_from_name("lev", 3) == EditDistanceMetric(cutoff=3)
        with pytest.raises(ValueError, match="Unknown metric"):
            metric_from_name("cosine")
