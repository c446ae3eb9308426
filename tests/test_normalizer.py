"""Tests for the normalizer module."""

from plag_basic.core.normalizer import clean_text


class TestCleanText:
    """Test cases for clean_text."""

    def test_clean_mixed_input(self):
        """Test punctuation, newlines and repeated spaces are removed."""
        assert clean_text("  a  b c \n 2 3 @ 4\n224acb@\n") == ["a", "b", "c", "2", "3", "4", "224acb"]

    def test_clean_lowercases(self):
        """Test that words are lowercased."""
        assert clean_text("Mary HAD a Little Lamb") == ["mary", "had", "a", "little", "lamb"]

    def test_clean_empty(self):
        """Test empty and whitespace-only input."""
        assert clean_text("") == []
        assert clean_text("  \n\t ") == []
        assert clean_text("@@@ ... !!!") == []

    def test_clean_non_ascii_splits_words(self):
        """Test that non-ASCII characters act as separators."""
        assert clean_text("café au lait") == ["caf", "au", "lait"]

    def test_clean_punctuation_inside_word(self):
        """Test that punctuation splits a word in two."""
        assert clean_text("don't stop") == ["don", "t", "stop"]
