"""Tests for the fragments module."""

import pytest
from plag_basic.core.fragments import FragmentIndexer, extract_ngrams, build_ignore_set
from plag_basic.core.normalizer import clean_text


class TestExtractNgrams:
    """Test cases for extract_ngrams."""

    def test_ngrams_basic(self):
        """Test joining consecutive words."""
        assert extract_ngrams(["mary", "had", "a"], 2) == ["mary had", "had a"]

    def test_ngrams_after_cleaning(self):
        """Test n-grams of text with noise around the words."""
        words = clean_text("    ||| mary\n  @@@@ ....  had a\n\n\n")
        assert extract_ngrams(words, 2) == ["mary had", "had a"]

    def test_ngrams_n_equals_length(self):
        """Test a text exactly n words long gives one fragment."""
        assert extract_ngrams(["a", "b", "c"], 3) == ["a b c"]

    def test_ngrams_n_too_large(self):
        """Test that n larger than the text gives no fragments."""
        assert extract_ngrams(["a", "b"], 3) == []
        assert extract_ngrams([], 1) == []


class TestFragmentIndexer:
    """Test cases for FragmentIndexer class."""

    def test_index_basic(self):
        """Test fragments and locations of a short text."""
        fragments, locations = FragmentIndexer(2).index(["mary", "had", "a"])

        assert fragments == {"mary had", "had a"}
        assert locations["mary had"] == [(0, 2)]
        assert locations["had a"] == [(1, 3)]

    def test_index_repeated_fragment(self):
        """Test a repeated fragment keeps every location."""
        fragments, locations = FragmentIndexer(2).index(["a", "b", "a", "b"])

        assert fragments == {"a b", "b a"}
        assert locations["a b"] == [(0, 2), (2, 4)]
        assert locations["b a"] == [(1, 3)]

    def test_locations_span_n_words(self):
        """Test every location is end-exclusive and n words wide."""
        n = 3
        _, locations = FragmentIndexer(n).index(clean_text("one two three four five six"))

        for locs in locations.values():
            for start, end in locs:
                assert end == start + n

    def test_index_n_too_large(self):
        """Test that too short texts produce nothing."""
        for words in ([], ["a"], ["a", "b", "c"]):
            fragments, locations = FragmentIndexer(4).index(words)
            assert fragments == set()
            assert locations == {}

    def test_index_text(self):
        """Test indexing raw text."""
        fragments, _ = FragmentIndexer(2).index_text("The cat, the HAT.")
        assert fragments == {"the cat", "cat the", "the hat"}

    def test_invalid_n(self):
        """Test that non-positive n is rejected."""
        with pytest.raises(ValueError, match="n must be positive"):
            FragmentIndexer(0)
        with pytest.raises(ValueError, match="n must be positive"):
            FragmentIndexer(-2)


class TestBuildIgnoreSet:
    """Test cases for build_ignore_set."""

    def test_union_of_texts(self):
        """Test fragments of all ignore texts are collected."""
        ignored = build_ignore_set(["the cat sat", "on the mat"], 3)
        assert ignored == {"the cat sat", "on the mat"}

    def test_empty(self):
        """Test no ignore texts gives an empty set."""
        assert build_ignore_set([], 3) == set()
        assert build_ignore_set(["too short"], 3) == set()
