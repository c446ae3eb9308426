"""Fragment indexing: splitting word lists into n-gram fragments."""

from typing import Dict, Iterable, List, Set, Tuple

from .normalizer import clean_text
from .types import FragmentLocation


def extract_ngrams(words: List[str], n: int) -> List[str]:
    """
    Join every run of n consecutive words into one fragment string.

    Args:
        words: Normalized words
        n: Number of words per fragment

    Returns:
        Fragments in text order, duplicates included
    """
    # No fragment can be formed from fewer than n words
    if n > len(words):
        return []
    return [" ".join(words[i:i + n]) for i in range(len(words) - n + 1)]


class FragmentIndexer:
    """Builds the fragment set and location map of a text."""

    def __init__(self, n: int):
        """
        Initialize the fragment indexer.

        Args:
            n: Number of words per fragment
        """
        if n <= 0:
            raise ValueError("n must be positive")
        self.n = n

    def index(self, words: List[str]) -> Tuple[Set[str], Dict[str, List[FragmentLocation]]]:
        """
        Index a list of words.

        Args:
            words: Normalized words

        Returns:
            Tuple of (distinct fragments, fragment -> every (start, end) location)
        """
        locations: Dict[str, List[FragmentLocation]] = {}
        for start, ngram in enumerate(extract_ngrams(words, self.n)):
            locations.setdefault(ngram, []).append((start, start + self.n))
        return set(locations), locations

    def index_text(self, text: str) -> Tuple[Set[str], Dict[str, List[FragmentLocation]]]:
        """Normalize raw text and index it."""
        return self.index(clean_text(text))


def build_ignore_set(texts: Iterable[str], n: int) -> Set[str]:
    """
    Collect the fragments of every ignore text into one set.

    Args:
        texts: Raw texts whose fragments should never be reported
        n: Number of words per fragment

    Returns:
        Union of all fragments
    """
    indexer = FragmentIndexer(n)
    ignored: Set[str] = set()
    for text in texts:
        fragments, _ = indexer.index_text(text)
        ignored |= fragments
    return ignored
