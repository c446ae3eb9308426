"""Corpus store holding the trusted and untrusted texts of one run."""

from typing import Dict, Iterable, Optional

from .fragments import FragmentIndexer, build_ignore_set
from .metrics import SimilarityMetric, EqualMetric
from .normalizer import clean_text
from .types import TextEntry, CleanTexts
from .log import base_logger

logger = base_logger.getChild('store')


class CorpusStore:
    """Indexed texts keyed by owner, split into trusted and untrusted."""

    def __init__(
        self,
        n: int,
        metric: Optional[SimilarityMetric] = None,
        ignored_texts: Optional[Iterable[str]] = None
    ):
        """
        Initialize the store.

        The ignore set is built here, before any text is added, so that
        every text is filtered against the same fragments.

        Args:
            n: Number of words per fragment
            metric: Metric used by the match engine (equality if not provided)
            ignored_texts: Raw texts whose fragments are never reported
        """
        self.indexer = FragmentIndexer(n)
        self.n = n
        self.metric = metric or EqualMetric()
        self.ignore_fragments = build_ignore_set(ignored_texts or [], n)
        self.trusted_texts: Dict[str, TextEntry] = {}
        self.untrusted_texts: Dict[str, TextEntry] = {}

        if self.ignore_fragments:
            logger.info(f"Ignoring {len(self.ignore_fragments)} distinct fragments")

    @property
    def s(self) -> int:
        """Cutoff of the configured metric (0 for equality)."""
        return getattr(self.metric, "cutoff", 0)

    def _make_entry(self, owner_id: str, text: str) -> TextEntry:
        words = clean_text(text)
        fragments, locations = self.indexer.index(words)
        # Locations keep every fragment, only the matchable set is filtered
        fragments -= self.ignore_fragments
        if not locations:
            logger.debug(f"{owner_id} has fewer than {self.n} words, no fragments")
        return TextEntry(
            owner=owner_id,
            clean_words=words,
            fragments=fragments,
            fragment_locations=locations
        )

    def add_trusted_text(self, owner_id: str, text: str):
        """Add a text as potential plagiarism source material."""
        self.trusted_texts[owner_id] = self._make_entry(owner_id, text)

    def add_untrusted_text(self, owner_id: str, text: str):
        """Add a text as a potentially plagiarized submission."""
        self.untrusted_texts[owner_id] = self._make_entry(owner_id, text)

    def get_entry(self, owner_id: str, trusted: bool) -> TextEntry:
        """Get a stored entry from the given partition."""
        texts = self.trusted_texts if trusted else self.untrusted_texts
        return texts[owner_id]

    def get_all_clean_text(self) -> CleanTexts:
        """Get the normalized words of every stored text, per partition."""
        return CleanTexts(
            trusted={k: v.clean_words for k, v in self.trusted_texts.items()},
            untrusted={k: v.clean_words for k, v in self.untrusted_texts.items()}
        )
