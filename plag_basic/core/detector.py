"""Core plagiarism detection logic."""

from typing import List, Tuple, Optional, Iterable
from pydantic import BaseModel, Field

from .config import Config
from .metrics import EqualMetric, EditDistanceMetric, is_match
from .store import CorpusStore
from .types import TextEntry, PlagiarismResult, CleanTexts, FragmentLocation
from .log import base_logger

logger = base_logger.getChild('detector')


def sort_results(results: List[PlagiarismResult]) -> List[PlagiarismResult]:
    """Sort results by decreasing number of matching fragments."""
    return sorted(results, key=lambda r: len(r.matching_fragments), reverse=True)


class MatchEngine:
    """Runs the pairwise fragment comparisons over a corpus store."""

    def __init__(self, store: CorpusStore):
        """
        Initialize the match engine.

        Args:
            store: Fully ingested corpus store
        """
        self.store = store

    def check_untrusted_plagiarism(self) -> List[PlagiarismResult]:
        """
        Compare every untrusted text against every other untrusted text.

        Each unordered pair is visited once and no text is compared with itself.

        Returns:
            List of PlagiarismResult objects, one per pair with matches
        """
        results = []
        entries = list(self.store.untrusted_texts.values())
        for source_idx, source in enumerate(entries):
            # Only look forward to avoid checking the same pair twice
            for against in entries[source_idx + 1:]:
                result = self.run_metrics(source, against, trusted_owner1=False)
                if result is not None:
                    results.append(result)

        logger.info(f"Untrusted sweep: {len(results)} pairs with matches among {len(entries)} texts")
        return results

    def check_trusted_plagiarism(self) -> List[PlagiarismResult]:
        """
        Compare every trusted text against every untrusted text.

        Returns:
            List of PlagiarismResult objects, one per pair with matches
        """
        results = []
        for source in self.store.trusted_texts.values():
            for against in self.store.untrusted_texts.values():
                result = self.run_metrics(source, against, trusted_owner1=True)
                if result is not None:
                    results.append(result)

        logger.info(f"Trusted sweep: {len(results)} pairs with matches")
        return results

    def run_metrics(
        self,
        source: TextEntry,
        against: TextEntry,
        trusted_owner1: bool
    ) -> Optional[PlagiarismResult]:
        """
        Compare two texts and build a result if any fragments match.

        Args:
            source: First text (trusted when trusted_owner1 is set)
            against: Second text, always untrusted
            trusted_owner1: Whether source comes from the trusted partition

        Returns:
            PlagiarismResult, or None when nothing matches
        """
        metric = self.store.metric
        if isinstance(metric, EqualMetric):
            matching_fragments = self.check_plagiarism_equal(source, against)
        elif isinstance(metric, EditDistanceMetric):
            matching_fragments = self.check_plagiarism_other(source, against)
        else:
            raise TypeError(f"Unsupported metric: {metric!r}")

        logger.debug(f"{source.owner} vs {against.owner}: {len(matching_fragments)} matches")

        if not matching_fragments:
            return None

        source_entry = self.store.get_entry(source.owner, trusted=trusted_owner1)
        against_entry = self.store.get_entry(against.owner, trusted=False)
        locations = [
            self._fragments_to_locations(source_entry, f1, against_entry, f2)
            for f1, f2 in matching_fragments
        ]

        return PlagiarismResult(
            owner_id1=source.owner,
            owner_id2=against.owner,
            matching_fragments=matching_fragments,
            matching_fragments_locations=locations,
            trusted_owner1=trusted_owner1,
            equal_fragments=isinstance(metric, EqualMetric)
        )

    def check_plagiarism_equal(self, source: TextEntry, against: TextEntry) -> List[Tuple[str, str]]:
        """
        Find identical fragments using set intersection.

        Returns:
            List of (fragment, fragment) pairs
        """
        return [(f, f) for f in sorted(source.fragments & against.fragments)]

    def check_plagiarism_other(self, source: TextEntry, against: TextEntry) -> List[Tuple[str, str]]:
        """
        Find similar fragments by testing every fragment pair against the metric.

        Returns:
            List of (source fragment, against fragment) pairs
        """
        metric = self.store.metric
        matches = []
        for source_frag in sorted(source.fragments):
            for against_frag in sorted(against.fragments):
                if is_match(metric, source_frag, against_frag):
                    matches.append((source_frag, against_frag))
        return matches

    def _fragments_to_locations(
        self,
        entry1: TextEntry,
        f1: str,
        entry2: TextEntry,
        f2: str
    ) -> Tuple[List[FragmentLocation], List[FragmentLocation]]:
        return list(entry1.fragment_locations[f1]), list(entry2.fragment_locations[f2])


class DetectionRun(BaseModel):
    """Everything produced by one detection run."""

    untrusted_results: List[PlagiarismResult] = Field(default_factory=list)
    trusted_results: List[PlagiarismResult] = Field(default_factory=list)
    clean_texts: CleanTexts = Field(default_factory=CleanTexts)

    def all_results(self) -> List[PlagiarismResult]:
        """Both result lists together, most significant first."""
        return sort_results(self.untrusted_results + self.trusted_results)


class PlagiarismDetector:
    """Main plagiarism detection entry point."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the plagiarism detector.

        Args:
            config: Configuration object (uses defaults if not provided)
        """
        self.config = config or Config()
        self.metric = self.config.build_metric()

    def run(
        self,
        untrusted: Iterable[Tuple[str, str]],
        trusted: Optional[Iterable[Tuple[str, str]]] = None,
        ignore: Optional[Iterable[str]] = None
    ) -> DetectionRun:
        """
        Ingest all texts and run both comparison sweeps.

        Args:
            untrusted: (owner ID, raw text) pairs of the submissions
            trusted: (owner ID, raw text) pairs of the reference sources
            ignore: Raw texts whose fragments are never reported

        Returns:
            DetectionRun with sorted results and the clean texts
        """
        store = CorpusStore(self.config.sensitivity, self.metric, ignore)

        for owner_id, text in untrusted:
            store.add_untrusted_text(owner_id, text)
        for owner_id, text in trusted or []:
            store.add_trusted_text(owner_id, text)

        logger.info(
            f"Loaded {len(store.untrusted_texts)} untrusted and "
            f"{len(store.trusted_texts)} trusted texts (n={self.config.sensitivity}, metric={self.config.metric})"
        )

        engine = MatchEngine(store)
        run = DetectionRun(
            untrusted_results=sort_results(engine.check_untrusted_plagiarism()),
            trusted_results=sort_results(engine.check_trusted_plagiarism()),
            clean_texts=store.get_all_clean_text()
        )

        logger.info(
            f"Detection complete: {len(run.untrusted_results)} untrusted and "
            f"{len(run.trusted_results)} trusted results"
        )
        return run
