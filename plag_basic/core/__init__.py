"""Core modules for plagiarism detection."""

from .config import Config
from .metrics import EqualMetric, EditDistanceMetric, SimilarityMetric, is_match
from .normalizer import clean_text
from .fragments import FragmentIndexer, build_ignore_set
from .store import CorpusStore
from .detector import MatchEngine, PlagiarismDetector, DetectionRun, sort_results
from .highlight import project, project_result, project_results
from .report import ReportGenerator
from .types import PlagiarismResult, TextEntry, TextSegment, HighlightedResult, CleanTexts

__all__ = [
    "Config",
    "EqualMetric",
    "EditDistanceMetric",
    "SimilarityMetric",
    "is_match",
    "clean_text",
    "FragmentIndexer",
    "build_ignore_set",
    "CorpusStore",
    "MatchEngine",
    "PlagiarismDetector",
    "DetectionRun",
    "sort_results",
    "project",
    "project_result",
    "project_results",
    "ReportGenerator",
    "PlagiarismResult",
    "TextEntry",
    "TextSegment",
    "HighlightedResult",
    "CleanTexts",
]
