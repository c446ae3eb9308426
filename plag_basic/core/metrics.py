"""Similarity metrics used to decide whether two fragments match."""

from typing import Literal, Union
from pydantic import BaseModel, Field
from rapidfuzz.distance import Levenshtein


class EqualMetric(BaseModel):
    """Fragments match only when they are identical."""

    kind: Literal["equal"] = "equal"


class EditDistanceMetric(BaseModel):
    """Fragments match when their Levenshtein distance is within the cutoff."""

    kind: Literal["lev"] = "lev"
    cutoff: int = Field(ge=0, description="Largest edit distance still counted as a match")


SimilarityMetric = Union[EqualMetric, EditDistanceMetric]


def metric_from_name(name: str, cutoff: int = 0) -> SimilarityMetric:
    """
    Build a metric from its CLI name.

    Args:
        name: Either "equal" or "lev"
        cutoff: Edit distance cutoff, only used by "lev"

    Returns:
        The metric value
    """
    if name == "equal":
        return EqualMetric()
    if name == "lev":
        return EditDistanceMetric(cutoff=cutoff)
    raise ValueError(f"Unknown metric: {name}")


def levenshtein_distance(a: str, b: str) -> int:
    """Character-level edit distance between two fragment strings."""
    return Levenshtein.distance(a, b)


def is_match(metric: SimilarityMetric, a: str, b: str) -> bool:
    """Check whether two fragments match under the given metric."""
    if isinstance(metric, EqualMetric):
        return a == b
    if isinstance(metric, EditDistanceMetric):
        return levenshtein_distance(a, b) <= metric.cutoff
    raise TypeError(f"Unsupported metric: {metric!r}")
