"""Shared data types and models for the plagiarism detection system."""

from typing import List, Dict, Set, Tuple
from pydantic import BaseModel, Field

# (start word index inclusive, end word index exclusive)
FragmentLocation = Tuple[int, int]


class TextEntry(BaseModel):
    """A single owner's text, broken into fragments."""

    owner: str = Field(description="Identifier of the text owner")
    clean_words: List[str] = Field(default_factory=list, description="Normalized words, kept for display")
    fragments: Set[str] = Field(default_factory=set, description="Distinct fragments left after ignore filtering")
    fragment_locations: Dict[str, List[FragmentLocation]] = Field(
        default_factory=dict,
        description="Every fragment mapped to where it occurs, built before ignore filtering"
    )


class PlagiarismResult(BaseModel):
    """Matches found between two owners."""

    owner_id1: str = Field(description="First owner (trusted source when trusted_owner1 is set)")
    owner_id2: str = Field(description="Second owner, always untrusted")
    matching_fragments: List[Tuple[str, str]] = Field(
        default_factory=list,
        description="Each element is one matching pair of fragments, one from each text"
    )
    matching_fragments_locations: List[Tuple[List[FragmentLocation], List[FragmentLocation]]] = Field(
        default_factory=list,
        description="Locations of each matching pair, parallel to matching_fragments"
    )
    trusted_owner1: bool = Field(default=False, description="Is the first owner a trusted source?")
    equal_fragments: bool = Field(default=True, description="Are both elements of every pair identical?")

    def locations_for(self, side: int) -> List[FragmentLocation]:
        """Flatten the locations of one side (0 or 1) across all matches."""
        return [loc for pair in self.matching_fragments_locations for loc in pair[side]]


class TextSegment(BaseModel):
    """A run of words that is either highlighted or plain."""

    text: str
    bold: bool


class HighlightedResult(BaseModel):
    """A plagiarism result prepared for display."""

    owner_id1: str
    owner_id2: str
    trusted_owner1: bool
    equal_fragments: bool
    match_count: int = Field(description="Number of matching fragment pairs")
    text_display1: List[TextSegment] = Field(default_factory=list)
    text_display2: List[TextSegment] = Field(default_factory=list)
    text1_plag_percent: int = Field(ge=0, le=100)
    text2_plag_percent: int = Field(ge=0, le=100)


class CleanTexts(BaseModel):
    """Normalized words of every ingested text, kept apart by partition."""

    trusted: Dict[str, List[str]] = Field(default_factory=dict)
    untrusted: Dict[str, List[str]] = Field(default_factory=dict)

    def lookup(self, owner: str, trusted: bool) -> List[str]:
        """Get the words of one owner from the given partition."""
        texts = self.trusted if trusted else self.untrusted
        if owner not in texts:
            side = "trusted" if trusted else "untrusted"
            raise KeyError(f"Could not find text for {side} owner {owner}")
        return texts[owner]

    def merged(self) -> Dict[str, List[str]]:
        """Flat owner -> words map; untrusted entries win on a shared owner ID."""
        return {**self.trusted, **self.untrusted}
