"""Text normalization into lowercase alphanumeric words."""

import re
from typing import List

# Compiled once at import and never changed
NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9 ]")
WHITESPACE_RUN = re.compile(r"\s+")


def clean_text(text: str) -> List[str]:
    """
    Normalize raw text into a list of words.

    Newlines become spaces, the text is lowercased, every character outside
    ASCII letters, digits and space becomes a space, and the result is
    split on whitespace.

    Args:
        text: Raw text

    Returns:
        List of normalized words (empty for empty input)
    """
    new_text = text.replace("\n", " ").lower()
    new_text = NON_ALPHANUMERIC.sub(" ", new_text)
    return WHITESPACE_RUN.sub(" ", new_text).strip().split()
