"""String normalization applied before storage and comparison."""

import re

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Strip both ends and collapse every internal whitespace run to one space."""
    return _WHITESPACE_RUN.sub(" ", text.strip())


def normalize_key(text: str) -> str:
    """
    Normalize a lookup key (category, genre, handle...).

    Keys compare case-insensitively, so they are stored lowercased on top of
    the whitespace collapsing every text field gets.
    """
    return collapse_whitespace(text).lower()
