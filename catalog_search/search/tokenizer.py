"""
Query and product text tokenization.

Normalizes free-text queries into scoring terms and splits product text
into whole words for fuzzy matching.
"""

import re
from typing import FrozenSet, List

# Common low-information words ignored for term-level scoring
STOP_WORDS: FrozenSet[str] = frozenset(
    {"for", "and", "the", "in", "of", "to", "a", "with", "is"}
)

# Terms of this length or shorter are dropped
MAX_IGNORED_TERM_LENGTH = 1

WHITESPACE_PATTERN = re.compile(r"\s+")
NON_WORD_PATTERN = re.compile(r"\W+", re.ASCII)


def normalize_query(query: str) -> str:
    """
    Normalize a raw query for matching.

    Examples:
        "  Shilajit Resin " -> "shilajit resin"
    """
    if not query:
        return ""
    return query.lower().strip()


def extract_terms(query: str, stop_words: FrozenSet[str] = STOP_WORDS) -> List[str]:
    """
    Split a query into effective scoring terms.

    Terms are whitespace-delimited tokens of the normalized query, minus
    single characters and stop words. Repeated terms are kept and score
    once per occurrence.

    Examples:
        "good for dry skin" -> ["good", "dry", "skin"]
        "the" -> []
    """
    normalized = normalize_query(query)
    if not normalized:
        return []
    return [
        term
        for term in WHITESPACE_PATTERN.split(normalized)
        if len(term) > MAX_IGNORED_TERM_LENGTH and term not in stop_words
    ]


def tokenize_words(name: str, category: str, description: str) -> List[str]:
    """
    Split product text into words for fuzzy matching.

    Joins the three fields with spaces and splits on runs of non-word
    characters. Empty fragments at the edges are kept; they never pass the
    fuzzy length check.
    """
    text = f"{name} {category} {description}".lower()
    return NON_WORD_PATTERN.split(text)
