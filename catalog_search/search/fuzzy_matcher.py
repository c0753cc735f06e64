"""
Fuzzy matching engine for product search.

Provides typo-tolerant matching of query terms against product words
using Levenshtein edit distance.
"""

import logging
from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)


def levenshtein_distance(a: str, b: str, score_cutoff: Optional[int] = None) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions needed to turn ``a`` into ``b``.

    No normalization is applied; callers lowercase both tokens first.
    With ``score_cutoff``, any distance above the cutoff is reported as
    ``score_cutoff + 1``.

    Examples:
        levenshtein_distance("kitten", "sitting") -> 3
        levenshtein_distance("abc", "") -> 3
    """
    return Levenshtein.distance(a, b, score_cutoff=score_cutoff)


class FuzzyMatcher:
    """
    Bounded typo detection for single-word query terms.

    A product word counts as a typo of a term when both:
    - their lengths differ by at most ``max_length_delta`` characters
    - their edit distance is at most ``max_distance``

    Terms shorter than ``min_term_length`` are never fuzzy matched.
    """

    DEFAULT_MIN_TERM_LENGTH = 4
    DEFAULT_MAX_LENGTH_DELTA = 2
    DEFAULT_MAX_DISTANCE = 2

    def __init__(
        self,
        min_term_length: int = DEFAULT_MIN_TERM_LENGTH,
        max_length_delta: int = DEFAULT_MAX_LENGTH_DELTA,
        max_distance: int = DEFAULT_MAX_DISTANCE,
    ):
        """
        Initialize fuzzy matcher.

        Args:
            min_term_length: Shortest term eligible for fuzzy matching
            max_length_delta: Maximum length difference between term and word
            max_distance: Maximum edit distance between term and word
        """
        self.min_term_length = min_term_length
        self.max_length_delta = max_length_delta
        self.max_distance = max_distance

    def is_eligible(self, term: str) -> bool:
        """Check if a term is long enough to be fuzzy matched."""
        return len(term) >= self.min_term_length

    def is_typo_of(self, term: str, word: str) -> bool:
        """
        Check if ``word`` is within the typo bounds of ``term``.

        The cheap length check runs first; the distance computation is
        cut off as soon as it exceeds ``max_distance``.
        """
        if abs(len(word) - len(term)) > self.max_length_delta:
            return False
        distance = levenshtein_distance(term, word, score_cutoff=self.max_distance)
        return distance <= self.max_distance

    def matches_any(self, term: str, words: Iterable[str]) -> bool:
        """
        Check if any product word is a typo of the term.

        Stops at the first qualifying word, so a term is counted at most
        once no matter how many words match.

        Args:
            term: Lowercased query term
            words: Lowercased product words

        Returns:
            True if the term is eligible and some word qualifies
        """
        if not self.is_eligible(term):
            return False
        return any(self.is_typo_of(term, word) for word in words)

    def get_stats(self) -> dict:
        """
        Get matcher configuration.

        Returns:
            Dictionary with matcher thresholds
        """
        return {
            "min_term_length": self.min_term_length,
            "max_length_delta": self.max_length_delta,
            "max_distance": self.max_distance,
            "algorithm": "rapidfuzz.Levenshtein",
        }
