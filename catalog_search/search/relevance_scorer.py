"""
Relevance scoring system for catalog search.

Scores products against a free-text query by combining exact phrase
matches, per-term substring matches, typo-tolerant word matches and
rule-based intent bonuses, then returns the matching products in
relevance order.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..domain.entities import CatalogItem, SearchMatch
from .fuzzy_matcher import FuzzyMatcher
from .intent_rules import INTENT_RULES, IntentRule, intent_bonus
from .tokenizer import extract_terms, normalize_query, tokenize_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringWeights:
    """
    Additive score contributions.

    Phrase weights apply once per field when the whole query appears in it.
    Term weights apply once per field for every effective term.
    """

    phrase_name: int = 50
    phrase_category: int = 40
    phrase_description: int = 20
    term_name: int = 15
    term_category: int = 10
    term_description: int = 5
    fuzzy: int = 4


class RelevanceScorer:
    """
    Calculate relevance scores for catalog items.

    Scoring factors (all additive integers):
    1. Exact phrase - whole query in name / category / description
    2. Term match - each term in name / category / description
    3. Fuzzy match - term is a typo of some product word (once per term)
    4. Intent bonus - term signals an intent the product serves

    The scorer keeps no per-query state and is safe to share.
    """

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        matcher: Optional[FuzzyMatcher] = None,
        rules: Sequence[IntentRule] = INTENT_RULES,
    ):
        """
        Initialize relevance scorer.

        Args:
            weights: Score contributions (defaults to ScoringWeights())
            matcher: Fuzzy matcher for typo tolerance
            rules: Intent rule table
        """
        self.weights = weights or ScoringWeights()
        self.matcher = matcher or FuzzyMatcher()
        self.rules = tuple(rules)

    def score_item(self, item: CatalogItem, terms: Sequence[str], phrase: str) -> int:
        """
        Calculate the relevance score of one item.

        Args:
            item: Catalog item to score
            terms: Effective query terms
            phrase: Normalized full query

        Returns:
            Non-negative integer score
        """
        w = self.weights
        name = item.name.lower()
        category = item.category.lower()
        description = item.description.lower()
        fields = {"name": name, "category": category, "description": description}
        words = tokenize_words(name, category, description)

        score = 0

        if phrase in name:
            score += w.phrase_name
        if phrase in category:
            score += w.phrase_category
        if phrase in description:
            score += w.phrase_description

        for term in terms:
            if term in name:
                score += w.term_name
            if term in category:
                score += w.term_category
            if term in description:
                score += w.term_description

            if self.matcher.matches_any(term, words):
                score += w.fuzzy

            score += intent_bonus(term, fields, self.rules)

        return score

    def score_items(self, items: Sequence[CatalogItem], query: str) -> List[SearchMatch]:
        """
        Score every item against a query, keeping input order.

        Exposes the raw scores behind ``rank``. Items get a score of 0 when
        the query has no effective terms.

        Args:
            items: Catalog items
            query: Raw query text

        Returns:
            One SearchMatch per input item, in input order
        """
        phrase = normalize_query(query)
        terms = extract_terms(query)
        if not terms:
            return [SearchMatch(item=item, score=0, position=i) for i, item in enumerate(items)]
        return [
            SearchMatch(item=item, score=self.score_item(item, terms, phrase), position=i)
            for i, item in enumerate(items)
        ]

    def rank(self, items: Sequence[CatalogItem], query: str) -> List[CatalogItem]:
        """
        Return the items matching a query, most relevant first.

        - Blank query: the input items, unchanged and in input order.
        - Query of only stop words or single characters: same as blank.
        - Otherwise: items with a positive score, sorted by descending
          score; ties keep their input order.

        Never raises for any query text; an empty catalog yields [].
        """
        if not query or not query.strip():
            return list(items)

        if not extract_terms(query):
            logger.debug(f"No effective terms in query {query!r}, returning catalog order")
            return list(items)

        matches = [m for m in self.score_items(items, query) if m.score > 0]
        matches.sort(key=lambda m: m.sort_key)

        logger.debug(f"Ranked {len(matches)}/{len(items)} items for query {query!r}")
        return [m.item for m in matches]

    def get_stats(self) -> dict:
        """
        Get scorer configuration.

        Returns:
            Dictionary with weights, matcher settings and rule names
        """
        return {
            "weights": {
                "phrase_name": self.weights.phrase_name,
                "phrase_category": self.weights.phrase_category,
                "phrase_description": self.weights.phrase_description,
                "term_name": self.weights.term_name,
                "term_category": self.weights.term_category,
                "term_description": self.weights.term_description,
                "fuzzy": self.weights.fuzzy,
            },
            "matcher": self.matcher.get_stats(),
            "intent_rules": [rule.name for rule in self.rules],
        }


_default_scorer = RelevanceScorer()


def rank(items: Sequence[CatalogItem], query: str) -> List[CatalogItem]:
    """Rank catalog items against a query with the default scorer."""
    return _default_scorer.rank(items, query)
