"""
Search module for product catalog relevance ranking.

Provides fuzzy matching, tokenization, intent rules and relevance scoring.
"""
from .fuzzy_matcher import FuzzyMatcher, levenshtein_distance
from .intent_rules import INTENT_RULES, IntentRule, intent_bonus
from .relevance_scorer import RelevanceScorer, ScoringWeights, rank
from .tokenizer import STOP_WORDS, extract_terms, normalize_query, tokenize_words

__all__ = [
    "FuzzyMatcher",
    "levenshtein_distance",
    "INTENT_RULES",
    "IntentRule",
    "intent_bonus",
    "RelevanceScorer",
    "ScoringWeights",
    "rank",
    "STOP_WORDS",
    "extract_terms",
    "normalize_query",
    "tokenize_words",
]
