"""
Tests for the fuzzy matcher.

Covers edit distance and bounded typo detection.
"""

import pytest

from catalog_search.search.fuzzy_matcher import FuzzyMatcher, levenshtein_distance


class TestLevenshteinDistance:
    """Test edit distance computation."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("kitten", "sitting", 3),
            ("", "", 0),
            ("abc", "abc", 0),
            ("abc", "", 3),
            ("", "abc", 3),
            ("shilajt", "shilajit", 1),
            ("flaw", "lawn", 2),
        ],
    )
    def test_known_distances(self, a, b, expected):
        """Test distances for well-known pairs."""
        assert levenshtein_distance(a, b) == expected

    def test_symmetric(self):
        """Test distance does not depend on argument order."""
        assert levenshtein_distance("apricot", "apricots") == levenshtein_distance(
            "apricots", "apricot"
        )

    def test_case_sensitive(self):
        """Test the matcher does not normalize case."""
        assert levenshtein_distance("Oil", "oil") == 1

    def test_score_cutoff(self):
        """Test distances above the cutoff collapse to cutoff + 1."""
        assert levenshtein_distance("kitten", "sitting", score_cutoff=1) == 2
        assert levenshtein_distance("kitten", "sitting", score_cutoff=3) == 3
        assert levenshtein_distance("shilajt", "shilajit", score_cutoff=2) == 1


class TestFuzzyMatcherInitialization:
    """Test fuzzy matcher initialization."""

    def test_default_initialization(self):
        """Test matcher initializes with default thresholds."""
        matcher = FuzzyMatcher()

        assert matcher.min_term_length == 4
        assert matcher.max_length_delta == 2
        assert matcher.max_distance == 2

    def test_custom_thresholds(self):
        """Test matcher with custom thresholds."""
        matcher = FuzzyMatcher(min_term_length=3, max_length_delta=1, max_distance=1)

        assert matcher.min_term_length == 3
        assert matcher.max_length_delta == 1
        assert matcher.max_distance == 1


class TestTypoDetection:
    """Test word-level typo matching."""

    def test_single_deletion(self):
        """Test a missing letter is tolerated."""
        assert FuzzyMatcher().is_typo_of("shilajt", "shilajit") is True

    def test_substitutions(self):
        """Test up to two substituted letters are tolerated."""
        assert FuzzyMatcher().is_typo_of("almunds", "almonds") is True
        assert FuzzyMatcher().is_typo_of("elmunds", "almonds") is True

    def test_three_edits_rejected(self):
        """Test words three edits apart don't match."""
        assert FuzzyMatcher().is_typo_of("elmundz", "almonds") is False

    def test_length_difference_rejected(self):
        """Test words much longer than the term don't match."""
        assert FuzzyMatcher().is_typo_of("shilajit", "shilajitresin") is False

    def test_unrelated_word_rejected(self):
        """Test unrelated words beyond distance 2 don't match."""
        assert FuzzyMatcher().is_typo_of("badam", "almonds") is False


class TestMatchesAny:
    """Test matching a term against a word bag."""

    def test_match_found(self):
        """Test a term matches if any word qualifies."""
        matcher = FuzzyMatcher()
        assert matcher.matches_any("apricott", ["sun", "dried", "apricots"]) is True

    def test_no_match(self):
        """Test no qualifying word."""
        matcher = FuzzyMatcher()
        assert matcher.matches_any("badam", ["almonds", "dry", "fruits"]) is False

    def test_short_term_never_matches(self):
        """Test terms of three letters or fewer are not fuzzy matched."""
        matcher = FuzzyMatcher()
        assert matcher.matches_any("oil", ["oil", "oils"]) is False

    def test_empty_words(self):
        """Test an empty word bag and empty fragments."""
        matcher = FuzzyMatcher()
        assert matcher.matches_any("honey", []) is False
        assert matcher.matches_any("honey", ["", ""]) is False

    def test_stops_at_first_match(self):
        """Test the word bag is not consumed past the first match."""
        matcher = FuzzyMatcher()
        consumed = []

        def words():
            for word in ["salt", "honey", "honeys", "money"]:
                consumed.append(word)
                yield word

        assert matcher.matches_any("honey", words()) is True
        assert consumed == ["salt", "honey"]


class TestGetStats:
    """Test matcher statistics."""

    def test_get_stats(self):
        """Test stats report thresholds and algorithm."""
        stats = FuzzyMatcher().get_stats()

        assert stats["max_distance"] == 2
        assert stats["max_length_delta"] == 2
        assert stats["min_term_length"] == 4
        assert stats["algorithm"] == "rapidfuzz.Levenshtein"
