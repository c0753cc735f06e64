"""
Tests for query and product tokenization.
"""

from catalog_search.search.tokenizer import (
    STOP_WORDS,
    extract_terms,
    normalize_query,
    tokenize_words,
)


class TestNormalizeQuery:
    """Test query normalization."""

    def test_lowercase_and_trim(self):
        assert normalize_query("  Shilajit RESIN  ") == "shilajit resin"

    def test_inner_whitespace_kept(self):
        assert normalize_query("dry   skin") == "dry   skin"

    def test_empty(self):
        assert normalize_query("") == ""
        assert normalize_query("   ") == ""


class TestExtractTerms:
    """Test effective term extraction."""

    def test_stop_words_removed(self):
        assert extract_terms("good for dry skin") == ["good", "dry", "skin"]

    def test_single_characters_removed(self):
        assert extract_terms("x y oil") == ["oil"]

    def test_splits_on_whitespace_runs(self):
        assert extract_terms("  Shilajit \t  Resin\n") == ["shilajit", "resin"]

    def test_only_stop_words(self):
        assert extract_terms("the") == []
        assert extract_terms("a") == []
        assert extract_terms("for the and of") == []

    def test_blank_query(self):
        assert extract_terms("") == []
        assert extract_terms("    ") == []

    def test_duplicates_kept(self):
        assert extract_terms("oil oil") == ["oil", "oil"]

    def test_punctuation_is_part_of_term(self):
        assert extract_terms("oil, honey!") == ["oil,", "honey!"]

    def test_custom_stop_words(self):
        assert extract_terms("organic oil", stop_words=frozenset({"organic"})) == ["oil"]

    def test_stop_word_set(self):
        assert STOP_WORDS == {"for", "and", "the", "in", "of", "to", "a", "with", "is"}


class TestTokenizeWords:
    """Test product word bags."""

    def test_splits_on_non_word_characters(self):
        words = tokenize_words("Sun-Dried Apricots", "Dry Fruits", "A wholesome snack.")

        assert [w for w in words if w] == [
            "sun",
            "dried",
            "apricots",
            "dry",
            "fruits",
            "a",
            "wholesome",
            "snack",
        ]

    def test_lowercases(self):
        assert "shilajit" in tokenize_words("SHILAJIT", "", "")

    def test_empty_fields(self):
        assert [w for w in tokenize_words("", "", "") if w] == []
