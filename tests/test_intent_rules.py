"""
Tests for rule-based intent bonuses.
"""

import pytest

from catalog_search.search.intent_rules import INTENT_RULES, IntentRule, intent_bonus


def fields(name="", category="", description=""):
    """Helper to build lowercased item fields."""
    return {"name": name, "category": category, "description": description}


class TestRuleTable:
    """Test the static rule table."""

    def test_rule_names(self):
        assert [rule.name for rule in INTENT_RULES] == [
            "skin_care",
            "energy",
            "snack",
            "pain_relief",
        ]

    def test_all_rules_award_eight(self):
        assert all(rule.bonus == 8 for rule in INTENT_RULES)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValueError):
            IntentRule(name="bad", keywords=frozenset({"x"}), conditions=(("brand", "x"),))


class TestSkinCareIntent:
    """Test the skin care rule."""

    def test_oil_category(self):
        assert intent_bonus("dry", fields(category="organic oils")) == 8

    def test_skin_in_description(self):
        assert intent_bonus("glow", fields(description="leaves skin soft")) == 8

    def test_hair_in_description(self):
        assert intent_bonus("beauty", fields(description="adds shine to hair")) == 8

    def test_no_relevant_field(self):
        assert intent_bonus("dry", fields(name="almonds", category="dry fruits")) == 0


class TestEnergyIntent:
    """Test the energy rule."""

    def test_shilajit_category(self):
        assert intent_bonus("stamina", fields(category="shilajit")) == 8

    def test_shilajit_name(self):
        assert intent_bonus("immunity", fields(name="shilajit capsules")) == 8

    def test_unrelated_product(self):
        assert intent_bonus("energy", fields(name="wild honey", category="natural foods")) == 0


class TestSnackIntent:
    """Test the snack rule."""

    def test_dry_fruits(self):
        assert intent_bonus("snack", fields(category="dry fruits")) == 8

    def test_natural_foods(self):
        assert intent_bonus("healthy", fields(category="natural foods")) == 8

    def test_only_category_counts(self):
        assert intent_bonus("food", fields(description="dry fruits and natural foods")) == 0


class TestPainReliefIntent:
    """Test the pain relief rule."""

    def test_oil_category(self):
        assert intent_bonus("joint", fields(category="organic oils")) == 8

    def test_massage_name(self):
        assert intent_bonus("muscle", fields(name="walnut massage balm")) == 8

    def test_shilajit_name(self):
        assert intent_bonus("pain", fields(name="shilajit resin")) == 8


class TestIntentBonus:
    """Test combining rules."""

    def test_non_keyword_term(self):
        assert intent_bonus("apricot", fields(category="organic oils")) == 0

    def test_rules_fire_independently(self):
        """Test every matching rule adds its bonus."""
        rules = (
            IntentRule("a", frozenset({"relax"}), (("category", "oil"),)),
            IntentRule("b", frozenset({"relax"}), (("name", "massage"),), bonus=3),
        )
        assert intent_bonus("relax", fields(name="massage oil", category="oil"), rules) == 11

    def test_empty_rule_table(self):
        assert intent_bonus("skin", fields(category="oil"), rules=()) == 0
