"""
Rule-based intent bonuses.

Maps query terms that signal a shopping intent (skin care, energy,
snacking, pain relief) to product fields likely relevant to that intent.
Rules are plain data so they can be tested and extended without touching
the scorer.
"""

from dataclasses import dataclass
from typing import FrozenSet, Mapping, Sequence, Tuple

DEFAULT_INTENT_BONUS = 8

# Product fields a rule condition may inspect
INTENT_FIELDS = ("name", "category", "description")


@dataclass(frozen=True)
class IntentRule:
    """
    A single intent rule.

    Attributes:
        name: Rule identifier
        keywords: Query terms that signal the intent
        conditions: (field, needle) pairs; the rule fires if any lowercased
            field contains its needle
        bonus: Score added each time the rule fires
    """

    name: str
    keywords: FrozenSet[str]
    conditions: Tuple[Tuple[str, str], ...]
    bonus: int = DEFAULT_INTENT_BONUS

    def __post_init__(self):
        for field, _ in self.conditions:
            if field not in INTENT_FIELDS:
                raise ValueError(f"Unknown intent field: {field}")

    def applies_to(self, term: str, fields: Mapping[str, str]) -> bool:
        """
        Check if the rule fires for a term against an item's fields.

        Args:
            term: Lowercased query term
            fields: Lowercased item fields keyed by name
        """
        if term not in self.keywords:
            return False
        return any(needle in fields.get(field, "") for field, needle in self.conditions)


INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(
        name="skin_care",
        keywords=frozenset(
            {"skin", "face", "hair", "glow", "beauty", "moisturizing", "dry", "soft", "smooth"}
        ),
        conditions=(("category", "oil"), ("description", "skin"), ("description", "hair")),
    ),
    IntentRule(
        name="energy",
        keywords=frozenset(
            {"energy", "power", "strength", "stamina", "immune", "immunity", "weakness", "vitality"}
        ),
        conditions=(("category", "shilajit"), ("name", "shilajit")),
    ),
    IntentRule(
        name="snack",
        keywords=frozenset({"snack", "eat", "hungry", "diet", "healthy", "food", "munch"}),
        conditions=(("category", "dry fruits"), ("category", "natural foods")),
    ),
    IntentRule(
        name="pain_relief",
        keywords=frozenset({"pain", "joint", "relief", "muscle", "relax"}),
        conditions=(("category", "oil"), ("name", "massage"), ("name", "shilajit")),
    ),
)


def intent_bonus(
    term: str,
    fields: Mapping[str, str],
    rules: Sequence[IntentRule] = INTENT_RULES,
) -> int:
    """
    Total intent bonus for one term. Every firing rule contributes.

    Examples:
        intent_bonus("pain", {"name": "shilajit resin", "category": "shilajit",
                              "description": ""}) -> 8
    """
    return sum(rule.bonus for rule in rules if rule.applies_to(term, fields))
