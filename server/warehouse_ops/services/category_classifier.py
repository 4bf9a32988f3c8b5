"""
Category Classifier.

Maps a material / bin code to a product category:

1. Normalize the code (strip, upper-case)
2. Exact-match lookup in the curated catalogue -> return immediately
3. First matching rule of the ordered heuristic list
4. Fallback: "Others"

classify() is total: every input, including None, "" and garbage, yields a
CategoryLabel and nothing is ever raised.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from warehouse_ops.services.category_labels import FALLBACK_CATEGORY, CategoryLabel
from warehouse_ops.services.category_rules import CLASSIFICATION_RULES, ClassificationRule
from warehouse_ops.services.category_table import EXACT_MATCH_TABLE
from warehouse_ops.services.code_normalizer import normalize


def first_matching_rule(
    code: Any,
    rules: Sequence[ClassificationRule] = CLASSIFICATION_RULES,
) -> Optional[ClassificationRule]:
    """Return the first rule whose predicate accepts the normalized code."""
    normalized = normalize(code)
    if not normalized:
        return None
    for rule in rules:
        if rule.matches(normalized):
            return rule
    return None


def classify_with(
    code: Any,
    table: Mapping[str, CategoryLabel],
    rules: Sequence[ClassificationRule],
    fallback: CategoryLabel = FALLBACK_CATEGORY,
) -> CategoryLabel:
    """Classify against an explicit table and rule list."""
    normalized = normalize(code)
    if not normalized:
        return fallback

    exact = table.get(normalized)
    if exact is not None:
        return exact

    rule = first_matching_rule(normalized, rules)
    if rule is not None:
        return rule.category

    return fallback


def classify(code: Any) -> CategoryLabel:
    """Classify a code against the production catalogue and rule list."""
    return classify_with(code, EXACT_MATCH_TABLE, CLASSIFICATION_RULES)


def is_exact_match(code: Any) -> bool:
    """Whether the code is listed in the curated catalogue."""
    return normalize(code) in EXACT_MATCH_TABLE
