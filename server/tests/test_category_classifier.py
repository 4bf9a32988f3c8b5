"""
Unit tests for code normalization and category classification.

Covers:
- Totality (None, empty, garbage never raise)
- Case / whitespace insensitivity
- Exact-match table precedence over the heuristic rules
- First-match ordering of the rule list
- Fallback to "Others"
"""

from types import MappingProxyType

import pytest

from warehouse_ops.services.category_classifier import (
    classify,
    classify_with,
    first_matching_rule,
    is_exact_match,
)
from warehouse_ops.services.category_labels import FALLBACK_CATEGORY, CategoryLabel
from warehouse_ops.services.category_rules import (
    CLASSIFICATION_RULES,
    ClassificationRule,
    all_of,
    any_of,
    contains,
    equals,
    length_is,
    not_,
    starts_with,
)
from warehouse_ops.services.category_table import EXACT_MATCH_TABLE
from warehouse_ops.services.code_normalizer import normalize


# =============================================================================
# Normalizer
# =============================================================================


class TestNormalize:
    """Tests for code normalization."""

    def test_strips_and_uppercases(self):
        assert normalize("  bs0900eae \t") == "BS0900EAE"

    def test_none_is_empty(self):
        assert normalize(None) == ""

    def test_non_string_input(self):
        assert normalize(12345) == "12345"

    def test_idempotent(self):
        once = normalize(" aa8x ")
        assert normalize(once) == once


# =============================================================================
# Totality and fallback
# =============================================================================


class TestClassifyTotality:
    """classify() always returns a label."""

    @pytest.mark.parametrize("code", [None, "", "   ", "!!!", "ZZZZZZZZZ", "12345", 42])
    def test_never_raises(self, code):
        assert isinstance(classify(code), CategoryLabel)

    def test_empty_falls_back_to_others(self):
        assert classify("") == CategoryLabel.others
        assert classify(None) == CategoryLabel.others

    def test_unknown_code_falls_back_to_others(self):
        assert classify("ZZZZZZZZZ") == FALLBACK_CATEGORY


# =============================================================================
# Exact-match table
# =============================================================================


class TestExactMatch:
    """Tests for the curated catalogue."""

    def test_catalogued_refrigerator(self):
        assert classify("BS0900EAE") == CategoryLabel.refrigerator

    def test_lowercase_and_padded_input(self):
        assert classify("  bs0900eae ") == CategoryLabel.refrigerator

    def test_water_system_only_reachable_through_table(self):
        assert classify("FS03B7E") == CategoryLabel.water_system

    def test_table_overrides_prefix_rule(self):
        """AABE8EE00 would match the home AC prefix rule but is catalogued as commercial."""
        rule = first_matching_rule("AABE8EE00")
        assert rule is not None and rule.category == CategoryLabel.home_air_conditioner
        assert classify("AABE8EE00") == CategoryLabel.commercial_ac

    def test_table_overrides_overlapping_td_prefix(self):
        assert classify("TD0038391") == CategoryLabel.cooker
        assert classify("TD0038390") == CategoryLabel.range_hood

    def test_every_table_entry_classifies_to_its_label(self):
        for code, label in EXACT_MATCH_TABLE.items():
            assert classify(code) == label

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            EXACT_MATCH_TABLE["NEWCODE"] = CategoryLabel.tv  # type: ignore[index]

    def test_is_exact_match(self):
        assert is_exact_match("bs0900eae")
        assert not is_exact_match("ZZZZZZZZZ")


# =============================================================================
# Heuristic rules
# =============================================================================


class TestRuleOrdering:
    """First matching rule wins; the list order is significant."""

    def test_td00383_goes_to_tv_not_cooker_or_range_hood(self):
        assert classify("TD0038301") == CategoryLabel.tv

    def test_td00272_goes_to_refrigerator_not_small_appliances(self):
        assert classify("TD0027201") == CategoryLabel.refrigerator

    def test_td00139_goes_to_tv(self):
        assert classify("TD0013901") == CategoryLabel.tv

    def test_ceacn_goes_to_drum_washer_not_commercial_washer(self):
        assert classify("CEACN1234") == CategoryLabel.drum_washing_machine

    def test_aa8_is_commercial(self):
        assert classify("AA8123456") == CategoryLabel.commercial_ac

    def test_plain_aa_is_home_ac(self):
        assert classify("AA1234567") == CategoryLabel.home_air_conditioner

    def test_ab_prefix_needs_length_nine(self):
        assert classify("AB1234567") == CategoryLabel.commercial_ac
        assert classify("AB12345") == CategoryLabel.others

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("B30ABCDEF", CategoryLabel.freezer),
            ("DH1ABCDEF", CategoryLabel.tv),
            ("CF0ABCDEF", CategoryLabel.drum_washing_machine),
            ("CA0ABCDEF", CategoryLabel.washing_machine),
            ("AD0123456", CategoryLabel.home_air_conditioner),
            ("FP0012345", CategoryLabel.small_appliances),
            ("FB28U1234", CategoryLabel.cooktop),
            ("FY01K1234", CategoryLabel.cooker),
            ("TD0026101", CategoryLabel.range_hood),
            ("GA0T2XXXX", CategoryLabel.water_heater),
            ("GB0E12345", CategoryLabel.microwave_oven),
        ],
    )
    def test_prefix_families(self, code, expected):
        assert classify(code) == expected

    def test_tv_bracket_keyword(self):
        assert classify("WALL BRACKET 55") == CategoryLabel.tv

    @pytest.mark.parametrize("code", ["RESERVE1", "APRON XL", "SHOWROOM MOCKUP", "#N/A"])
    def test_promotional_and_placeholder_items(self, code):
        rule = first_matching_rule(code)
        assert rule is not None
        assert rule.name == "promotional-and-placeholder-items"
        assert classify(code) == CategoryLabel.others

    def test_keyword_rule_is_last(self):
        assert CLASSIFICATION_RULES[-1].name == "promotional-and-placeholder-items"

    def test_first_matching_rule_none_for_unknown(self):
        assert first_matching_rule("ZZZZZZZZZ") is None
        assert first_matching_rule("") is None


class TestClassifyWith:
    """The algorithm over caller-supplied data."""

    def test_earlier_rule_wins_on_overlap(self):
        rules = (
            ClassificationRule("first", CategoryLabel.tv, starts_with("XY")),
            ClassificationRule("second", CategoryLabel.cooker, starts_with("XY1")),
        )
        assert classify_with("XY123", {}, rules) == CategoryLabel.tv
        assert classify_with("XY123", {}, tuple(reversed(rules))) == CategoryLabel.cooker

    def test_table_beats_rules(self):
        table = MappingProxyType({"XY123": CategoryLabel.freezer})
        rules = (ClassificationRule("xy", CategoryLabel.tv, starts_with("XY")),)
        assert classify_with(" xy123 ", table, rules) == CategoryLabel.freezer
        assert classify_with("XY999", table, rules) == CategoryLabel.tv

    def test_custom_fallback(self):
        assert classify_with("nothing", {}, (), fallback=CategoryLabel.tv) == CategoryLabel.tv


class TestPredicates:
    """Tests for the predicate combinators."""

    def test_starts_with_any(self):
        assert starts_with("AB", "CD")("CDX")
        assert not starts_with("AB")("XAB")

    def test_contains(self):
        assert contains("RKT")("BRKT-1")

    def test_equals(self):
        assert equals("TD0044921")("TD0044921")
        assert not equals("TD0044921")("TD00449210")

    def test_length_is(self):
        assert length_is(3)("ABC")
        assert not length_is(3)("ABCD")

    def test_combinators(self):
        predicate = all_of(starts_with("AA"), not_(starts_with("AA8")))
        assert predicate("AA1")
        assert not predicate("AA8")
        assert any_of(equals("X"), equals("Y"))("Y")
