"""
Ordered heuristic rules for material codes missing from the exact-match table.

Rules are evaluated top to bottom and the first match wins. Prefix families
overlap (a TD00383 code is claimed by TV, Cooker and Range Hood; CEACN is
claimed by both washer families), so the order below decides the outcome and
must not be re-sorted. Some later entries can never fire because an earlier
rule already covers them (commercial washer, most of AA1-AA5); they stay in
place all the same.

Keyword rules for promotional / non-serialized items come last so structured
prefixes are always tried first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from warehouse_ops.services.category_labels import CategoryLabel

Predicate = Callable[[str], bool]


# =============================================================================
# Predicate combinators (all operate on an already-normalized code)
# =============================================================================


def starts_with(*prefixes: str) -> Predicate:
    """Code starts with any of the prefixes."""
    def _match(code: str) -> bool:
        return code.startswith(prefixes)
    return _match


def contains(*tokens: str) -> Predicate:
    """Code contains any of the tokens."""
    def _match(code: str) -> bool:
        return any(token in code for token in tokens)
    return _match


def equals(*codes: str) -> Predicate:
    """Code is exactly one of the given codes."""
    wanted = frozenset(codes)

    def _match(code: str) -> bool:
        return code in wanted
    return _match


def length_is(length: int) -> Predicate:
    def _match(code: str) -> bool:
        return len(code) == length
    return _match


def any_of(*predicates: Predicate) -> Predicate:
    def _match(code: str) -> bool:
        return any(predicate(code) for predicate in predicates)
    return _match


def all_of(*predicates: Predicate) -> Predicate:
    def _match(code: str) -> bool:
        return all(predicate(code) for predicate in predicates)
    return _match


def not_(predicate: Predicate) -> Predicate:
    def _match(code: str) -> bool:
        return not predicate(code)
    return _match


@dataclass(frozen=True)
class ClassificationRule:
    """A named predicate and the category it yields."""

    name: str
    category: CategoryLabel
    predicate: Predicate

    def matches(self, code: str) -> bool:
        return self.predicate(code)


# =============================================================================
# Rule list
# =============================================================================

PROMO_KEYWORDS = (
    "APRON",
    "GLOVES",
    "FLAG",
    "UMBRELLA",
    "T-SHIRT",
    "CALENDAR",
    "CLOCK",
    "TUMBLER",
    "TEARDROP",
    "ROLL-UP",
    "POWERED FAN",
    "JBL",
    "LUMINARC",
    "RUBBERMAID",
    "SURF",
    "LOOT BAG",
    "DYMX",
    "DYMV",
)

CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule(
        "freezer-prefixes",
        CategoryLabel.freezer,
        starts_with(
            "B30", "BD07", "BF0G", "BW0", "BY0", "BB09", "B401", "BE06",
            "TD00438", "TD00453", "TD00141",
        ),
    ),
    ClassificationRule(
        "refrigerator-prefixes",
        CategoryLabel.refrigerator,
        any_of(
            starts_with(
                "B00", "BS0", "BA0A", "BH0", "BJ0", "BL0", "BM03", "BC1", "B70", "BK0Y",
            ),
            equals("TD0044921"),
            starts_with("BC0XD30AE", "TD00252", "TD00449", "TD00463", "TD00272"),
        ),
    ),
    ClassificationRule(
        "tv-prefixes",
        CategoryLabel.tv,
        any_of(
            starts_with(
                "DH1", "DC1", "DD10", "DA1", "DA0", "DT0", "DZ0", "FZ03", "F100",
                "FA08G", "F705V",
                "TD00299", "TD00426", "TD00383", "TD00139",
            ),
            # wall-mount kits ship under the TV line
            contains("BRKT", "BRACKET"),
        ),
    ),
    ClassificationRule(
        "drum-washing-machine-prefixes",
        CategoryLabel.drum_washing_machine,
        starts_with("CF0", "CE0", "CEAA", "CEAB", "CEAC"),
    ),
    ClassificationRule(
        "washing-machine-prefixes",
        CategoryLabel.washing_machine,
        starts_with(
            "CAABT", "CA0", "CAAB", "CAAC", "CB0", "CBAG", "CBAH", "CBAJ", "CBAK",
            "CBAL", "CBAM", "CC0JR", "CG0LL",
            "TD00266", "TD00297", "TD00139",
        ),
    ),
    ClassificationRule(
        "home-air-conditioner-prefixes",
        CategoryLabel.home_air_conditioner,
        any_of(
            # AA8 / AA9Z / AA0 belong to the commercial range
            all_of(starts_with("AA"), not_(starts_with("AA8", "AA9Z", "AA0"))),
            starts_with("AD0", "TD00477"),
        ),
    ),
    ClassificationRule(
        "commercial-ac-prefixes",
        CategoryLabel.commercial_ac,
        any_of(
            starts_with("AA8", "AA0", "AA9Z"),
            all_of(starts_with("AA1"), contains("E29")),
            starts_with("AA2", "AA3", "AA5", "AC", "AE1", "AZ0"),
            all_of(starts_with("AB"), length_is(9)),
            contains("CKRV", "CMVE"),
        ),
    ),
    ClassificationRule(
        "commercial-washer-prefixes",
        CategoryLabel.commercial_washer,
        starts_with("CEACN", "CEACE", "CF0J4"),
    ),
    ClassificationRule(
        "small-appliances-prefixes",
        CategoryLabel.small_appliances,
        starts_with("F705V", "FP00", "FX50", "TD00178", "TD00272"),
    ),
    ClassificationRule(
        "cooktop-prefixes",
        CategoryLabel.cooktop,
        starts_with("FB28U", "TD00278"),
    ),
    ClassificationRule(
        "cooker-prefixes",
        CategoryLabel.cooker,
        starts_with(
            "FY01K",
            "TD00413", "TD00383", "TD00388", "TD00257", "TD00318", "TD00371", "TD00356",
            "TD00325", "TD00426", "TD00393", "TD00308", "TD00419", "TD00517",
        ),
    ),
    ClassificationRule(
        "range-hood-prefixes",
        CategoryLabel.range_hood,
        starts_with("TD00261", "TD00325", "TD00383", "TD00419"),
    ),
    ClassificationRule(
        "water-heater-prefixes",
        CategoryLabel.water_heater,
        starts_with("GA0T2"),
    ),
    ClassificationRule(
        "microwave-oven-prefixes",
        CategoryLabel.microwave_oven,
        starts_with("GB0E", "GX01"),
    ),
    ClassificationRule(
        "promotional-and-placeholder-items",
        CategoryLabel.others,
        any_of(
            contains("MOCKUP", "#N/A"),
            starts_with("RESERVE"),
            contains(*PROMO_KEYWORDS),
            starts_with(
                "TD00399", "TD00373", "TD00397", "TD00368", "TD00403", "TD00404", "TD00139",
            ),
        ),
    ),
)
