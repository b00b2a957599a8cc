"""Detection of explicit quantities in free-text meal descriptions."""

import re
from dataclasses import dataclass

from macro_tracker.domain.quantities import ExtractedQuantity, QuantityAnalysis

_NUMBER = r"\d+(?:[.,]\d+)?"
_NUMBER_WORD = r"(?:one|two|three|four|five|six|seven|eight|nine|ten|a|an)"
_FOOD = r"[^\W\d_]+(?:[ \t]+[^\W\d_]+){0,2}"
_WEIGHT_UNIT = r"(?:kg|grams?|gramm?|g)"
_VOLUME_UNIT = (
    r"(?:ml|cl|dl|liters?|litres?|l|cups?|tablespoons?|teaspoons?"
    r"|tbsp|tsp|msk|tsk|krm)"
)
_PORTION_UNIT = r"(?:servings?|portions?|slices?|pieces?|scoops?)"
_CONTAINER = r"(?:glass(?:es)?|bowls?|plates?|cups?|bottles?|cans?|mugs?)"

_TRAILING_WORDS = frozenset({"and", "with", "of", "the", "och", "med", "plus"})


@dataclass(frozen=True)
class QuantityRule:
    """A named pattern with ``quantity`` and ``item`` groups."""

    name: str
    pattern: re.Pattern[str]


QUANTITY_RULES: tuple[QuantityRule, ...] = (
    QuantityRule(
        "weight_before_food",
        re.compile(
            rf"(?P<quantity>{_NUMBER}\s*{_WEIGHT_UNIT})\b\s+(?:of\s+)?(?P<item>{_FOOD})"
        ),
    ),
    QuantityRule(
        "weight_after_food",
        re.compile(rf"(?P<item>{_FOOD})\s+(?P<quantity>{_NUMBER}\s*{_WEIGHT_UNIT})\b"),
    ),
    QuantityRule(
        "volume_before_food",
        re.compile(
            rf"(?P<quantity>{_NUMBER}\s*{_VOLUME_UNIT})\b\s+(?:of\s+)?(?P<item>{_FOOD})"
        ),
    ),
    QuantityRule(
        "volume_after_food",
        re.compile(rf"(?P<item>{_FOOD})\s+(?P<quantity>{_NUMBER}\s*{_VOLUME_UNIT})\b"),
    ),
    # Broad on purpose: any "number word" pair counts, e.g. "2 bananas".
    QuantityRule(
        "count",
        re.compile(rf"\b(?P<quantity>{_NUMBER})\s+(?P<item>[^\W\d_]+)"),
    ),
    QuantityRule(
        "portion",
        re.compile(
            rf"\b(?P<quantity>(?:{_NUMBER}|{_NUMBER_WORD}|half|quarter|third)"
            rf"\s+{_PORTION_UNIT})\s+(?:of\s+)?(?P<item>{_FOOD})"
        ),
    ),
    QuantityRule(
        "fraction",
        re.compile(
            r"\b(?P<quantity>half|quarter|a\s+third)\s+(?:of\s+)?(?:an?\s+|the\s+)?"
            rf"(?P<item>{_FOOD})"
        ),
    ),
    QuantityRule(
        "container",
        re.compile(
            rf"\b(?P<quantity>(?:{_NUMBER}|{_NUMBER_WORD})\s+{_CONTAINER})"
            rf"\s+of\s+(?P<item>{_FOOD})"
        ),
    ),
)


def match_rule(rule: QuantityRule, text: str) -> list[ExtractedQuantity]:
    """Return the quantities a single rule finds in ``text``."""
    found: list[ExtractedQuantity] = []
    for match in rule.pattern.finditer(text.lower()):
        item = _clean_item(match.group("item"))
        if not item:
            continue
        quantity = " ".join(match.group("quantity").split())
        found.append(ExtractedQuantity(item=item, quantity=quantity, rule=rule.name))
    return found


def classify_quantities(
    description: str, rules: tuple[QuantityRule, ...] = QUANTITY_RULES
) -> QuantityAnalysis:
    """Classify a description as quantified or vague.

    Every rule runs over the whole text; a single match from any rule marks
    the description as having explicit quantities. Duplicate pairs found by
    overlapping rules are kept.
    """
    extracted: list[ExtractedQuantity] = []
    for rule in rules:
        extracted.extend(match_rule(rule, description))
    return QuantityAnalysis(
        has_explicit_quantities=bool(extracted),
        extracted_quantities=extracted,
    )


def _clean_item(raw: str) -> str:
    words = raw.split()
    while words and words[-1] in _TRAILING_WORDS:
        words.pop()
    while words and words[0] in _TRAILING_WORDS:
        words.pop(0)
    return " ".join(words)
