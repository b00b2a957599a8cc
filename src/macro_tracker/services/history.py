"""Reuse of earlier analyses for vague meal descriptions."""

import logging
import re
from collections.abc import Iterable

from macro_tracker.domain.meals import MealEntry
from macro_tracker.domain.quantities import QuantityAnalysis
from macro_tracker.services.quantities import classify_quantities

_logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.9
_MIN_WORD_LENGTH = 3
_SEPARATOR_WORDS = frozenset({"and", "with", "the", "a", "an", "of", "och", "med"})
_PUNCTUATION = re.compile(r"[^\w\s]")


def normalize_description(text: str) -> str:
    """Lowercase, drop punctuation and separator words, collapse whitespace."""
    cleaned = _PUNCTUATION.sub(" ", text.lower())
    words = [word for word in cleaned.split() if word not in _SEPARATOR_WORDS]
    return " ".join(words)


def word_similarity(first: str, second: str) -> float:
    """Share of words longer than two characters common to both texts."""
    words1 = first.split()
    words2 = second.split()
    longest = max(len(words1), len(words2))
    if longest == 0:
        return 0.0
    common = {word for word in words1 if len(word) >= _MIN_WORD_LENGTH} & {
        word for word in words2 if len(word) >= _MIN_WORD_LENGTH
    }
    return len(common) / longest


def find_reusable_meal(
    description: str,
    quantity_info: QuantityAnalysis,
    history: Iterable[MealEntry],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> MealEntry | None:
    """Return a stored vague meal matching ``description``, if any.

    Descriptions with explicit quantities never reuse a stored result. Only
    stored meals that are vague themselves are candidates. Lookup errors are
    logged and reported as no match.
    """
    if quantity_info.has_explicit_quantities:
        return None
    try:
        target = normalize_description(description)
        if not target:
            return None
        for meal in history:
            if classify_quantities(meal.original_text).has_explicit_quantities:
                continue
            candidate = normalize_description(meal.original_text)
            if candidate == target:
                _logger.info("Reusing exact match from meal %s", meal.id)
                return meal
            similarity = word_similarity(target, candidate)
            if similarity >= threshold:
                _logger.info(
                    "Reusing similar meal %s (similarity=%.2f)", meal.id, similarity
                )
                return meal
    except Exception:
        _logger.exception("Meal history lookup failed; falling back to estimation")
        return None
    return None
