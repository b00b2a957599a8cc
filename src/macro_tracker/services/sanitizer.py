"""Sanitizing and cross-checking macro estimates."""

import logging
import math
from collections.abc import Mapping

from macro_tracker.domain.macros import (
    ALCOHOL_KCAL_PER_GRAM,
    AlcoholInfo,
    FoodBreakdownItem,
    MacroNutrients,
    MealAnalysis,
    round_half_up,
    round_tenth,
)

_logger = logging.getLogger(__name__)

ALCOHOL_KEYWORDS = (
    "beer",
    "wine",
    "vodka",
    "whiskey",
    "rum",
    "gin",
    "cocktail",
    "alcohol",
    "champagne",
    "mojito",
    "margarita",
    "tequila",
)

CALORIE_DIVERGENCE_KCAL = 10
BREAKDOWN_MACRO_TOLERANCE_G = 2
BREAKDOWN_CALORIE_TOLERANCE_KCAL = 10
MAX_PROTEIN_SHARE = 0.80
MAX_CARBS_SHARE = 0.95
MAX_FAT_SHARE = 0.90


def contains_alcohol(text: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in ALCOHOL_KEYWORDS)


def calculate_calories(protein: float, carbs: float, fat: float) -> int:
    """4-4-9 energy estimate."""
    return round_half_up(protein * 4 + carbs * 4 + fat * 9)


def sanitize_analysis(
    raw: Mapping[str, object],
    meal_description: str,
    *,
    trust_reported_calories: bool = True,
) -> MealAnalysis:
    """Clamp, reconcile and annotate a raw estimator response.

    With ``trust_reported_calories`` the model's calorie figure is kept even
    when it differs from 4-4-9, so alcohol and other non-macro energy
    survives. Inconsistencies become notes in ``validation``; they never
    change the numbers.
    """
    totals, raw_items = _split_payload(raw)
    notes: list[str] = []

    items = [
        _sanitize_item(item, trust_reported_calories, notes)
        for item in raw_items
        if isinstance(item, Mapping)
    ]
    alcohol_context = contains_alcohol(meal_description) or any(
        contains_alcohol(item.food) for item in items
    )
    macros = _sanitize_totals(
        totals, alcohol_context, trust_reported_calories, notes, meal_description
    )
    _check_macro_shares(macros, notes)
    _check_breakdown_sums(macros, items, notes)

    return MealAnalysis(
        macros=macros,
        breakdown=items,
        reasoning=str(raw.get("reasoning") or ""),
        validation=_merge_validation(raw.get("validation"), notes),
    )


def _split_payload(
    raw: Mapping[str, object],
) -> tuple[Mapping[str, object], list[object]]:
    nested = raw.get("total")
    totals = nested if isinstance(nested, Mapping) else raw
    items = raw.get("breakdown")
    if items is None:
        items = raw.get("ingredients")
    return totals, list(items) if isinstance(items, list) else []


def _sanitize_totals(
    totals: Mapping[str, object],
    alcohol_context: bool,
    trust_reported_calories: bool,
    notes: list[str],
    label: str,
) -> MacroNutrients:
    protein, carbs, fat = _clamped_macros(totals)
    alcohol = _alcohol_grams(totals)
    calories = _reconcile_calories(
        label,
        protein,
        carbs,
        fat,
        alcohol,
        totals.get("calories"),
        alcohol_context,
        trust_reported_calories,
        notes,
    )
    return MacroNutrients(
        protein=protein,
        carbs=carbs,
        fat=fat,
        calories=calories,
        alcohol_info=AlcoholInfo.from_grams(alcohol) if alcohol > 0 else None,
    )


def _sanitize_item(
    item: Mapping[str, object], trust_reported_calories: bool, notes: list[str]
) -> FoodBreakdownItem:
    name = str(item.get("food") or item.get("name") or "item")
    amount = str(
        item.get("estimatedAmount")
        or item.get("estimated_amount")
        or item.get("quantity")
        or ""
    )
    protein, carbs, fat = _clamped_macros(item)
    alcohol = _alcohol_grams(item)
    calories = _reconcile_calories(
        name,
        protein,
        carbs,
        fat,
        alcohol,
        item.get("calories"),
        contains_alcohol(name),
        trust_reported_calories,
        notes,
    )
    source = item.get("source")
    return FoodBreakdownItem(
        food=name,
        estimated_amount=amount,
        protein=protein,
        carbs=carbs,
        fat=fat,
        calories=calories,
        source=str(source) if source else None,
        alcohol=alcohol if alcohol > 0 else None,
    )


def _reconcile_calories(  # noqa: PLR0913
    label: str,
    protein: int,
    carbs: int,
    fat: int,
    alcohol: float,
    reported: object,
    alcohol_context: bool,
    trust_reported_calories: bool,
    notes: list[str],
) -> int:
    calculated = calculate_calories(protein, carbs, fat)
    with_alcohol = calculated + round_half_up(alcohol * ALCOHOL_KCAL_PER_GRAM)
    reported_value = _to_number(reported)
    if reported_value is None:
        return with_alcohol
    ai_calories = max(0, round_half_up(reported_value))
    if abs(ai_calories - calculated) > CALORIE_DIVERGENCE_KCAL:
        if alcohol_context:
            _logger.info(
                "%s: %s kcal reported vs %s kcal from 4-4-9; "
                "alcohol present, difference expected",
                label,
                ai_calories,
                calculated,
            )
        else:
            _logger.warning(
                "%s: %s kcal reported vs %s kcal from 4-4-9; "
                "trusting AI analysis regardless",
                label,
                ai_calories,
                calculated,
            )
            notes.append(
                f"{label}: reported {ai_calories} kcal differs from the "
                f"4-4-9 estimate of {calculated} kcal"
            )
    if trust_reported_calories:
        return ai_calories
    return with_alcohol


def _check_macro_shares(macros: MacroNutrients, notes: list[str]) -> None:
    total_grams = macros.protein + macros.carbs + macros.fat
    if total_grams <= 0:
        return
    shares = (
        ("protein", macros.protein / total_grams, MAX_PROTEIN_SHARE),
        ("carbs", macros.carbs / total_grams, MAX_CARBS_SHARE),
        ("fat", macros.fat / total_grams, MAX_FAT_SHARE),
    )
    for name, share, limit in shares:
        if share > limit:
            _logger.info("Unusual macro distribution: %s is %.0f%%", name, share * 100)
            notes.append(f"Unusual macro distribution: {name} is {share:.0%}")


def _check_breakdown_sums(
    macros: MacroNutrients, items: list[FoodBreakdownItem], notes: list[str]
) -> None:
    if not items:
        return
    sums = {
        "protein": sum(item.protein for item in items),
        "carbs": sum(item.carbs for item in items),
        "fat": sum(item.fat for item in items),
        "calories": sum(item.calories for item in items),
    }
    mismatched = [
        name
        for name in ("protein", "carbs", "fat")
        if abs(sums[name] - getattr(macros, name)) > BREAKDOWN_MACRO_TOLERANCE_G
    ]
    if abs(sums["calories"] - macros.calories) > BREAKDOWN_CALORIE_TOLERANCE_KCAL:
        mismatched.append("calories")
    if not mismatched:
        return
    detail = ", ".join(
        f"{name} {sums[name]} vs {getattr(macros, name)}" for name in mismatched
    )
    _logger.warning("Breakdown does not match totals: %s", detail)
    notes.append(f"Breakdown does not match totals ({detail})")


def _merge_validation(existing: object, notes: list[str]) -> str:
    text = str(existing or "").strip()
    for note in notes:
        if note not in text:
            text = f"{text} {note}." if text else f"{note}."
    return text


def _clamped_macros(values: Mapping[str, object]) -> tuple[int, int, int]:
    carbs = values.get("carbs")
    if carbs is None:
        carbs = values.get("carbohydrates")
    return (
        _clamp(values.get("protein")),
        _clamp(carbs),
        _clamp(values.get("fat")),
    )


def _alcohol_grams(values: Mapping[str, object]) -> float:
    raw = values.get("alcohol")
    info = values.get("alcohol_info")
    if raw is None and isinstance(info, Mapping):
        raw = info.get("alcohol")
    grams = _to_number(raw)
    if grams is None or grams <= 0:
        return 0.0
    return round_tenth(grams)


def _clamp(value: object) -> int:
    number = _to_number(value)
    if number is None:
        return 0
    return max(0, round_half_up(number))


def _to_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None
