"""Fallback explanation text for an analysis."""

from macro_tracker.domain.macros import FoodBreakdownItem, MealAnalysis

_FORMULA = "calories = (4 x protein) + (4 x carbohydrates) + (9 x fat)"
_FORMULA_WITH_ALCOHOL = f"{_FORMULA} + (7 x alcohol)"


def generate_reasoning(description: str, analysis: MealAnalysis) -> str:
    """Describe how the totals were derived, item by item."""
    macros = analysis.macros
    has_alcohol = macros.alcohol_info is not None and macros.alcohol_info.alcohol > 0
    formula = _FORMULA_WITH_ALCOHOL if has_alcohol else _FORMULA
    lines = [
        f'Analysis of "{description}"',
        "",
        "Estimation method: based on standard nutritional databases and typical "
        f"serving sizes for similar foods, using {formula}.",
    ]
    items = analysis.breakdown
    if len(items) == 1:
        item = items[0]
        lines.append(
            f"For {item.food}, a {item.estimated_amount or 'standard'} portion "
            f"contains {_item_macros(item)}, which is {item.calories} calories."
        )
        return "\n".join(lines)

    if items:
        lines.append(f"This meal contains {len(items)} different ingredients:")
        for index, item in enumerate(items, start=1):
            amount = f" ({item.estimated_amount})" if item.estimated_amount else ""
            lines.append(
                f"{index}. {item.food}{amount}: {_item_macros(item)} "
                f"= {item.calories} calories"
            )
    alcohol_text = (
        f", {macros.alcohol_info.alcohol}g alcohol"
        if has_alcohol and macros.alcohol_info
        else ""
    )
    lines.append(
        f"Total: {macros.protein}g protein, {macros.carbs}g carbohydrates, "
        f"{macros.fat}g fat{alcohol_text} = {macros.calories} calories."
    )
    return "\n".join(lines)


def _item_macros(item: FoodBreakdownItem) -> str:
    text = f"{item.protein}g protein, {item.carbs}g carbohydrates, {item.fat}g fat"
    if item.alcohol:
        text += f", {item.alcohol}g alcohol"
    return text
