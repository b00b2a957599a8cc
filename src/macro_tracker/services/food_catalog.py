"""Lookups over the static food catalog."""

from collections.abc import Sequence

from macro_tracker.domain.food_catalog import FOOD_DATABASE
from macro_tracker.domain.macros import round_half_up
from macro_tracker.domain.nutrition import FoodDatabaseItem, MacroProfile

PROMPT_CONTEXT_LIMIT = 10
_MIN_QUERY_WORD = 3


def search_food_database(
    query: str,
    limit: int = 20,
    catalog: Sequence[FoodDatabaseItem] = FOOD_DATABASE,
) -> list[FoodDatabaseItem]:
    """Substring search on name and category; empty query returns the head."""
    term = query.lower().strip()
    if not term:
        return list(catalog[:limit])
    matches = [
        food
        for food in catalog
        if term in food.name.lower() or term in food.category.lower()
    ]
    return matches[:limit]


def get_foods_by_category(
    category: str, catalog: Sequence[FoodDatabaseItem] = FOOD_DATABASE
) -> list[FoodDatabaseItem]:
    return [food for food in catalog if food.category.lower() == category.lower()]


def get_food_by_id(
    food_id: str, catalog: Sequence[FoodDatabaseItem] = FOOD_DATABASE
) -> FoodDatabaseItem | None:
    return next((food for food in catalog if food.id == food_id), None)


def get_all_categories(
    catalog: Sequence[FoodDatabaseItem] = FOOD_DATABASE,
) -> list[str]:
    return sorted({food.category for food in catalog})


def calculate_macros_for_amount(
    food: FoodDatabaseItem, amount: float, unit: str
) -> MacroProfile:
    """Scale catalog macros to ``amount``; mismatched units keep one serving."""
    multiplier = 1.0
    if food.serving.unit == unit and food.serving.amount > 0:
        multiplier = amount / food.serving.amount
    return MacroProfile(
        calories=round_half_up(food.macros.calories * multiplier),
        protein_g=round_half_up(food.macros.protein_g * multiplier),
        fat_g=round_half_up(food.macros.fat_g * multiplier),
        carbs_g=round_half_up(food.macros.carbs_g * multiplier),
    )


def relevant_foods_for_description(
    description: str,
    limit: int = PROMPT_CONTEXT_LIMIT,
    catalog: Sequence[FoodDatabaseItem] = FOOD_DATABASE,
) -> list[FoodDatabaseItem]:
    """Catalog entries whose name mentions a word of the description."""
    words = [
        word.strip(".,;:!?()")
        for word in description.lower().split()
        if len(word.strip(".,;:!?()")) >= _MIN_QUERY_WORD
    ]
    found: list[FoodDatabaseItem] = []
    seen: set[str] = set()
    for word in words:
        for food in catalog:
            if food.id in seen or word not in food.name.lower():
                continue
            seen.add(food.id)
            found.append(food)
            if len(found) >= limit:
                return found
    return found


def format_food_context(foods: Sequence[FoodDatabaseItem]) -> str:
    """Render catalog entries as prompt lines."""
    lines = []
    for food in foods:
        lines.append(
            f"- {food.name} ({food.serving.description}): "
            f"{food.macros.protein_g}g protein, {food.macros.carbs_g}g carbs, "
            f"{food.macros.fat_g}g fat, {food.macros.calories:.0f} kcal "
            f"[{food.source}]"
        )
    return "\n".join(lines)
