"""Tests for generated reasoning text."""

from macro_tracker.domain.macros import (
    AlcoholInfo,
    FoodBreakdownItem,
    MacroNutrients,
    MealAnalysis,
)
from macro_tracker.services.reasoning import generate_reasoning


def test_multi_item_reasoning_lists_items_and_total() -> None:
    analysis = MealAnalysis(
        macros=MacroNutrients(protein=49, carbs=28, fat=6, calories=378),
        breakdown=[
            FoodBreakdownItem("Chicken", "150g", 46, 0, 5, 248),
            FoodBreakdownItem("Rice", "100g", 3, 28, 1, 130),
        ],
    )

    text = generate_reasoning("chicken and rice", analysis)

    assert "This meal contains 2 different ingredients:" in text
    assert "1. Chicken (150g): 46g protein, 0g carbohydrates, 5g fat = 248 calories" in text
    assert text.endswith("Total: 49g protein, 28g carbohydrates, 6g fat = 378 calories.")
    assert "(7 x alcohol)" not in text


def test_alcohol_reasoning_mentions_alcohol_term() -> None:
    analysis = MealAnalysis(
        macros=MacroNutrients(
            protein=0,
            carbs=0,
            fat=0,
            calories=97,
            alcohol_info=AlcoholInfo.from_grams(13.9),
        ),
    )

    text = generate_reasoning("vodka shot", analysis)

    assert "(7 x alcohol)" in text
    assert "13.9g alcohol = 97 calories." in text
