"""Tests for meal logging."""

from datetime import UTC, datetime
from uuid import uuid4

from macro_tracker.domain.macros import FoodBreakdownItem, MacroNutrients, MealAnalysis
from macro_tracker.services.meals import MealLogService
from tests.conftest import InMemoryMealEntryRepository


def _analysis() -> MealAnalysis:
    return MealAnalysis(
        macros=MacroNutrients(protein=49, carbs=28, fat=6, calories=378),
        breakdown=[
            FoodBreakdownItem("Chicken", "150g", 46, 0, 5, 248),
            FoodBreakdownItem("Rice", "100g", 3, 28, 1, 130),
        ],
        reasoning="chicken and rice",
    )


def test_save_analysis_uses_timestamp_date(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    service = MealLogService(meal_repository)
    logged_at = datetime(2024, 5, 1, 23, 30, tzinfo=UTC)

    meal = service.save_analysis("user-1", "chicken and rice", _analysis(), logged_at)

    assert meal.date == logged_at.date()
    assert meal.macros.calories == 378
    assert service.meals_for_date("user-1", logged_at.date()) == [meal]
    assert service.history("user-1") == [meal]


def test_update_breakdown_recomputes_totals(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    service = MealLogService(meal_repository)
    meal = service.save_analysis("user-1", "chicken and rice", _analysis())

    updated = service.update_meal(
        "user-1",
        meal.id,
        breakdown=[FoodBreakdownItem("Chicken", "200g", 62, 0, 7, 330)],
    )

    assert updated is not None
    assert updated.macros == MacroNutrients(protein=62, carbs=0, fat=7, calories=330)


def test_update_macros_keeps_breakdown(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    service = MealLogService(meal_repository)
    meal = service.save_analysis("user-1", "chicken and rice", _analysis())
    macros = MacroNutrients(protein=50, carbs=30, fat=6, calories=374)

    updated = service.update_meal("user-1", meal.id, macros=macros)

    assert updated is not None
    assert updated.macros == macros
    assert updated.breakdown == meal.breakdown


def test_other_users_cannot_edit_or_delete(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    service = MealLogService(meal_repository)
    meal = service.save_analysis("user-1", "chicken and rice", _analysis())

    assert service.get_meal("user-2", meal.id) is None
    assert service.update_meal("user-2", meal.id, macros=meal.macros) is None
    assert service.delete_meal("user-2", meal.id) is False
    assert service.delete_meal("user-1", meal.id) is True
    assert service.delete_meal("user-1", uuid4()) is False
    assert service.history("user-1") == []
