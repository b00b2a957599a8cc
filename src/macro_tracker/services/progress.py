"""Daily progress against macro goals."""

from dataclasses import dataclass
from datetime import date

from macro_tracker.domain.macros import AlcoholInfo, MacroNutrients, round_tenth
from macro_tracker.domain.meals import DailyProgress, MealEntry
from macro_tracker.services.goals import GoalsService
from macro_tracker.services.meals import MealLogService


@dataclass
class ProgressService:
    """Aggregates a day's meals and pairs them with the user's goals."""

    meal_log_service: MealLogService
    goals_service: GoalsService

    def daily_progress(self, user_id: str, day: date) -> DailyProgress:
        """Return totals for ``day`` next to the user's goals."""
        meals = self.meal_log_service.meals_for_date(user_id, day)
        return DailyProgress(
            date=day,
            total_macros=_aggregate(meals),
            goals=self.goals_service.get_goals(user_id),
            meals=meals,
        )


def _aggregate(meals: list[MealEntry]) -> MacroNutrients:
    protein = carbs = fat = calories = 0
    alcohol = 0.0
    for meal in meals:
        protein += meal.macros.protein
        carbs += meal.macros.carbs
        fat += meal.macros.fat
        calories += meal.macros.calories
        if meal.macros.alcohol_info:
            alcohol += meal.macros.alcohol_info.alcohol
    return MacroNutrients(
        protein=protein,
        carbs=carbs,
        fat=fat,
        calories=calories,
        alcohol_info=AlcoholInfo.from_grams(round_tenth(alcohol)) if alcohol else None,
    )
