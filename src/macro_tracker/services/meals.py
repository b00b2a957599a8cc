"""Meal logging service."""

from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.macros import FoodBreakdownItem, MacroNutrients, MealAnalysis
from macro_tracker.domain.meals import MealEntry


class MealEntryRepository(Protocol):
    """Persistence interface for logged meals."""

    def create_meal(
        self,
        user_id: str,
        timestamp: datetime,
        day: date,
        original_text: str,
        analysis: MealAnalysis,
    ) -> MealEntry:
        """Store a meal and return it with its assigned id."""

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        """Return a meal by id."""

    def list_meals(self, user_id: str) -> list[MealEntry]:
        """Return every meal of a user, newest first."""

    def list_meals_by_date(self, user_id: str, day: date) -> list[MealEntry]:
        """Return a user's meals for one day."""

    def update_meal(
        self,
        meal_id: UUID,
        macros: MacroNutrients,
        breakdown: list[FoodBreakdownItem],
    ) -> MealEntry | None:
        """Replace macros and breakdown of a meal."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal."""


@dataclass
class MealLogService:
    """Stores analyses as meal entries and applies user edits."""

    repository: MealEntryRepository

    def save_analysis(
        self,
        user_id: str,
        original_text: str,
        analysis: MealAnalysis,
        logged_at: datetime | None = None,
    ) -> MealEntry:
        """Persist an analysis for the user."""
        timestamp = logged_at or datetime.now(tz=UTC)
        return self.repository.create_meal(
            user_id=user_id,
            timestamp=timestamp,
            day=timestamp.date(),
            original_text=original_text,
            analysis=analysis,
        )

    def history(self, user_id: str) -> list[MealEntry]:
        """Return the user's stored meals."""
        return self.repository.list_meals(user_id)

    def meals_for_date(self, user_id: str, day: date) -> list[MealEntry]:
        return self.repository.list_meals_by_date(user_id, day)

    def get_meal(self, user_id: str, meal_id: UUID) -> MealEntry | None:
        """Return a meal owned by the user."""
        meal = self.repository.get_meal(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def update_meal(
        self,
        user_id: str,
        meal_id: UUID,
        macros: MacroNutrients | None = None,
        breakdown: list[FoodBreakdownItem] | None = None,
    ) -> MealEntry | None:
        """Apply edited macros or breakdown items.

        When only the breakdown changes, totals are recomputed from the items.
        """
        meal = self.get_meal(user_id, meal_id)
        if meal is None:
            return None
        new_breakdown = breakdown if breakdown is not None else meal.breakdown
        if macros is None:
            macros = (
                _sum_breakdown(new_breakdown, meal.macros)
                if breakdown is not None
                else meal.macros
            )
        return self.repository.update_meal(meal_id, macros, new_breakdown)

    def delete_meal(self, user_id: str, meal_id: UUID) -> bool:
        """Delete a meal owned by the user; False when not found."""
        if self.get_meal(user_id, meal_id) is None:
            return False
        self.repository.delete_meal(meal_id)
        return True


def _sum_breakdown(
    items: list[FoodBreakdownItem], current: MacroNutrients
) -> MacroNutrients:
    return replace(
        current,
        protein=sum(item.protein for item in items),
        carbs=sum(item.carbs for item in items),
        fat=sum(item.fat for item in items),
        calories=sum(item.calories for item in items),
    )
