"""Domain models for stored meals, goals and progress."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from macro_tracker.domain.macros import FoodBreakdownItem, MacroNutrients


@dataclass(frozen=True)
class MealEntry:
    """A meal logged by a user."""

    id: UUID
    user_id: str
    timestamp: datetime
    date: date
    original_text: str
    macros: MacroNutrients
    breakdown: list[FoodBreakdownItem] = field(default_factory=list)
    reasoning: str = ""
    validation: str = ""


@dataclass(frozen=True)
class MacroGoals:
    """Daily macro targets."""

    protein: int
    carbs: int
    fat: int
    calories: int


DEFAULT_GOALS = MacroGoals(protein=150, carbs=200, fat=70, calories=2000)


@dataclass(frozen=True)
class DailyProgress:
    """Totals for one day compared with goals."""

    date: date
    total_macros: MacroNutrients
    goals: MacroGoals
    meals: list[MealEntry]
