"""Domain models for macronutrient analysis."""

import math
from dataclasses import dataclass, field
from uuid import UUID

ALCOHOL_KCAL_PER_GRAM = 7


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


@dataclass(frozen=True)
class AlcoholInfo:
    """Alcohol content of a meal, in grams of ethanol."""

    alcohol: float
    total_alcohol_calories: int

    @classmethod
    def from_grams(cls, grams: float) -> "AlcoholInfo":
        """Build alcohol info with derived calories (7 kcal/g)."""
        return cls(
            alcohol=grams,
            total_alcohol_calories=round_half_up(grams * ALCOHOL_KCAL_PER_GRAM),
        )


@dataclass(frozen=True)
class MacroNutrients:
    """Protein, carbs and fat in grams plus calories in kcal."""

    protein: int
    carbs: int
    fat: int
    calories: int
    alcohol_info: AlcoholInfo | None = None


@dataclass(frozen=True)
class FoodBreakdownItem:
    """Per-food contribution to a meal."""

    food: str
    estimated_amount: str
    protein: int
    carbs: int
    fat: int
    calories: int
    source: str | None = None
    alcohol: float | None = None


@dataclass(frozen=True)
class MealAnalysis:
    """Sanitized analysis returned to clients."""

    macros: MacroNutrients
    breakdown: list[FoodBreakdownItem] = field(default_factory=list)
    reasoning: str = ""
    validation: str = ""
    reused_from: UUID | None = None
