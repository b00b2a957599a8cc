"""Supabase repository for meal entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.macros import (
    AlcoholInfo,
    FoodBreakdownItem,
    MacroNutrients,
    MealAnalysis,
)
from macro_tracker.domain.meals import MealEntry
from macro_tracker.services.meals import MealEntryRepository

_COLUMNS = (
    "id, user_id, timestamp, date, original_text, macros, breakdown, "
    "reasoning, validation"
)


@dataclass
class SupabaseMealEntryRepository(MealEntryRepository):
    """Supabase implementation for meal entries.

    Macros and breakdown are stored as JSON columns on ``meal_entries``.
    """

    client: Client

    def create_meal(
        self,
        user_id: str,
        timestamp: datetime,
        day: date,
        original_text: str,
        analysis: MealAnalysis,
    ) -> MealEntry:
        """Insert a meal entry row and return it."""
        response = (
            self.client.table("meal_entries")
            .insert(
                {
                    "user_id": user_id,
                    "timestamp": timestamp.isoformat(),
                    "date": day.isoformat(),
                    "original_text": original_text,
                    "macros": macros_to_json(analysis.macros),
                    "breakdown": [item_to_json(item) for item in analysis.breakdown],
                    "reasoning": analysis.reasoning,
                    "validation": analysis.validation,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal entry")
        return _parse_meal(response.data[0])

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        response = (
            self.client.table("meal_entries")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: str) -> list[MealEntry]:
        """Return a user's meals, newest first."""
        response = (
            self.client.table("meal_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("timestamp", desc=True)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def list_meals_by_date(self, user_id: str, day: date) -> list[MealEntry]:
        response = (
            self.client.table("meal_entries")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .order("timestamp", desc=False)
            .execute()
        )
        return [_parse_meal(row) for row in response.data or []]

    def update_meal(
        self,
        meal_id: UUID,
        macros: MacroNutrients,
        breakdown: list[FoodBreakdownItem],
    ) -> MealEntry | None:
        """Replace macros and breakdown of a stored meal."""
        response = (
            self.client.table("meal_entries")
            .update(
                {
                    "macros": macros_to_json(macros),
                    "breakdown": [item_to_json(item) for item in breakdown],
                }
            )
            .eq("id", str(meal_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def delete_meal(self, meal_id: UUID) -> None:
        self.client.table("meal_entries").delete().eq("id", str(meal_id)).execute()


def macros_to_json(macros: MacroNutrients) -> dict[str, object]:
    """Serialize macros in the client-facing JSON shape."""
    payload: dict[str, object] = {
        "protein": macros.protein,
        "carbs": macros.carbs,
        "fat": macros.fat,
        "calories": macros.calories,
    }
    if macros.alcohol_info:
        payload["alcohol_info"] = {
            "alcohol": macros.alcohol_info.alcohol,
            "total_alcohol_calories": macros.alcohol_info.total_alcohol_calories,
        }
    return payload


def item_to_json(item: FoodBreakdownItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "food": item.food,
        "estimatedAmount": item.estimated_amount,
        "protein": item.protein,
        "carbs": item.carbs,
        "fat": item.fat,
        "calories": item.calories,
    }
    if item.source is not None:
        payload["source"] = item.source
    if item.alcohol is not None:
        payload["alcohol"] = item.alcohol
    return payload


def _parse_macros(row: dict[str, object]) -> MacroNutrients:
    alcohol = row.get("alcohol_info") or None
    return MacroNutrients(
        protein=int(row.get("protein", 0)),
        carbs=int(row.get("carbs", 0)),
        fat=int(row.get("fat", 0)),
        calories=int(row.get("calories", 0)),
        alcohol_info=(
            AlcoholInfo(
                alcohol=float(alcohol.get("alcohol", 0.0)),
                total_alcohol_calories=int(alcohol.get("total_alcohol_calories", 0)),
            )
            if alcohol
            else None
        ),
    )


def _parse_item(row: dict[str, object]) -> FoodBreakdownItem:
    return FoodBreakdownItem(
        food=str(row.get("food", "")),
        estimated_amount=str(row.get("estimatedAmount", "")),
        protein=int(row.get("protein", 0)),
        carbs=int(row.get("carbs", 0)),
        fat=int(row.get("fat", 0)),
        calories=int(row.get("calories", 0)),
        source=row.get("source"),
        alcohol=float(row["alcohol"]) if row.get("alcohol") is not None else None,
    )


def _parse_meal(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(row["id"]),
        user_id=str(row["user_id"]),
        timestamp=datetime.fromisoformat(row["timestamp"]),
        date=date.fromisoformat(row["date"]),
        original_text=str(row.get("original_text", "")),
        macros=_parse_macros(row.get("macros") or {}),
        breakdown=[_parse_item(item) for item in row.get("breakdown") or []],
        reasoning=str(row.get("reasoning") or ""),
        validation=str(row.get("validation") or ""),
    )
