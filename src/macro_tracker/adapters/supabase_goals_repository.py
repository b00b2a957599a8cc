"""Supabase repository for macro goals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from macro_tracker.domain.meals import MacroGoals
from macro_tracker.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for per-user macro goals."""

    client: Client

    def get_goals(self, user_id: str) -> MacroGoals | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("macro_goals")
            .select("protein, carbs, fat, calories")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return MacroGoals(
            protein=int(row["protein"]),
            carbs=int(row["carbs"]),
            fat=int(row["fat"]),
            calories=int(row["calories"]),
        )

    def set_goals(self, user_id: str, goals: MacroGoals) -> None:
        """Insert or replace the user's goals."""
        response = (
            self.client.table("macro_goals")
            .upsert(
                {
                    "user_id": user_id,
                    "protein": goals.protein,
                    "carbs": goals.carbs,
                    "fat": goals.fat,
                    "calories": goals.calories,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save macro goals")
