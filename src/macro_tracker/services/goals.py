"""Macro goal settings service."""

from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.meals import DEFAULT_GOALS, MacroGoals


class GoalsRepository(Protocol):
    """Persistence interface for macro goals."""

    def get_goals(self, user_id: str) -> MacroGoals | None:
        """Return the user's goals if set."""

    def set_goals(self, user_id: str, goals: MacroGoals) -> None:
        """Store the user's goals."""


@dataclass
class GoalsService:
    """Service for per-user macro goals."""

    repository: GoalsRepository

    def get_goals(self, user_id: str) -> MacroGoals:
        """Return the user's goals or the defaults when unset."""
        return self.repository.get_goals(user_id) or DEFAULT_GOALS

    def set_goals(self, user_id: str, goals: MacroGoals) -> MacroGoals:
        self.repository.set_goals(user_id, goals)
        return goals
