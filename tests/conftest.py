"""Shared test fixtures."""

import json
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from uuid import UUID, uuid4

import pytest

from macro_tracker.adapters.fdc_client import FdcClient
from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.macros import FoodBreakdownItem, MacroNutrients, MealAnalysis
from macro_tracker.domain.meals import MacroGoals, MealEntry
from macro_tracker.services.analysis import MealAnalysisService
from macro_tracker.services.cache import InMemoryCache
from macro_tracker.services.estimation import EstimationService, EstimatorClient
from macro_tracker.services.goals import GoalsRepository, GoalsService
from macro_tracker.services.meals import MealEntryRepository, MealLogService
from macro_tracker.services.nutrition import NutritionService
from macro_tracker.services.progress import ProgressService

CHICKEN_RICE_RESPONSE = {
    "protein": 49,
    "carbs": 28,
    "fat": 6,
    "calories": 378,
    "breakdown": [
        {
            "food": "Chicken breast, grilled",
            "estimatedAmount": "150g",
            "protein": 46,
            "carbs": 0,
            "fat": 5,
            "calories": 248,
        },
        {
            "food": "White rice, cooked",
            "estimatedAmount": "100g",
            "protein": 3,
            "carbs": 28,
            "fat": 1,
            "calories": 130,
        },
    ],
    "reasoning": "Grilled chicken and cooked rice.",
    "validation": "",
}


@dataclass
class InMemoryMealEntryRepository(MealEntryRepository):
    """In-memory meal entry repository for tests."""

    meals: dict[UUID, MealEntry] = field(default_factory=dict)

    def create_meal(
        self,
        user_id: str,
        timestamp: datetime,
        day: date,
        original_text: str,
        analysis: MealAnalysis,
    ) -> MealEntry:
        meal = MealEntry(
            id=uuid4(),
            user_id=user_id,
            timestamp=timestamp,
            date=day,
            original_text=original_text,
            macros=analysis.macros,
            breakdown=list(analysis.breakdown),
            reasoning=analysis.reasoning,
            validation=analysis.validation,
        )
        self.meals[meal.id] = meal
        return meal

    def get_meal(self, meal_id: UUID) -> MealEntry | None:
        return self.meals.get(meal_id)

    def list_meals(self, user_id: str) -> list[MealEntry]:
        owned = [meal for meal in self.meals.values() if meal.user_id == user_id]
        return sorted(owned, key=lambda meal: meal.timestamp, reverse=True)

    def list_meals_by_date(self, user_id: str, day: date) -> list[MealEntry]:
        return [
            meal
            for meal in self.meals.values()
            if meal.user_id == user_id and meal.date == day
        ]

    def update_meal(
        self,
        meal_id: UUID,
        macros: MacroNutrients,
        breakdown: list[FoodBreakdownItem],
    ) -> MealEntry | None:
        meal = self.meals.get(meal_id)
        if meal is None:
            return None
        updated = replace(meal, macros=macros, breakdown=list(breakdown))
        self.meals[meal_id] = updated
        return updated

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository for tests."""

    goals: dict[str, MacroGoals] = field(default_factory=dict)

    def get_goals(self, user_id: str) -> MacroGoals | None:
        return self.goals.get(user_id)

    def set_goals(self, user_id: str, goals: MacroGoals) -> None:
        self.goals[user_id] = goals


@dataclass
class FakeEstimatorClient(EstimatorClient):
    """Fake estimator returning canned text and recording prompts."""

    text: str = json.dumps(CHICKEN_RICE_RESPONSE)
    error: Exception | None = None
    calls: list[tuple[str, str]] = field(default_factory=list)

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.text


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with one generic food."""

    async def search_foods(
        self, query: str, page_size: int = 25, data_types=()  # type: ignore[no-untyped-def]
    ) -> dict[str, object]:
        return {
            "foods": [
                {
                    "fdcId": 171077,
                    "description": "Chicken, broilers or fryers, breast, cooked",
                    "dataType": "SR Legacy",
                }
            ]
        }

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        return {
            "fdcId": fdc_id,
            "description": "Chicken, broilers or fryers, breast, cooked",
            "dataType": "SR Legacy",
            "foodNutrients": [
                {"nutrient": {"id": 1003, "number": "203"}, "amount": 31.0},
                {"nutrient": {"id": 1004, "number": "204"}, "amount": 3.6},
                {"nutrient": {"id": 1005, "number": "205"}, "amount": 0.0},
                {"nutrient": {"id": 1008, "number": "208"}, "amount": 165.0},
            ],
        }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        gemini_api_key="gemini-key",
        fdc_api_key="fdc-key",
        environment="test",
    )


@pytest.fixture
def meal_repository() -> InMemoryMealEntryRepository:
    return InMemoryMealEntryRepository()


@pytest.fixture
def goals_repository() -> InMemoryGoalsRepository:
    return InMemoryGoalsRepository()


@pytest.fixture
def estimator_client() -> FakeEstimatorClient:
    return FakeEstimatorClient()


@pytest.fixture
def container(
    settings: Settings,
    meal_repository: InMemoryMealEntryRepository,
    goals_repository: InMemoryGoalsRepository,
    estimator_client: FakeEstimatorClient,
) -> AppContainer:
    meal_log_service = MealLogService(meal_repository)
    goals_service = GoalsService(goals_repository)
    analysis_service = MealAnalysisService(
        estimation_service=EstimationService(client=estimator_client),
        meal_log_service=meal_log_service,
        similarity_threshold=settings.history_similarity_threshold,
        trust_reported_calories=settings.trust_reported_calories,
    )
    nutrition_service = NutritionService(
        fdc_client=FakeFdcClient(),
        cache=InMemoryCache(),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        analysis_service=analysis_service,
        meal_log_service=meal_log_service,
        goals_service=goals_service,
        progress_service=ProgressService(meal_log_service, goals_service),
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
