"""Tests for the meal analysis pipeline."""

import asyncio
import json
from datetime import UTC, datetime

from macro_tracker.domain.macros import MacroNutrients, MealAnalysis
from macro_tracker.services.analysis import MealAnalysisService
from macro_tracker.services.estimation import EstimationService
from macro_tracker.services.meals import MealLogService
from tests.conftest import FakeEstimatorClient, InMemoryMealEntryRepository

BANANA_RESPONSE = {
    "protein": 3,
    "carbs": 54,
    "fat": 1,
    "calories": 210,
    "breakdown": [
        {
            "food": "Banana",
            "estimatedAmount": "2 medium",
            "protein": 3,
            "carbs": 54,
            "fat": 1,
            "calories": 210,
        }
    ],
}


def _service(
    client: FakeEstimatorClient, repository: InMemoryMealEntryRepository
) -> MealAnalysisService:
    return MealAnalysisService(
        estimation_service=EstimationService(client=client),
        meal_log_service=MealLogService(repository),
    )


def _store(repository: InMemoryMealEntryRepository, text: str, protein: int) -> None:
    repository.create_meal(
        user_id="user-1",
        timestamp=datetime(2024, 5, 1, 8, 0, tzinfo=UTC),
        day=datetime(2024, 5, 1, tzinfo=UTC).date(),
        original_text=text,
        analysis=MealAnalysis(
            macros=MacroNutrients(protein=protein, carbs=5, fat=1, calories=37),
            reasoning="stored",
        ),
    )


def test_explicit_quantity_goes_to_estimator(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    _store(meal_repository, "5 bananas", protein=2)
    client = FakeEstimatorClient(text=json.dumps(BANANA_RESPONSE))

    result = asyncio.run(_service(client, meal_repository).analyze("2 bananas", "user-1"))

    assert len(client.calls) == 1
    assert result.reused_from is None
    assert result.macros.calories == 210


def test_vague_exact_match_is_reused(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    _store(meal_repository, "Some chicken and rice", protein=2)
    stored = meal_repository.list_meals("user-1")[0]
    client = FakeEstimatorClient()

    result = asyncio.run(
        _service(client, meal_repository).analyze("some chicken and rice", "user-1")
    )

    assert client.calls == []
    assert result.reused_from == stored.id
    assert result.macros == stored.macros
    assert result.reasoning == "stored"


def test_recalculation_skips_history(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    _store(meal_repository, "some chicken and rice", protein=2)
    client = FakeEstimatorClient()
    previous = MacroNutrients(protein=2, carbs=5, fat=1, calories=37)

    result = asyncio.run(
        _service(client, meal_repository).analyze(
            "some chicken and rice",
            "user-1",
            is_recalculation=True,
            previous_result=previous,
        )
    )

    assert len(client.calls) == 1
    assert "PREVIOUS ANALYSIS" in client.calls[0][0]
    assert result.reused_from is None
    assert result.macros.protein == 49


def test_history_is_per_user(meal_repository: InMemoryMealEntryRepository) -> None:
    _store(meal_repository, "some chicken and rice", protein=2)
    client = FakeEstimatorClient()

    asyncio.run(
        _service(client, meal_repository).analyze("some chicken and rice", "user-2")
    )

    assert len(client.calls) == 1


def test_anonymous_requests_use_estimator() -> None:
    client = FakeEstimatorClient()
    service = MealAnalysisService(estimation_service=EstimationService(client=client))

    result = asyncio.run(service.analyze("some chicken and rice"))

    assert len(client.calls) == 1
    assert result.reasoning == "Grilled chicken and cooked rice."


def test_missing_reasoning_is_generated(
    meal_repository: InMemoryMealEntryRepository,
) -> None:
    client = FakeEstimatorClient(text=json.dumps(BANANA_RESPONSE))

    result = asyncio.run(_service(client, meal_repository).analyze("2 bananas"))

    assert result.reasoning.startswith('Analysis of "2 bananas"')
    assert "For Banana, a 2 medium portion" in result.reasoning


def test_history_failure_falls_back_to_estimator() -> None:
    class BrokenRepository(InMemoryMealEntryRepository):
        def list_meals(self, user_id: str):  # type: ignore[no-untyped-def]
            raise RuntimeError("storage down")

    client = FakeEstimatorClient()

    result = asyncio.run(
        _service(client, BrokenRepository()).analyze("some soup", "user-1")
    )

    assert len(client.calls) == 1
    assert result.macros.calories == 378
