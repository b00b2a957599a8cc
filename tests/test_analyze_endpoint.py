"""Tests for the analyze-meal endpoint."""

from datetime import UTC, datetime

from fastapi.testclient import TestClient

from macro_tracker.api.app import create_app
from macro_tracker.domain.macros import MacroNutrients, MealAnalysis
from macro_tracker.services.estimation import (
    EstimationAuthError,
    EstimationConfigError,
    EstimationUpstreamError,
)
from tests.conftest import FakeEstimatorClient, InMemoryMealEntryRepository


def test_analyze_meal_returns_analysis(
    container, estimator_client: FakeEstimatorClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analyze-meal",
        json={"mealDescription": "150g chicken breast, 100g rice"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["calories"] == 378
    assert data["protein"] == 49
    assert data["breakdown"][0]["estimatedAmount"] == "150g"
    assert data["reasoning"] == "Grilled chicken and cooked rice."
    assert "validation" in data
    assert "reusedFrom" not in data
    assert len(estimator_client.calls) == 1


def test_analyze_meal_reuses_history_for_known_user(
    container,
    meal_repository: InMemoryMealEntryRepository,
    estimator_client: FakeEstimatorClient,
) -> None:
    stored = meal_repository.create_meal(
        user_id="user-1",
        timestamp=datetime(2024, 5, 1, tzinfo=UTC),
        day=datetime(2024, 5, 1, tzinfo=UTC).date(),
        original_text="some chicken and rice",
        analysis=MealAnalysis(macros=MacroNutrients(30, 45, 8, 372)),
    )
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analyze-meal",
        json={"mealDescription": "Some chicken and rice"},
        headers={"X-User-Id": "user-1"},
    )

    assert response.status_code == 200
    assert response.json()["reusedFrom"] == str(stored.id)
    assert response.json()["calories"] == 372
    assert estimator_client.calls == []


def test_analyze_meal_recalculation_sends_previous_result(
    container, estimator_client: FakeEstimatorClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analyze-meal",
        json={
            "mealDescription": "pasta",
            "isRecalculation": True,
            "previousResult": {"protein": 12, "carbs": 70, "fat": 3, "calories": 355},
        },
    )

    assert response.status_code == 200
    assert "calories 355 kcal" in estimator_client.calls[0][0]


def test_analyze_meal_recalculation_accepts_alcohol_grams_only(
    container, estimator_client: FakeEstimatorClient
) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/api/analyze-meal",
        json={
            "mealDescription": "Guinness 568ml",
            "isRecalculation": True,
            "previousResult": {
                "protein": 2,
                "carbs": 18,
                "fat": 0,
                "calories": 210,
                "alcohol_info": {"alcohol": 18.8},
            },
        },
    )

    assert response.status_code == 200
    assert "calories 210 kcal" in estimator_client.calls[0][0]


def test_analyze_meal_validates_description(container) -> None:
    client = TestClient(create_app(container))

    for payload in ({}, {"mealDescription": 42}, {"mealDescription": "   "}):
        response = client.post("/api/analyze-meal", json=payload)
        assert response.status_code == 400
        assert "error" in response.json()

    for raw in (b"not json", b'{"mealDescription": "\xff\xfe"}'):
        response = client.post(
            "/api/analyze-meal",
            content=raw,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}


def test_analyze_meal_auth_error_is_403(
    container, estimator_client: FakeEstimatorClient
) -> None:
    estimator_client.error = EstimationAuthError("bad key")
    client = TestClient(create_app(container))

    response = client.post("/api/analyze-meal", json={"mealDescription": "toast"})

    assert response.status_code == 403
    assert "error" in response.json()


def test_analyze_meal_failures_are_500(
    container, estimator_client: FakeEstimatorClient
) -> None:
    client = TestClient(create_app(container))

    for error in (
        EstimationConfigError("LLM API key is not configured"),
        EstimationUpstreamError("Gemini request failed"),
        ValueError("boom"),
    ):
        estimator_client.error = error
        response = client.post("/api/analyze-meal", json={"mealDescription": "toast"})
        assert response.status_code == 500
        assert "error" in response.json()
        assert "details" not in response.json()


def test_unparsable_ai_output_is_500(
    container, estimator_client: FakeEstimatorClient
) -> None:
    estimator_client.text = "I cannot help with that."
    client = TestClient(create_app(container))

    response = client.post("/api/analyze-meal", json={"mealDescription": "toast"})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to analyze meal"


def test_health(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/health").json() == {"status": "ok"}
