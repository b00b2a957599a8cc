"""Tests for meal history reuse."""

from datetime import UTC, datetime
from uuid import uuid4

from macro_tracker.domain.macros import MacroNutrients
from macro_tracker.domain.meals import MealEntry
from macro_tracker.services.history import (
    find_reusable_meal,
    normalize_description,
    word_similarity,
)
from macro_tracker.services.quantities import classify_quantities


def _meal(text: str, protein: int = 20) -> MealEntry:
    now = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    return MealEntry(
        id=uuid4(),
        user_id="user-1",
        timestamp=now,
        date=now.date(),
        original_text=text,
        macros=MacroNutrients(protein=protein, carbs=40, fat=10, calories=330),
    )


def _find(description: str, history: list[MealEntry], **kwargs) -> MealEntry | None:  # type: ignore[no-untyped-def]
    return find_reusable_meal(
        description, classify_quantities(description), history, **kwargs
    )


def test_normalize_description() -> None:
    assert normalize_description("Some Chicken, and Rice!") == "some chicken rice"
    assert normalize_description("kyckling med ris") == "kyckling ris"


def test_word_similarity() -> None:
    assert word_similarity("chicken rice", "chicken rice") == 1.0
    assert word_similarity("some chicken rice", "chicken rice") == 2 / 3
    assert word_similarity("", "") == 0.0


def test_vague_exact_match_is_reused() -> None:
    stored = _meal("Some chicken & rice")

    match = _find("some chicken and rice", [_meal("pasta"), stored])

    assert match is stored


def test_explicit_quantity_never_reuses() -> None:
    stored = _meal("5 bananas", protein=2)

    assert _find("2 bananas", [stored]) is None
    assert _find("150g chicken breast", [_meal("150g chicken breast")]) is None


def test_quantified_history_entries_are_skipped() -> None:
    assert _find("chicken and rice", [_meal("200g chicken and rice")]) is None


def test_similarity_threshold() -> None:
    stored = _meal("chicken rice")

    assert _find("some chicken rice", [stored]) is None
    assert _find("some chicken rice", [stored], threshold=0.6) is stored


def test_history_errors_mean_no_match() -> None:
    def broken_history():  # type: ignore[no-untyped-def]
        yield _meal("pasta")
        raise RuntimeError("storage unavailable")

    assert _find("some soup", broken_history()) is None
