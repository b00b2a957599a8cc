"""Tests for volume to weight conversions."""

from macro_tracker.services.conversions import (
    DEFAULT_GRAMS_PER_DL,
    conversions_for_prompt,
    weight_from_volume,
)


def test_exact_match() -> None:
    assert weight_from_volume("Havregryn", 2) == 70
    assert weight_from_volume("milk", 1) == 103


def test_partial_match() -> None:
    assert weight_from_volume("jasmine rice", 1) == 80


def test_unknown_ingredient_uses_default() -> None:
    assert weight_from_volume("moon dust", 2) == DEFAULT_GRAMS_PER_DL * 2


def test_prompt_is_grouped_by_category() -> None:
    text = conversions_for_prompt()

    assert text.startswith("Grains & Cereals:\n- 1 dl havregryn = 35g")
    assert "Sugars & Sweeteners:" in text
