"""Tests for the static food catalog."""

from macro_tracker.domain.food_catalog import FOOD_DATABASE
from macro_tracker.services.food_catalog import (
    calculate_macros_for_amount,
    format_food_context,
    get_all_categories,
    get_food_by_id,
    get_foods_by_category,
    relevant_foods_for_description,
    search_food_database,
)


def test_catalog_entries_are_unique_and_verified() -> None:
    ids = [food.id for food in FOOD_DATABASE]

    assert len(ids) == len(set(ids))
    assert len(FOOD_DATABASE) > 200
    assert all(food.verified for food in FOOD_DATABASE)


def test_search_by_name_and_category() -> None:
    by_name = search_food_database("banana")
    by_category = search_food_database("alcoholic beverages", limit=3)

    assert any(food.id == "banana-medium" for food in by_name)
    assert len(by_category) == 3
    assert all(food.category == "Alcoholic Beverages" for food in by_category)


def test_empty_search_returns_head() -> None:
    assert search_food_database("", limit=2) == list(FOOD_DATABASE[:2])


def test_lookup_helpers() -> None:
    food = get_food_by_id("milk-whole")

    assert food is not None
    assert food.serving.unit == "ml"
    assert get_food_by_id("does-not-exist") is None
    assert all(f.category == "Fruits" for f in get_foods_by_category("fruits"))
    categories = get_all_categories()
    assert categories == sorted(categories)
    assert "Alcoholic Beverages" in categories


def test_calculate_macros_for_amount() -> None:
    chicken = get_food_by_id("chicken-breast-grilled")
    assert chicken is not None

    doubled = calculate_macros_for_amount(chicken, 200, "g")
    other_unit = calculate_macros_for_amount(chicken, 2, "cups")

    assert (doubled.protein_g, doubled.calories) == (62, 330)
    assert other_unit.protein_g == 31


def test_relevant_foods_are_deduplicated() -> None:
    foods = relevant_foods_for_description("chicken breast, chicken rice", limit=50)
    ids = [food.id for food in foods]

    assert len(ids) == len(set(ids))
    assert "chicken-breast-grilled" in ids
    assert "rice-white-cooked" in ids
    assert relevant_foods_for_description("a an of") == []


def test_format_food_context() -> None:
    banana = get_food_by_id("banana-medium")
    assert banana is not None

    text = format_food_context([banana])

    assert text == (
        "- Banana, Medium (1 medium banana): 1g protein, 27g carbs, 0g fat, "
        "105 kcal [USDA]"
    )


def test_serving_descriptions_keep_inch_marks() -> None:
    pizza = get_food_by_id("pizza-pepperoni-slice")
    waffle = get_food_by_id("waffle-plain")

    assert pizza is not None
    assert pizza.serving.description == '1 slice (1/8 of 14" pizza)'
    assert waffle is not None
    assert waffle.serving.description == '1 round waffle (7" dia)'
