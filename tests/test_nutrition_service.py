"""Tests for nutrition service."""

import asyncio
from dataclasses import dataclass

import httpx
import pytest

from macro_tracker.adapters.fdc_client import FdcClient
from macro_tracker.domain.nutrition import FoodSummary
from macro_tracker.services.cache import InMemoryCache
from macro_tracker.services.nutrition import (
    NutritionService,
    extract_macros_from_usda_food,
    pick_best_food_match,
)

OATS_PAYLOAD = {
    "fdcId": 173904,
    "description": "Oats",
    "dataType": "SR Legacy",
    "foodNutrients": [
        {"number": 203, "value": 16.89},
        {"number": 204, "value": 6.9},
        {"number": 205, "value": 66.27},
        {"number": 208, "value": 389},
    ],
}


@dataclass
class CountingFdcClient(FdcClient):
    search_calls: int = 0
    food_calls: int = 0
    failures: int = 0

    async def search_foods(
        self, query: str, page_size: int = 25, data_types=()  # type: ignore[no-untyped-def]
    ) -> dict[str, object]:
        self.search_calls += 1
        if self.failures:
            self.failures -= 1
            request = httpx.Request("POST", "https://fdc.test/foods/search")
            raise httpx.HTTPStatusError(
                "busy", request=request, response=httpx.Response(503, request=request)
            )
        return {
            "foods": [
                {
                    "fdcId": 999,
                    "description": "Kirkland chicken breast with rib meat marinated",
                    "brandOwner": "Costco",
                    "brandName": "Kirkland",
                    "dataType": "Branded",
                },
                {
                    "fdcId": 171077,
                    "description": "Chicken breast roasted",
                    "dataType": "SR Legacy",
                },
            ]
        }

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.food_calls += 1
        return {
            "fdcId": fdc_id,
            "description": "Chicken breast, roasted",
            "dataType": "SR Legacy",
            "servingSize": 100,
            "foodNutrients": [
                {"nutrientId": 1008, "amount": 165},
                {"nutrientId": 1003, "amount": 31},
                {"nutrientId": 1004, "amount": 3.6},
                {"nutrientId": 1005, "amount": 0},
            ],
        }


def test_extract_macros_per_100g() -> None:
    macros = extract_macros_from_usda_food(OATS_PAYLOAD)

    assert macros.protein_g == 16.9
    assert macros.fat_g == 6.9
    assert macros.carbs_g == 66.3
    assert macros.calories == 389


def test_doubling_portion_doubles_macros() -> None:
    single = extract_macros_from_usda_food(OATS_PAYLOAD, 100)
    double = extract_macros_from_usda_food(OATS_PAYLOAD, 200)

    assert double.calories == single.calories * 2
    assert double.protein_g == pytest.approx(single.protein_g * 2, abs=0.1)
    assert double.fat_g == pytest.approx(single.fat_g * 2, abs=0.1)
    assert double.carbs_g == pytest.approx(single.carbs_g * 2, abs=0.1)


def test_extract_supports_nested_nutrient_shape() -> None:
    payload = {
        "foodNutrients": [
            {"nutrient": {"id": 1003, "number": "203"}, "amount": 10},
            {"nutrient": {"number": "208"}, "amount": 50},
        ]
    }

    macros = extract_macros_from_usda_food(payload, 50)

    assert macros.protein_g == 5.0
    assert macros.calories == 25
    assert macros.fat_g == 0.0


def test_pick_best_food_match_prefers_generic_short_entries() -> None:
    results = [
        FoodSummary(1, "Milk chocolate candy bar with almonds", "Hershey", "Hershey", "Branded"),
        FoodSummary(2, "Milk, whole", None, None, "SR Legacy"),
        FoodSummary(3, "Meat loaf with milk gravy", None, None, "SR Legacy"),
    ]

    assert pick_best_food_match("whole milk", results).fdc_id == 2
    assert pick_best_food_match("milk", results[:1]).fdc_id == 1


def test_search_uses_cache() -> None:
    client = CountingFdcClient()
    service = NutritionService(client, InMemoryCache())

    results = asyncio.run(service.search("chicken breast", limit=2))
    assert results[0].fdc_id == 999
    assert client.search_calls == 1

    cached = asyncio.run(service.search("Chicken Breast", limit=2))
    assert cached[0].fdc_id == 999
    assert client.search_calls == 1


def test_search_retries_once() -> None:
    client = CountingFdcClient(failures=1)
    service = NutritionService(client, InMemoryCache(), retry_delay_seconds=0)

    results = asyncio.run(service.search("chicken", limit=2))

    assert len(results) == 2
    assert client.search_calls == 2


def test_get_food_returns_macros() -> None:
    client = CountingFdcClient()
    service = NutritionService(client, InMemoryCache())

    details = asyncio.run(service.get_food(171077))
    asyncio.run(service.get_food(171077))

    assert details.summary.description == "Chicken breast, roasted"
    assert details.macros.calories == 165
    assert details.macros.protein_g == 31
    assert details.serving_size_g == 100
    assert client.food_calls == 1


def test_search_and_get_nutrition_scales_portion() -> None:
    client = CountingFdcClient()
    service = NutritionService(client, InMemoryCache())

    lookup = asyncio.run(service.search_and_get_nutrition("chicken breast", 150))

    assert lookup is not None
    assert lookup.food.summary.fdc_id == 171077
    assert lookup.macros.protein_g == 46.5
    assert lookup.macros.calories == 248


def test_search_and_get_nutrition_returns_none_on_failure() -> None:
    client = CountingFdcClient(failures=2)
    service = NutritionService(client, InMemoryCache(), retry_delay_seconds=0)

    assert asyncio.run(service.search_and_get_nutrition("chicken")) is None
