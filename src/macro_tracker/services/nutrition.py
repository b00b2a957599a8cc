"""Nutrition lookups against USDA FoodData Central."""

import asyncio
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from macro_tracker.adapters.fdc_client import FdcClient
from macro_tracker.domain.macros import round_half_up, round_tenth
from macro_tracker.domain.nutrition import FoodDetails, FoodSummary, MacroProfile
from macro_tracker.services.cache import Cache

# FDC exposes both legacy nutrient numbers and newer nutrient ids.
_NUTRIENT_KEYS = {
    "protein": (203, 1003),
    "fat": (204, 1004),
    "carbs": (205, 1005),
    "calories": (208, 1008),
}
_MIN_QUERY_WORD = 3
_MISMATCH_PENALTY = 50
_MISMATCHES = (("milk", "meat"), ("chicken", "milk"))

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass(frozen=True)
class NutritionLookup:
    """Best FDC match for a query with macros for the requested portion."""

    food: FoodDetails
    macros: MacroProfile
    portion_grams: float


@dataclass
class NutritionService:
    """FDC search and food details with caching and one retry."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 10) -> list[FoodSummary]:
        """Search FDC foods, generic data types first."""
        cache_key = f"fdc:search:{query.lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = [_summary(food) for food in payload.get("foods", [])]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.debug("FDC search query=%s results=%s", query, len(foods))
        return foods

    async def get_food(self, fdc_id: int) -> FoodDetails:
        """Return food details with per-100 g macros."""
        payload = await self._food_payload(fdc_id)
        return FoodDetails(
            summary=_summary(payload),
            macros=extract_macros_from_usda_food(payload),
            serving_size_g=payload.get("servingSize"),
        )

    async def search_and_get_nutrition(
        self, query: str, portion_grams: float = 100
    ) -> NutritionLookup | None:
        """Search, pick the best match and scale its macros to the portion.

        Returns None when nothing matches or FDC is unavailable.
        """
        try:
            results = await self.search(query, limit=10)
            if not results:
                _logger.info("No FDC food found for %r", query)
                return None
            best = pick_best_food_match(query, results)
            payload = await self._food_payload(best.fdc_id)
        except httpx.HTTPError:
            _logger.exception("FDC lookup failed for %r", query)
            return None
        return NutritionLookup(
            food=FoodDetails(
                summary=_summary(payload),
                macros=extract_macros_from_usda_food(payload),
                serving_size_g=payload.get("servingSize"),
            ),
            macros=extract_macros_from_usda_food(payload, portion_grams),
            portion_grams=portion_grams,
        )

    async def _food_payload(self, fdc_id: int) -> dict[str, object]:
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, dict):
            return cached
        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        self.cache.set(cache_key, payload, ttl_seconds=self.food_ttl_seconds)
        return payload

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        attempt = 0
        while True:
            try:
                return await func()
            except httpx.HTTPError as exc:
                attempt += 1
                _logger.warning(
                    "FDC %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def extract_macros_from_usda_food(
    food_payload: Mapping[str, object], portion_grams: float = 100
) -> MacroProfile:
    """Scale an FDC food's per-100 g macros to ``portion_grams``.

    Protein, fat and carbs are rounded to 0.1 g and calories to whole kcal.
    Missing nutrients count as zero.
    """
    nutrients = food_payload.get("foodNutrients") or []
    scale = portion_grams / 100
    values = {
        name: _nutrient_value(nutrients, keys) * scale
        for name, keys in _NUTRIENT_KEYS.items()
    }
    return MacroProfile(
        calories=round_half_up(values["calories"]),
        protein_g=round_tenth(values["protein"]),
        fat_g=round_tenth(values["fat"]),
        carbs_g=round_tenth(values["carbs"]),
    )


def pick_best_food_match(query: str, results: Sequence[FoodSummary]) -> FoodSummary:
    """Score FDC results by word overlap, favouring short generic entries."""
    if len(results) == 1:
        return results[0]

    query_lower = query.lower()
    query_words = [word for word in query_lower.split() if len(word) >= _MIN_QUERY_WORD]
    best = results[0]
    best_score = 0.0
    for food in results:
        description = food.description.lower()
        score = 0.0
        for query_word in query_words:
            for word in description.split():
                if word == query_word:
                    score += 10
                elif query_word in word or word in query_word:
                    score += 5
        for wanted, unwanted in _MISMATCHES:
            if wanted in query_lower and unwanted in description:
                score -= _MISMATCH_PENALTY
        if not food.brand_name:
            score += 2
        score -= len(description) / 20
        if score > best_score:
            best_score = score
            best = food
    _logger.debug(
        "Best FDC match for %r: %s (score %.1f)", query, best.description, best_score
    )
    return best


def _nutrient_value(nutrients: object, keys: tuple[int, int]) -> float:
    if not isinstance(nutrients, list):
        return 0.0
    number, nutrient_id = keys
    for entry in nutrients:
        if not isinstance(entry, dict):
            continue
        nested = entry.get("nutrient") or {}
        if (
            entry.get("nutrientId") in keys
            or entry.get("number") == number
            or str(entry.get("nutrientNumber", "")) == str(number)
            or nested.get("number") == str(number)
            or nested.get("id") == nutrient_id
        ):
            value = entry.get("value") or entry.get("amount") or 0
            return float(value)
    return 0.0


def _summary(food: Mapping[str, object]) -> FoodSummary:
    return FoodSummary(
        fdc_id=food["fdcId"],
        description=food.get("description", ""),
        brand_owner=food.get("brandOwner"),
        brand_name=food.get("brandName"),
        data_type=food.get("dataType"),
    )


def _status_code_from_exception(exc: Exception) -> str:
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
