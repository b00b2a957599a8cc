"""Macro estimation through an LLM."""

import json
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from macro_tracker.domain.macros import MacroNutrients
from macro_tracker.domain.nutrition import FoodDatabaseItem
from macro_tracker.services.conversions import conversions_for_prompt
from macro_tracker.services.food_catalog import (
    PROMPT_CONTEXT_LIMIT,
    format_food_context,
    relevant_foods_for_description,
)

_logger = logging.getLogger(__name__)

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class EstimationError(Exception):
    """Base class for estimation failures."""


class EstimationConfigError(EstimationError):
    """The estimator is not configured (e.g. missing API key)."""


class EstimationAuthError(EstimationError):
    """The upstream service rejected our credentials."""


class EstimationUpstreamError(EstimationError):
    """The upstream call failed."""


class AIResponseParseError(EstimationError):
    """The model output did not contain a JSON object."""


class EstimatorClient(Protocol):
    """Interface for LLM text generation."""

    async def generate(self, *, system_prompt: str, user_prompt: str) -> str:
        """Return raw model text for the prompts."""


CALCULATION_RULES: tuple[str, ...] = (
    "Convert volumes to weight with the conversion table below. "
    "1 cup = 2.4 dl, 1 tbsp (msk) = 15 ml, 1 tsp (tsk) = 5 ml, 1 krm = 1 ml.",
    "For water-based drinks 1 ml is about 1 g; milk weighs 103 g per dl.",
    "Alcohol grams = ml x ABV x 0.789. Alcohol calories = ml x ABV x 0.789 x 7.",
    "For foods without alcohol, calories = protein x 4 + carbs x 4 + fat x 9.",
    "For alcoholic items, calories = protein x 4 + carbs x 4 + fat x 9 + "
    "alcohol grams x 7, and report the alcohol grams in the 'alcohol' field.",
    "Never report calories that contradict the macros, except for the alcohol "
    "energy described in rule 5.",
    "The breakdown items must add up to the totals: within 2 g for each macro "
    "and within 5 kcal for calories.",
    "When the user gives an explicit amount (grams, ml, pieces), use exactly that "
    "amount.",
    "When no amount is given, assume one standard portion and state it in "
    "'estimatedAmount'.",
    "Assume cooked weights for meat, rice and pasta unless the user says raw or dry.",
    "For branded or restaurant foods (McDonald's, Starbucks, Coca-Cola, ...), use "
    "the official nutrition information for that product.",
    "Prefer the reference values from the food database below when an item matches.",
    "For counted items ('2 eggs'), multiply the per-item values by the count.",
    "Include cooking fat when the preparation implies it (fried, sauteed).",
    "Report every number as an integer except 'alcohol', which may have one decimal.",
    "Default strengths: beer 5% ABV, wine 12% ABV, spirits 40% ABV.",
    "Default servings: beer 330 ml, a pint 568 ml, a glass of wine 150 ml, "
    "a shot of spirits 40 ml.",
    "Break mixed dishes into their main ingredients and list each in the breakdown.",
    "Do not count the same ingredient twice.",
    "WRONG: 'Guinness 568ml' -> protein 2, carbs 18, fat 0, calories 76 (alcohol "
    "ignored). CORRECT: alcohol = 568 x 0.042 x 0.789 = 18.8 g -> 132 kcal; carbs "
    "18 g -> 72 kcal; protein 2 g -> 8 kcal; total about 210 kcal, alcohol 18.8.",
    "WRONG: '150g chicken breast, 100g rice' with items 248 kcal + 130 kcal but a "
    "total of 330 kcal. CORRECT: totals equal the item sums: protein 49, carbs 28, "
    "fat 6, calories 378.",
)

RESPONSE_FORMAT = """{
  "protein": integer,
  "carbs": integer,
  "fat": integer,
  "calories": integer,
  "alcohol": number,
  "breakdown": [
    {
      "food": "string",
      "estimatedAmount": "string",
      "protein": integer,
      "carbs": integer,
      "fat": integer,
      "calories": integer,
      "alcohol": number
    }
  ],
  "reasoning": "string",
  "validation": "string"
}"""


def build_system_prompt(
    description: str,
    foods: Sequence[FoodDatabaseItem],
    previous_result: MacroNutrients | None = None,
) -> str:
    """Assemble the estimator instructions for one meal."""
    rules = "\n".join(
        f"{index}. {rule}" for index, rule in enumerate(CALCULATION_RULES, start=1)
    )
    sections = [
        "You are a precise nutrition analyst. Estimate protein, carbohydrates, fat, "
        "alcohol and calories for the meal the user describes.",
        f"CALCULATION RULES:\n{rules}",
        f"VOLUME TO WEIGHT CONVERSIONS:\n{conversions_for_prompt()}",
    ]
    if foods:
        sections.append(f"FOOD DATABASE REFERENCES:\n{format_food_context(foods)}")
    if previous_result is not None:
        sections.append(
            "PREVIOUS ANALYSIS (reference only, recalculate independently): "
            f"protein {previous_result.protein}g, carbs {previous_result.carbs}g, "
            f"fat {previous_result.fat}g, calories {previous_result.calories} kcal."
        )
    sections.append(f'MEAL: "{description}"')
    sections.append(
        "Respond with ONLY one JSON object in this format, no other text:\n"
        f"{RESPONSE_FORMAT}"
    )
    return "\n\n".join(sections)


def build_user_prompt(description: str) -> str:
    return f'Meal: "{description}"'


def parse_ai_response(text: str) -> dict[str, object]:
    """Parse model output, tolerating code fences and surrounding prose."""
    parsed = _load_object(text)
    if parsed is not None:
        return parsed

    unfenced = _FENCE.sub("", text).strip()
    parsed = _load_object(unfenced)
    if parsed is not None:
        _logger.info("Parsed AI response after stripping code fences")
        return parsed

    match = _OBJECT.search(text)
    if match:
        parsed = _load_object(match.group(0))
        if parsed is not None:
            _logger.info("Parsed AI response from embedded JSON block")
            return parsed

    _logger.error("Could not parse AI response: %.200s", text)
    raise AIResponseParseError("Could not parse AI response")


def _load_object(text: str) -> dict[str, object] | None:
    try:
        value = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    return value if isinstance(value, dict) else None


@dataclass
class EstimationService:
    """Builds prompts, calls the estimator and parses its JSON."""

    client: EstimatorClient | None
    food_context_limit: int = PROMPT_CONTEXT_LIMIT

    async def estimate(
        self, description: str, previous_result: MacroNutrients | None = None
    ) -> dict[str, object]:
        """Return the raw JSON object the model produced for ``description``."""
        if self.client is None:
            raise EstimationConfigError("LLM API key is not configured")
        foods = relevant_foods_for_description(description, self.food_context_limit)
        system_prompt = build_system_prompt(description, foods, previous_result)
        text = await self.client.generate(
            system_prompt=system_prompt,
            user_prompt=build_user_prompt(description),
        )
        if not text:
            raise AIResponseParseError("Could not parse AI response")
        return parse_ai_response(text)
