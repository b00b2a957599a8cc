"""Meal analysis pipeline: reuse a stored result or ask the estimator."""

import logging
from dataclasses import dataclass, replace

from macro_tracker.domain.macros import MacroNutrients, MealAnalysis
from macro_tracker.domain.quantities import QuantityAnalysis
from macro_tracker.services.estimation import EstimationService
from macro_tracker.services.history import (
    DEFAULT_SIMILARITY_THRESHOLD,
    find_reusable_meal,
)
from macro_tracker.services.meals import MealLogService
from macro_tracker.services.quantities import classify_quantities
from macro_tracker.services.reasoning import generate_reasoning
from macro_tracker.services.sanitizer import sanitize_analysis

_logger = logging.getLogger(__name__)


@dataclass
class MealAnalysisService:
    """Turns a meal description into a sanitized macro analysis."""

    estimation_service: EstimationService
    meal_log_service: MealLogService | None = None
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    trust_reported_calories: bool = True

    async def analyze(
        self,
        description: str,
        user_id: str | None = None,
        is_recalculation: bool = False,
        previous_result: MacroNutrients | None = None,
    ) -> MealAnalysis:
        """Analyze a meal description.

        Vague descriptions may be served from the user's stored meals.
        Recalculations always go to the estimator.
        """
        quantity_info = classify_quantities(description)
        if not is_recalculation and user_id and self.meal_log_service:
            reused = self._reuse_from_history(
                description, quantity_info, user_id, self.meal_log_service
            )
            if reused is not None:
                return reused

        raw = await self.estimation_service.estimate(
            description, previous_result=previous_result
        )
        analysis = sanitize_analysis(
            raw,
            description,
            trust_reported_calories=self.trust_reported_calories,
        )
        if not analysis.reasoning:
            analysis = replace(
                analysis, reasoning=generate_reasoning(description, analysis)
            )
        return analysis

    def _reuse_from_history(
        self,
        description: str,
        quantity_info: QuantityAnalysis,
        user_id: str,
        meal_log_service: MealLogService,
    ) -> MealAnalysis | None:
        try:
            history = meal_log_service.history(user_id)
        except Exception:
            _logger.exception("Failed to load meal history", extra={"user_id": user_id})
            return None
        match = find_reusable_meal(
            description, quantity_info, history, threshold=self.similarity_threshold
        )
        if match is None:
            return None
        return MealAnalysis(
            macros=match.macros,
            breakdown=match.breakdown,
            reasoning=match.reasoning,
            validation=match.validation,
            reused_from=match.id,
        )
