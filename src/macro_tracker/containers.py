"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.fdc_client import HttpxFdcClient
from macro_tracker.adapters.gemini_client import GeminiEstimatorClient
from macro_tracker.adapters.openai_client import OpenAIEstimatorClient
from macro_tracker.adapters.supabase_goals_repository import SupabaseGoalsRepository
from macro_tracker.adapters.supabase_meal_repository import (
    SupabaseMealEntryRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.analysis import MealAnalysisService
from macro_tracker.services.cache import InMemoryCache
from macro_tracker.services.estimation import EstimationService
from macro_tracker.services.goals import GoalsService
from macro_tracker.services.meals import MealLogService
from macro_tracker.services.nutrition import NutritionService
from macro_tracker.services.progress import ProgressService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: MealAnalysisService
    meal_log_service: MealLogService
    goals_service: GoalsService
    progress_service: ProgressService
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_estimator_client(
    settings: Settings,
) -> OpenAIEstimatorClient | GeminiEstimatorClient | None:
    """Create the configured LLM client, or None when its key is missing."""
    if settings.llm_provider == "openai":
        if not settings.openai_api_key:
            _logger.warning("OPENAI_API_KEY is not set; meal analysis is disabled")
            return None
        return OpenAIEstimatorClient.create(
            settings.openai_api_key, settings.openai_model
        )
    if not settings.gemini_api_key:
        _logger.warning("GEMINI_API_KEY is not set; meal analysis is disabled")
        return None
    return GeminiEstimatorClient.create(settings.gemini_api_key, settings.gemini_model)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_log_service = MealLogService(SupabaseMealEntryRepository(supabase_client))
    goals_service = GoalsService(SupabaseGoalsRepository(supabase_client))
    estimator_client = build_estimator_client(resolved_settings)
    analysis_service = MealAnalysisService(
        estimation_service=EstimationService(
            client=estimator_client,
            food_context_limit=resolved_settings.food_context_limit,
        ),
        meal_log_service=meal_log_service,
        similarity_threshold=resolved_settings.history_similarity_threshold,
        trust_reported_calories=resolved_settings.trust_reported_calories,
    )
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    nutrition_service = NutritionService(fdc_client=fdc_client, cache=InMemoryCache())

    async def close_resources() -> None:
        await fdc_client.close()
        if estimator_client is not None:
            await estimator_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        meal_log_service=meal_log_service,
        goals_service=goals_service,
        progress_service=ProgressService(meal_log_service, goals_service),
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
