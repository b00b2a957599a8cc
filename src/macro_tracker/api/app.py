"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Header, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from macro_tracker.api.meals import router as meals_router
from macro_tracker.api.models import AnalyzeMealRequest, MealAnalysisResponse
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.services.estimation import (
    EstimationAuthError,
    EstimationConfigError,
    EstimationError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/analyze-meal", response_model=None)
    async def analyze_meal(
        request: Request, x_user_id: str | None = Header(default=None)
    ) -> JSONResponse:
        """Estimate macros for a free-text meal description."""
        state_container: AppContainer = request.app.state.container
        debug = state_container.settings.debug
        try:
            payload = await request.json()
        except ValueError:
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")
        description = (
            payload.get("mealDescription") if isinstance(payload, dict) else None
        )
        if not isinstance(description, str) or not description.strip():
            return _error(status.HTTP_400_BAD_REQUEST, "Meal description is required")
        try:
            body = AnalyzeMealRequest.model_validate(payload)
        except ValidationError as exc:
            return _error(
                status.HTTP_400_BAD_REQUEST,
                "Invalid request body",
                details=str(exc) if debug else None,
            )

        try:
            analysis = await state_container.analysis_service.analyze(
                body.meal_description.strip(),
                user_id=x_user_id,
                is_recalculation=body.is_recalculation,
                previous_result=(
                    body.previous_result.to_domain() if body.previous_result else None
                ),
            )
        except EstimationAuthError as exc:
            logger.warning("Estimator rejected credentials: %s", exc)
            return _error(
                status.HTTP_403_FORBIDDEN,
                "AI service authentication failed. Check the API key.",
            )
        except EstimationConfigError as exc:
            logger.error("Estimator is not configured: %s", exc)
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "AI service is not configured",
                details=str(exc) if debug else None,
            )
        except EstimationError as exc:
            logger.exception("Meal analysis failed")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to analyze meal",
                details=str(exc) if debug else None,
            )
        except Exception as exc:
            logger.exception("Unexpected error while analyzing meal")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to analyze meal",
                details=str(exc) if debug else None,
            )

        response = MealAnalysisResponse.from_analysis(analysis)
        return JSONResponse(
            response.model_dump(mode="json", by_alias=True, exclude_none=True)
        )

    return app


def _error(status_code: int, message: str, details: str | None = None) -> JSONResponse:
    content: dict[str, str] = {"error": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)
