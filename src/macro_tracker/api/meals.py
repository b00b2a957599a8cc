"""Per-user meal, goals, progress and food search endpoints."""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from macro_tracker.api.models import (
    CatalogFoodModel,
    DailyProgressResponse,
    FoodSearchResponse,
    FoodSearchResult,
    MacroGoalsModel,
    MealEntryResponse,
    SaveMealRequest,
    UpdateMealRequest,
)
from macro_tracker.services.food_catalog import search_food_database

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["meals"])
_logger = logging.getLogger(__name__)


async def require_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Resolve the caller from the X-User-Id header set by the auth proxy."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return x_user_id.strip()


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/meals")
async def list_meals(
    request: Request,
    user_id: str = Depends(require_user_id),
    day: date | None = Query(default=None, alias="date"),
) -> list[MealEntryResponse]:
    """Return the user's meals for a day (today by default)."""
    meals = _container(request).meal_log_service.meals_for_date(
        user_id, day or datetime.now(tz=UTC).date()
    )
    return [MealEntryResponse.from_domain(meal) for meal in meals]


@router.post("/meals", status_code=status.HTTP_201_CREATED)
async def save_meal(
    body: SaveMealRequest,
    request: Request,
    user_id: str = Depends(require_user_id),
) -> MealEntryResponse:
    """Persist an analysis as a meal entry."""
    meal = _container(request).meal_log_service.save_analysis(
        user_id, body.original_text, body.to_analysis(), logged_at=body.timestamp
    )
    return MealEntryResponse.from_domain(meal)


@router.patch("/meals/{meal_id}")
async def update_meal(
    meal_id: UUID,
    body: UpdateMealRequest,
    request: Request,
    user_id: str = Depends(require_user_id),
) -> MealEntryResponse:
    """Apply user edits to a meal's macros or breakdown."""
    meal = _container(request).meal_log_service.update_meal(
        user_id,
        meal_id,
        macros=body.macros.to_domain() if body.macros else None,
        breakdown=(
            [item.to_domain() for item in body.breakdown]
            if body.breakdown is not None
            else None
        ),
    )
    if meal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return MealEntryResponse.from_domain(meal)


@router.delete("/meals/{meal_id}")
async def delete_meal(
    meal_id: UUID,
    request: Request,
    user_id: str = Depends(require_user_id),
) -> dict[str, str]:
    if not _container(request).meal_log_service.delete_meal(user_id, meal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "ok"}


@router.get("/goals")
async def get_goals(
    request: Request, user_id: str = Depends(require_user_id)
) -> MacroGoalsModel:
    """Return the user's goals, falling back to defaults."""
    goals = _container(request).goals_service.get_goals(user_id)
    return MacroGoalsModel.from_domain(goals)


@router.put("/goals")
async def put_goals(
    body: MacroGoalsModel,
    request: Request,
    user_id: str = Depends(require_user_id),
) -> MacroGoalsModel:
    goals = _container(request).goals_service.set_goals(user_id, body.to_domain())
    return MacroGoalsModel.from_domain(goals)


@router.get("/progress/{day}")
async def daily_progress(
    day: date,
    request: Request,
    user_id: str = Depends(require_user_id),
) -> DailyProgressResponse:
    """Return a day's totals against the user's goals."""
    progress = _container(request).progress_service.daily_progress(user_id, day)
    return DailyProgressResponse.from_domain(progress)


@router.get("/foods/search")
async def search_foods(
    request: Request,
    q: str = Query(min_length=1),
    limit: int = Query(default=10, ge=1, le=50),
    _user_id: str = Depends(require_user_id),
) -> FoodSearchResponse:
    """Search the built-in catalog and USDA FoodData Central.

    USDA failures are logged and yield an empty ``usda`` list.
    """
    catalog = search_food_database(q, limit=limit)
    try:
        usda = await _container(request).nutrition_service.search(q, limit=limit)
    except httpx.HTTPError:
        _logger.exception("USDA search failed for %r", q)
        usda = []
    return FoodSearchResponse(
        catalog=[CatalogFoodModel.from_domain(item) for item in catalog],
        usda=[FoodSearchResult.from_domain(food) for food in usda],
    )
