"""Food search and analysis endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from ckd_diet_advisor.api.schemas import (
    AnalysisResponse,
    AnalyzeRequest,
    FoodItemResponse,
)

if TYPE_CHECKING:
    from ckd_diet_advisor.containers import AppContainer

router = APIRouter(prefix="/api", tags=["foods"])


@router.get("/foods", response_model=list[FoodItemResponse])
async def list_foods(
    request: Request, q: str | None = None
) -> list[FoodItemResponse]:
    """Search foods by name or category; no query returns the full catalog."""
    container: AppContainer = request.app.state.container
    foods = container.analysis_service.search_foods(q)
    return [FoodItemResponse.model_validate(food) for food in foods]


@router.get("/foods/{food_id}", response_model=FoodItemResponse)
async def get_food(food_id: int, request: Request) -> FoodItemResponse:
    """Return a single catalog food."""
    container: AppContainer = request.app.state.container
    return FoodItemResponse.model_validate(
        container.analysis_service.get_food(food_id)
    )


@router.post(
    "/analyze", response_model=AnalysisResponse, response_model_exclude_none=True
)
async def analyze(body: AnalyzeRequest, request: Request) -> AnalysisResponse:
    """Analyze a food for the submitted patient profile."""
    container: AppContainer = request.app.state.container
    result = container.analysis_service.analyze(body.food_id, body.profile)
    return AnalysisResponse.model_validate(result)
