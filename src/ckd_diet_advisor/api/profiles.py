"""Saved profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from ckd_diet_advisor.api.schemas import (
    SavedProfileResponse,
    TrendPointResponse,
    TrendsResponse,
)
from ckd_diet_advisor.domain.profiles import ProfileSnapshot

if TYPE_CHECKING:
    from ckd_diet_advisor.containers import AppContainer

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.get("", response_model=list[SavedProfileResponse])
async def list_profiles(request: Request) -> list[SavedProfileResponse]:
    """Return saved profiles, newest first."""
    container: AppContainer = request.app.state.container
    return [
        SavedProfileResponse.model_validate(profile)
        for profile in container.profile_service.list_profiles()
    ]


@router.post(
    "", response_model=SavedProfileResponse, status_code=status.HTTP_201_CREATED
)
async def create_profile(
    snapshot: ProfileSnapshot, request: Request
) -> SavedProfileResponse:
    """Save a named clinical snapshot."""
    container: AppContainer = request.app.state.container
    return SavedProfileResponse.model_validate(
        container.profile_service.create_profile(snapshot)
    )


@router.get("/trends", response_model=TrendsResponse)
async def profile_trends(request: Request) -> TrendsResponse:
    """Return lab values across saved profiles, oldest first."""
    container: AppContainer = request.app.state.container
    points = container.profile_service.trends()
    return TrendsResponse(
        points=[TrendPointResponse.model_validate(point) for point in points]
    )


@router.delete("/{profile_id}")
async def delete_profile(profile_id: int, request: Request) -> dict[str, bool]:
    """Delete a saved profile."""
    container: AppContainer = request.app.state.container
    container.profile_service.delete_profile(profile_id)
    return {"success": True}
