"""Saved clinical profile management."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from ckd_diet_advisor.domain.errors import NotFoundError
from ckd_diet_advisor.domain.profiles import (
    ProfileSnapshot,
    SavedProfile,
    TrendPoint,
    parse_snapshot,
)

MIN_TREND_POINTS = 2

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for saved profiles."""

    def list_profiles(self) -> list[SavedProfile]:
        """Return every saved profile."""

    def create_profile(self, snapshot: ProfileSnapshot) -> SavedProfile:
        """Persist a snapshot and return the stored profile."""

    def delete_profile(self, profile_id: int) -> bool:
        """Delete a profile, returning False when it did not exist."""


@dataclass
class ProfileService:
    """Application service for saved profiles and their trends."""

    repository: ProfileRepository

    def list_profiles(self) -> list[SavedProfile]:
        """Return saved profiles, newest first."""
        return sorted(
            self.repository.list_profiles(),
            key=lambda profile: (profile.created_at, profile.id),
            reverse=True,
        )

    def create_profile(
        self, payload: ProfileSnapshot | Mapping[str, object]
    ) -> SavedProfile:
        """Validate and store a named clinical snapshot."""
        snapshot = (
            payload
            if isinstance(payload, ProfileSnapshot)
            else parse_snapshot(payload)
        )
        created = self.repository.create_profile(snapshot)
        _logger.info("Saved profile id=%s name=%s", created.id, created.name)
        return created

    def delete_profile(self, profile_id: int) -> None:
        """Delete a saved profile or raise NotFoundError."""
        if not self.repository.delete_profile(profile_id):
            raise NotFoundError("Profile not found")
        _logger.info("Deleted profile id=%s", profile_id)

    def trends(self) -> list[TrendPoint]:
        """Return lab values over time, oldest first.

        A single snapshot is not a trend, so fewer than two saved profiles
        yields no points.
        """
        profiles = self.list_profiles()
        if len(profiles) < MIN_TREND_POINTS:
            return []
        return [
            TrendPoint(
                created_at=profile.created_at,
                name=profile.name,
                ckd_stage=profile.ckd_stage,
                hba1c=profile.hba1c,
                egfr=profile.egfr,
                serum_potassium=profile.serum_potassium,
            )
            for profile in reversed(profiles)
        ]
