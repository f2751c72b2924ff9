"""In-process saved profile store."""

import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ckd_diet_advisor.domain.profiles import ProfileSnapshot, SavedProfile
from ckd_diet_advisor.services.profiles import ProfileRepository


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """Profile store kept in memory; ids come from a per-store sequence."""

    clock: Callable[[], datetime] = _utcnow
    profiles: dict[int, SavedProfile] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))

    def list_profiles(self) -> list[SavedProfile]:
        """Return profiles in insertion order."""
        return list(self.profiles.values())

    def create_profile(self, snapshot: ProfileSnapshot) -> SavedProfile:
        """Store a snapshot under the next id."""
        profile = SavedProfile(
            id=next(self._ids),
            name=snapshot.name,
            ckd_stage=snapshot.ckd_stage,
            has_dm=snapshot.has_dm,
            hba1c=snapshot.hba1c,
            egfr=snapshot.egfr,
            serum_potassium=snapshot.serum_potassium,
            created_at=self.clock(),
        )
        self.profiles[profile.id] = profile
        return profile

    def delete_profile(self, profile_id: int) -> bool:
        """Remove a profile if present."""
        return self.profiles.pop(profile_id, None) is not None
