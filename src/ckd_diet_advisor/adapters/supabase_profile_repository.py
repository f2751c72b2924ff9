"""Supabase-backed saved profile repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from ckd_diet_advisor.domain.profiles import ProfileSnapshot, SavedProfile
from ckd_diet_advisor.services.profiles import ProfileRepository

_COLUMNS = "id, name, ckd_stage, has_dm, hba1c, egfr, serum_potassium, created_at"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for saved profiles."""

    client: Client
    table: str = "saved_profiles"

    def list_profiles(self) -> list[SavedProfile]:
        """Return all saved profiles, newest first."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .order("created_at", desc=True)
            .execute()
        )
        return [_row_to_profile(row) for row in response.data or []]

    def create_profile(self, snapshot: ProfileSnapshot) -> SavedProfile:
        """Insert a profile row and return it."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "name": snapshot.name,
                    "ckd_stage": snapshot.ckd_stage,
                    "has_dm": snapshot.has_dm,
                    "hba1c": snapshot.hba1c,
                    "egfr": snapshot.egfr,
                    "serum_potassium": snapshot.serum_potassium,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _row_to_profile(response.data[0])

    def delete_profile(self, profile_id: int) -> bool:
        """Delete a profile row, reporting whether one was removed."""
        response = (
            self.client.table(self.table).delete().eq("id", profile_id).execute()
        )
        return bool(response.data)


def _row_to_profile(row: dict[str, object]) -> SavedProfile:
    return SavedProfile(
        id=int(row["id"]),
        name=str(row["name"]),
        ckd_stage=int(row["ckd_stage"]),
        has_dm=bool(row["has_dm"]),
        hba1c=_optional_float(row.get("hba1c")),
        egfr=_optional_float(row.get("egfr")),
        serum_potassium=_optional_float(row.get("serum_potassium")),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
