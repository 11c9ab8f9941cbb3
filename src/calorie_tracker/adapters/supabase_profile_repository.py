"""Supabase repository for the profile singleton."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from calorie_tracker.domain.errors import StoreError
from calorie_tracker.domain.profile import Profile
from calorie_tracker.services.aggregation import coerce_number
from calorie_tracker.services.profile import ProfileRepository

PROFILE_ROW_ID = 1


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation storing the profile in a single row."""

    client: Client

    def get_profile(self) -> Profile | None:
        """Return the stored profile row."""
        response = (
            self.client.table("profile")
            .select("calorie_budget, protein_target")
            .eq("id", PROFILE_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, profile: Profile) -> Profile:
        """Create the profile row."""
        response = (
            self.client.table("profile")
            .upsert(
                {
                    "id": PROFILE_ROW_ID,
                    "calorie_budget": profile.calorie_budget,
                    "protein_target": profile.protein_target,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to create profile")
        return _parse_profile(response.data[0])

    def update_profile(self, changes: dict[str, float]) -> Profile:
        """Update goal columns on the profile row."""
        response = (
            self.client.table("profile")
            .update({**changes, "updated_at": datetime.now(tz=UTC).isoformat()})
            .eq("id", PROFILE_ROW_ID)
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to update profile")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    return Profile(
        calorie_budget=coerce_number(row.get("calorie_budget")),
        protein_target=coerce_number(row.get("protein_target")),
    )
