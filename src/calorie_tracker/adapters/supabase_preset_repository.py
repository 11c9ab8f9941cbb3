"""Supabase repository for food presets."""

from dataclasses import dataclass

from supabase import Client

from calorie_tracker.domain.errors import StoreError
from calorie_tracker.domain.profile import FoodPreset
from calorie_tracker.services.aggregation import coerce_number
from calorie_tracker.services.presets import PresetRepository


@dataclass
class SupabasePresetRepository(PresetRepository):
    """Supabase-backed repository for food presets."""

    client: Client

    def create_preset(self, payload: dict[str, object]) -> FoodPreset:
        """Create a preset and return it."""
        response = self.client.table("food_presets").insert(payload).execute()
        if not response.data:
            raise StoreError("Failed to create preset")
        return _parse_preset(response.data[0])

    def update_preset(
        self, preset_id: int, payload: dict[str, object]
    ) -> FoodPreset | None:
        """Update a preset and return it."""
        response = (
            self.client.table("food_presets")
            .update(payload)
            .eq("id", preset_id)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preset(response.data[0])

    def delete_preset(self, preset_id: int) -> bool:
        """Delete a preset by id."""
        response = (
            self.client.table("food_presets").delete().eq("id", preset_id).execute()
        )
        return bool(response.data)

    def get_preset(self, preset_id: int) -> FoodPreset | None:
        """Return a preset by id, if present."""
        response = (
            self.client.table("food_presets")
            .select("*")
            .eq("id", preset_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preset(response.data[0])

    def list_presets(self) -> list[FoodPreset]:
        """Return all presets ordered by name."""
        response = (
            self.client.table("food_presets")
            .select("*")
            .order("name", desc=False)
            .execute()
        )
        return [_parse_preset(row) for row in response.data or []]


def _parse_preset(row: dict[str, object]) -> FoodPreset:
    """Parse a preset row into a domain model."""
    return FoodPreset(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        default_portion=str(row.get("default_portion") or ""),
        calories_in=coerce_number(row.get("calories_in")),
        protein=coerce_number(row.get("protein")),
        carbs=coerce_number(row.get("carbs")),
        fat=coerce_number(row.get("fat")),
        vitamin_note=str(row.get("vitamin_note") or ""),
    )
