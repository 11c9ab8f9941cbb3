"""Food preset service."""

from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.entries import EntryKind, NewLogEntry
from calorie_tracker.domain.errors import NotFoundError
from calorie_tracker.domain.profile import FoodPreset


class PresetRepository(Protocol):
    """Persistence interface for food presets."""

    def create_preset(self, payload: dict[str, object]) -> FoodPreset:
        """Create a preset and return it."""

    def update_preset(
        self, preset_id: int, payload: dict[str, object]
    ) -> FoodPreset | None:
        """Update a preset and return it, or None when it does not exist."""

    def delete_preset(self, preset_id: int) -> bool:
        """Delete a preset and return whether it existed."""

    def get_preset(self, preset_id: int) -> FoodPreset | None:
        """Return a preset by id, if present."""

    def list_presets(self) -> list[FoodPreset]:
        """Return all presets ordered by name."""


@dataclass
class PresetService:
    """Application service for preset CRUD."""

    repository: PresetRepository

    def list_all(self) -> list[FoodPreset]:
        """Return all presets."""
        return self.repository.list_presets()

    def create(self, payload: dict[str, object]) -> FoodPreset:
        """Create a preset."""
        return self.repository.create_preset(payload)

    def update(self, preset_id: int, payload: dict[str, object]) -> FoodPreset:
        """Update a preset or raise NotFoundError."""
        updated = self.repository.update_preset(preset_id, payload)
        if updated is None:
            raise NotFoundError(f"Preset {preset_id} not found")
        return updated

    def delete(self, preset_id: int) -> None:
        """Delete a preset or raise NotFoundError."""
        if not self.repository.delete_preset(preset_id):
            raise NotFoundError(f"Preset {preset_id} not found")

    def get(self, preset_id: int) -> FoodPreset:
        """Return a preset or raise NotFoundError."""
        preset = self.repository.get_preset(preset_id)
        if preset is None:
            raise NotFoundError(f"Preset {preset_id} not found")
        return preset


def prefill_entry(preset: FoodPreset, entry_date: str) -> NewLogEntry:
    """Build a food entry draft from a preset's macros."""
    description = preset.name
    if preset.default_portion:
        description = f"{preset.name} ({preset.default_portion})"
    return NewLogEntry(
        date=entry_date,
        kind=EntryKind.FOOD,
        description=description,
        calories_in=preset.calories_in,
        protein=preset.protein,
        carbs=preset.carbs,
        fat=preset.fat,
        vitamin_note=preset.vitamin_note,
    )
