"""Domain models for user goals and food presets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Daily goals for the single tracked user."""

    calorie_budget: float = 0.0
    protein_target: float = 0.0


@dataclass(frozen=True)
class FoodPreset:
    """Reusable template used to prefill a food entry."""

    id: int
    name: str
    default_portion: str
    calories_in: float
    protein: float
    carbs: float
    fat: float
    vitamin_note: str
