"""Profile service for the single user's goals."""

from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.profile import Profile


class ProfileRepository(Protocol):
    """Persistence interface for the profile singleton."""

    def get_profile(self) -> Profile | None:
        """Return the stored profile, if any."""

    def create_profile(self, profile: Profile) -> Profile:
        """Store the profile and return it."""

    def update_profile(self, changes: dict[str, float]) -> Profile:
        """Apply changes to the stored profile and return it."""


@dataclass
class ProfileService:
    """Application service for reading and updating goals."""

    repository: ProfileRepository

    def get(self) -> Profile:
        """Return the profile, creating one with zero goals on first access."""
        existing = self.repository.get_profile()
        if existing:
            return existing
        return self.repository.create_profile(Profile())

    def update(
        self,
        calorie_budget: float | None = None,
        protein_target: float | None = None,
    ) -> Profile:
        """Update only the goals that were provided."""
        self.get()
        changes: dict[str, float] = {}
        if calorie_budget is not None:
            changes["calorie_budget"] = calorie_budget
        if protein_target is not None:
            changes["protein_target"] = protein_target
        if not changes:
            return self.get()
        return self.repository.update_profile(changes)
