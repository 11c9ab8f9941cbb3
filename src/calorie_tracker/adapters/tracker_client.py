"""HTTP client for the tracker JSON API."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

import httpx

from calorie_tracker.domain.entries import EntryKind, LogEntry, NewLogEntry
from calorie_tracker.domain.profile import FoodPreset, Profile
from calorie_tracker.domain.weights import WeightSample
from calorie_tracker.services.aggregation import coerce_number


class TrackerClient(Protocol):
    """Interface for the tracker API as seen by the client application."""

    async def list_entries(self) -> list[LogEntry]:
        """Fetch every log entry."""

    async def list_weights(self) -> list[WeightSample]:
        """Fetch every weight sample."""

    async def get_profile(self) -> Profile:
        """Fetch the profile."""

    async def list_presets(self) -> list[FoodPreset]:
        """Fetch every food preset."""

    async def create_entry(self, entry: NewLogEntry) -> LogEntry:
        """Create a log entry and return the stored copy."""

    async def record_weight(self, day: str, weight: float) -> WeightSample:
        """Record a weight and return the stored sample."""

    async def update_profile(
        self, calorie_budget: float | None = None, protein_target: float | None = None
    ) -> Profile:
        """Update goals and return the stored profile."""

    async def create_preset(self, preset: dict[str, object]) -> FoodPreset:
        """Create a food preset."""


@dataclass
class HttpxTrackerClient(TrackerClient):
    """Tracker API client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxTrackerClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def list_entries(self) -> list[LogEntry]:
        """Fetch every log entry."""
        data = await self._get("/api/entries")
        return [parse_entry(row) for row in _as_list(data)]

    async def list_weights(self) -> list[WeightSample]:
        """Fetch every weight sample."""
        data = await self._get("/api/weights")
        return [parse_weight(row) for row in _as_list(data)]

    async def get_profile(self) -> Profile:
        """Fetch the profile."""
        data = await self._get("/api/profile")
        return Profile(
            calorie_budget=coerce_number(data.get("calorieBudget")),
            protein_target=coerce_number(data.get("proteinTarget")),
        )

    async def list_presets(self) -> list[FoodPreset]:
        """Fetch every food preset."""
        data = await self._get("/api/presets")
        return [parse_preset(row) for row in _as_list(data)]

    async def create_entry(self, entry: NewLogEntry) -> LogEntry:
        """Create a log entry."""
        payload = {
            "date": entry.date,
            "type": entry.kind.value,
            "text": entry.description,
            "caloriesIn": entry.calories_in,
            "caloriesOut": entry.calories_out,
            "protein": entry.protein,
            "carbs": entry.carbs,
            "fat": entry.fat,
            "vitaminText": entry.vitamin_note,
            "explanation": entry.explanation,
        }
        return parse_entry(await self._send("POST", "/api/entries", payload))

    async def record_weight(self, day: str, weight: float) -> WeightSample:
        """Record a weight for a date."""
        payload = {"date": day, "weight": weight}
        return parse_weight(await self._send("POST", "/api/weights", payload))

    async def update_profile(
        self, calorie_budget: float | None = None, protein_target: float | None = None
    ) -> Profile:
        """Update the provided goals."""
        payload: dict[str, object] = {}
        if calorie_budget is not None:
            payload["calorieBudget"] = calorie_budget
        if protein_target is not None:
            payload["proteinTarget"] = protein_target
        data = await self._send("PUT", "/api/profile", payload)
        return Profile(
            calorie_budget=coerce_number(data.get("calorieBudget")),
            protein_target=coerce_number(data.get("proteinTarget")),
        )

    async def create_preset(self, preset: dict[str, object]) -> FoodPreset:
        """Create a food preset from a camelCase payload."""
        return parse_preset(await self._send("POST", "/api/presets", preset))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _get(self, path: str) -> Any:
        response = await self.http_client.get(f"{self.base_url}{path}", timeout=15)
        response.raise_for_status()
        return response.json()

    async def _send(
        self, method: str, path: str, payload: dict[str, object]
    ) -> dict[str, object]:
        response = await self.http_client.request(
            method, f"{self.base_url}{path}", json=payload, timeout=15
        )
        response.raise_for_status()
        return response.json()


def parse_entry(row: dict[str, object]) -> LogEntry:
    """Parse an entry JSON object, treating absent numbers as zero."""
    created_raw = row.get("createdAt")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return LogEntry(
        id=int(row["id"]),
        date=str(row.get("date", "")),
        kind=EntryKind(row.get("type", EntryKind.FOOD.value)),
        description=str(row.get("text") or ""),
        calories_in=coerce_number(row.get("caloriesIn")),
        calories_out=coerce_number(row.get("caloriesOut")),
        protein=coerce_number(row.get("protein")),
        carbs=coerce_number(row.get("carbs")),
        fat=coerce_number(row.get("fat")),
        vitamin_note=str(row.get("vitaminText") or ""),
        explanation=str(row.get("explanation") or ""),
        created_at=created_at,
    )


def parse_weight(row: dict[str, object]) -> WeightSample:
    """Parse a weight JSON object."""
    return WeightSample(
        id=int(row["id"]),
        date=str(row.get("date", "")),
        weight=coerce_number(row.get("weight")),
    )


def parse_preset(row: dict[str, object]) -> FoodPreset:
    """Parse a preset JSON object."""
    return FoodPreset(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        default_portion=str(row.get("defaultPortion") or ""),
        calories_in=coerce_number(row.get("caloriesIn")),
        protein=coerce_number(row.get("protein")),
        carbs=coerce_number(row.get("carbs")),
        fat=coerce_number(row.get("fat")),
        vitamin_note=str(row.get("vitaminNote") or ""),
    )


def _as_list(data: object) -> list[dict[str, object]]:
    return data if isinstance(data, list) else []
