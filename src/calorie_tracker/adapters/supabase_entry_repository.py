"""Supabase repository for log entries."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from calorie_tracker.domain.entries import EntryKind, LogEntry, NewLogEntry
from calorie_tracker.domain.errors import StoreError
from calorie_tracker.services.aggregation import coerce_number
from calorie_tracker.services.entries import EntryRepository


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for the entry store."""

    client: Client

    def create_entry(self, entry: NewLogEntry) -> LogEntry:
        """Insert an entry and return the stored row."""
        response = (
            self.client.table("entries")
            .insert(
                {
                    "date": entry.date,
                    "type": entry.kind.value,
                    "text": entry.description,
                    "calories_in": entry.calories_in,
                    "calories_out": entry.calories_out,
                    "protein": entry.protein,
                    "carbs": entry.carbs,
                    "fat": entry.fat,
                    "vitamin_text": entry.vitamin_note,
                    "explanation": entry.explanation,
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to create entry")
        return _parse_entry(response.data[0])

    def list_entries(self) -> list[LogEntry]:
        """Return all entries ordered by date, then creation time."""
        response = (
            self.client.table("entries")
            .select("*")
            .order("date", desc=False)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> LogEntry:
    created_raw = row.get("created_at")
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
        calories_in=coerce_number(row.get("calories_in")),
        calories_out=coerce_number(row.get("calories_out")),
        protein=coerce_number(row.get("protein")),
        carbs=coerce_number(row.get("carbs")),
        fat=coerce_number(row.get("fat")),
        vitamin_note=str(row.get("vitamin_text") or ""),
        explanation=str(row.get("explanation") or ""),
        created_at=created_at,
    )
