"""Supabase repository for weight samples."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from calorie_tracker.domain.errors import StoreError
from calorie_tracker.domain.weights import WeightSample
from calorie_tracker.services.aggregation import coerce_number
from calorie_tracker.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for weights, unique on date."""

    client: Client

    def upsert_weight(self, day: str, weight: float) -> WeightSample:
        """Insert or replace the sample for a date."""
        response = (
            self.client.table("weights")
            .upsert(
                {
                    "date": day,
                    "weight": weight,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="date",
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to save weight")
        return _parse_weight(response.data[0])

    def list_weights(self) -> list[WeightSample]:
        """Return all samples ascending by date."""
        response = (
            self.client.table("weights")
            .select("id, date, weight")
            .order("date", desc=False)
            .execute()
        )
        return [_parse_weight(row) for row in response.data or []]


def _parse_weight(row: dict[str, object]) -> WeightSample:
    return WeightSample(
        id=int(row["id"]),
        date=str(row.get("date", "")),
        weight=coerce_number(row.get("weight")),
    )
