"""Pydantic request and response models for the JSON API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from calorie_tracker.domain.entries import EntryKind, LogEntry, NewLogEntry
from calorie_tracker.domain.profile import FoodPreset, Profile
from calorie_tracker.domain.summary import (
    DailyAggregate,
    DashboardSummary,
    DashboardView,
    DateRange,
)
from calorie_tracker.domain.weights import WeightSample


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EntryCreate(CamelModel):
    """Request body for creating a log entry."""

    date: str
    type: EntryKind
    text: str
    calories_in: float = 0
    calories_out: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    vitamin_text: str = ""
    explanation: str = ""

    def to_domain(self) -> NewLogEntry:
        """Convert the request body into a domain entry."""
        return NewLogEntry(
            date=self.date,
            kind=self.type,
            description=self.text.strip(),
            calories_in=self.calories_in,
            calories_out=self.calories_out,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            vitamin_note=self.vitamin_text,
            explanation=self.explanation,
        )


class EntryOut(CamelModel):
    """Stored log entry."""

    id: int
    date: str
    type: EntryKind
    text: str
    calories_in: float
    calories_out: float
    protein: float
    carbs: float
    fat: float
    vitamin_text: str
    explanation: str
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, entry: LogEntry) -> "EntryOut":
        return cls(
            id=entry.id,
            date=entry.date,
            type=entry.kind,
            text=entry.description,
            calories_in=entry.calories_in,
            calories_out=entry.calories_out,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            vitamin_text=entry.vitamin_note,
            explanation=entry.explanation,
            created_at=entry.created_at,
        )


class WeightCreate(CamelModel):
    """Request body for recording a weight."""

    date: str
    weight: float


class WeightOut(CamelModel):
    """Stored weight sample."""

    id: int
    date: str
    weight: float

    @classmethod
    def from_domain(cls, sample: WeightSample) -> "WeightOut":
        return cls(id=sample.id, date=sample.date, weight=sample.weight)


class ProfileOut(CamelModel):
    """Daily goals."""

    calorie_budget: float
    protein_target: float

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileOut":
        return cls(
            calorie_budget=profile.calorie_budget,
            protein_target=profile.protein_target,
        )


class ProfileUpdate(CamelModel):
    """Partial update of daily goals."""

    calorie_budget: float | None = None
    protein_target: float | None = None


class PresetIn(CamelModel):
    """Request body for creating or replacing a preset."""

    name: str
    default_portion: str = ""
    calories_in: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    vitamin_note: str = ""


class PresetOut(PresetIn):
    """Stored preset."""

    id: int

    @classmethod
    def from_domain(cls, preset: FoodPreset) -> "PresetOut":
        return cls(
            id=preset.id,
            name=preset.name,
            default_portion=preset.default_portion,
            calories_in=preset.calories_in,
            protein=preset.protein,
            carbs=preset.carbs,
            fat=preset.fat,
            vitamin_note=preset.vitamin_note,
        )


class DailyAggregateOut(CamelModel):
    """Totals for one day."""

    date: str
    calories_in: float
    calories_out: float
    net: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_domain(cls, row: DailyAggregate) -> "DailyAggregateOut":
        return cls(
            date=row.date,
            calories_in=row.calories_in,
            calories_out=row.calories_out,
            net=row.net,
            protein=row.protein,
            carbs=row.carbs,
            fat=row.fat,
        )


class SummaryOut(CamelModel):
    """Today's figures and weight trend."""

    today: DailyAggregateOut
    latest_weight: WeightOut | None
    weight_delta: float | None

    @classmethod
    def from_domain(cls, summary: DashboardSummary) -> "SummaryOut":
        latest = summary.latest_weight
        return cls(
            today=DailyAggregateOut.from_domain(summary.today),
            latest_weight=WeightOut.from_domain(latest) if latest else None,
            weight_delta=summary.weight_delta,
        )


class DashboardOut(CamelModel):
    """Dashboard view for one date range."""

    range: DateRange
    daily: list[DailyAggregateOut]
    weights: list[WeightOut]
    summary: SummaryOut
    recent: list[EntryOut]

    @classmethod
    def from_domain(cls, view: DashboardView) -> "DashboardOut":
        return cls(
            range=view.date_range,
            daily=[DailyAggregateOut.from_domain(row) for row in view.daily],
            weights=[WeightOut.from_domain(sample) for sample in view.weights],
            summary=SummaryOut.from_domain(view.summary),
            recent=[EntryOut.from_domain(entry) for entry in view.recent],
        )
