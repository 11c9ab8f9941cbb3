"""Client-side application state and actions for the tracker dashboard."""

import asyncio
import logging
import math
from dataclasses import dataclass, field

import httpx

from calorie_tracker.adapters.tracker_client import TrackerClient
from calorie_tracker.domain.dates import ensure_iso_date, today_string
from calorie_tracker.domain.entries import EntryKind, LogEntry, NewLogEntry
from calorie_tracker.domain.errors import LoadError, ValidationError
from calorie_tracker.domain.profile import FoodPreset, Profile
from calorie_tracker.domain.summary import DashboardView, DateRange
from calorie_tracker.domain.weights import WeightSample
from calorie_tracker.services.aggregation import (
    DEFAULT_RECENT_LIMIT,
    build_dashboard,
    coerce_number,
)
from calorie_tracker.services.presets import prefill_entry

_logger = logging.getLogger(__name__)

DESCRIPTION_REQUIRED = "Please describe what you ate or which activity you did."
WEIGHT_REQUIRED = "Please enter a valid weight and date."


@dataclass
class AppState:
    """Everything the dashboard shows, passed explicitly to every action."""

    entries: list[LogEntry] = field(default_factory=list)
    weights: list[WeightSample] = field(default_factory=list)
    profile: Profile = field(default_factory=Profile)
    presets: list[FoodPreset] = field(default_factory=list)
    date_range: DateRange = DateRange.ALL
    loading: bool = True
    error: str = ""


@dataclass(frozen=True)
class EntryForm:
    """Raw values typed into the entry form."""

    date: str
    text: str
    kind: str = EntryKind.FOOD.value
    calories_in: object = ""
    calories_out: object = ""
    protein: object = ""
    carbs: object = ""
    fat: object = ""
    vitamin_text: str = ""
    explanation: str = ""


@dataclass(frozen=True)
class Snapshot:
    """Collections fetched together on initial load."""

    entries: list[LogEntry]
    weights: list[WeightSample]
    profile: Profile
    presets: list[FoodPreset]


async def fetch_all(client: TrackerClient) -> Snapshot:
    """Fetch every collection concurrently; any failure fails the whole load."""
    try:
        async with asyncio.TaskGroup() as group:
            entries = group.create_task(client.list_entries())
            weights = group.create_task(client.list_weights())
            profile = group.create_task(client.get_profile())
            presets = group.create_task(client.list_presets())
    except ExceptionGroup as errors:
        raise LoadError("Failed to load data from API") from errors.exceptions[0]
    return Snapshot(
        entries=entries.result(),
        weights=weights.result(),
        profile=profile.result(),
        presets=presets.result(),
    )


def entry_from_form(form: EntryForm, default_date: str) -> NewLogEntry:
    """Validate the entry form and convert it into a new entry."""
    text = form.text.strip()
    if not text:
        raise ValidationError(DESCRIPTION_REQUIRED)
    try:
        kind = EntryKind(form.kind)
    except ValueError as exc:
        raise ValidationError(f"Unknown entry type: {form.kind!r}") from exc
    return NewLogEntry(
        date=ensure_iso_date(form.date or default_date),
        kind=kind,
        description=text,
        calories_in=coerce_number(form.calories_in),
        calories_out=coerce_number(form.calories_out),
        protein=coerce_number(form.protein),
        carbs=coerce_number(form.carbs),
        fat=coerce_number(form.fat),
        vitamin_note=form.vitamin_text.strip(),
        explanation=form.explanation.strip() or text,
    )


def weight_from_form(day: str, raw_weight: object) -> tuple[str, float]:
    """Validate the weight form."""
    try:
        weight = float(str(raw_weight).strip())
    except ValueError as exc:
        raise ValidationError(WEIGHT_REQUIRED) from exc
    if not day or not math.isfinite(weight):
        raise ValidationError(WEIGHT_REQUIRED)
    try:
        return ensure_iso_date(day), weight
    except ValidationError as exc:
        raise ValidationError(WEIGHT_REQUIRED) from exc


@dataclass
class TrackerController:
    """Runs user actions against the API and keeps AppState in sync."""

    client: TrackerClient
    timezone_name: str | None = None
    recent_limit: int = DEFAULT_RECENT_LIMIT

    def today(self) -> str:
        """Return the current day used as the range reference."""
        return today_string(self.timezone_name)

    async def load(self, state: AppState) -> bool:
        """Populate the state from the API, all or nothing."""
        state.error = ""
        try:
            snapshot = await fetch_all(self.client)
        except LoadError as exc:
            _logger.warning("Initial load failed: %s", exc.__cause__)
            state.error = str(exc)
            return False
        finally:
            state.loading = False
        state.entries = snapshot.entries
        state.weights = snapshot.weights
        state.profile = snapshot.profile
        state.presets = snapshot.presets
        return True

    def view(self, state: AppState, today: str | None = None) -> DashboardView:
        """Recompute the dashboard from the current state."""
        return build_dashboard(
            state.entries,
            state.weights,
            state.date_range,
            today or self.today(),
            recent_limit=self.recent_limit,
        )

    def set_range(self, state: AppState, value: str) -> None:
        """Switch the active date range."""
        state.date_range = DateRange(value)

    async def add_entry(self, state: AppState, form: EntryForm) -> LogEntry | None:
        """Validate and save an entry; state changes only after the server agrees."""
        state.error = ""
        try:
            entry = entry_from_form(form, default_date=self.today())
        except ValidationError as exc:
            state.error = str(exc)
            return None
        try:
            saved = await self.client.create_entry(entry)
        except httpx.HTTPError:
            _logger.exception("Failed to save entry")
            state.error = "Failed to save entry to server"
            return None
        state.entries = [*state.entries, saved]
        return saved

    async def add_weight(
        self, state: AppState, day: str, raw_weight: object
    ) -> WeightSample | None:
        """Validate and save a weight, replacing any sample for the same date."""
        state.error = ""
        try:
            day, weight = weight_from_form(day, raw_weight)
        except ValidationError as exc:
            state.error = str(exc)
            return None
        try:
            saved = await self.client.record_weight(day, weight)
        except httpx.HTTPError:
            _logger.exception("Failed to save weight")
            state.error = "Failed to save weight to server"
            return None
        state.weights = [
            *(sample for sample in state.weights if sample.date != saved.date),
            saved,
        ]
        return saved

    async def update_profile(
        self,
        state: AppState,
        calorie_budget: object = None,
        protein_target: object = None,
    ) -> Profile | None:
        """Save new goals; blank inputs leave the current goal unchanged."""
        state.error = ""
        try:
            profile = await self.client.update_profile(
                calorie_budget=_optional_number(calorie_budget),
                protein_target=_optional_number(protein_target),
            )
        except httpx.HTTPError:
            _logger.exception("Failed to update profile")
            state.error = "Failed to update profile"
            return None
        state.profile = profile
        return profile

    async def add_preset(
        self, state: AppState, payload: dict[str, object]
    ) -> FoodPreset | None:
        """Save a new food preset."""
        state.error = ""
        if not str(payload.get("name", "")).strip():
            state.error = "Please give the preset a name."
            return None
        try:
            preset = await self.client.create_preset(payload)
        except httpx.HTTPError:
            _logger.exception("Failed to save preset")
            state.error = "Failed to save preset"
            return None
        state.presets = [*state.presets, preset]
        return preset

    def prefill_from_preset(
        self, state: AppState, preset_id: int, day: str | None = None
    ) -> EntryForm | None:
        """Return an entry form filled from a preset, or None if it is unknown."""
        preset = next((item for item in state.presets if item.id == preset_id), None)
        if preset is None:
            return None
        draft = prefill_entry(preset, day or self.today())
        return EntryForm(
            date=draft.date,
            text=draft.description,
            kind=draft.kind.value,
            calories_in=draft.calories_in,
            protein=draft.protein,
            carbs=draft.carbs,
            fat=draft.fat,
            vitamin_text=draft.vitamin_note,
        )


def _optional_number(value: object) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return coerce_number(value)
