"""Tests for the client-side tracker controller."""

import asyncio
from dataclasses import dataclass, field

import httpx

from calorie_tracker.adapters.tracker_client import TrackerClient
from calorie_tracker.domain.entries import LogEntry, NewLogEntry
from calorie_tracker.domain.profile import FoodPreset, Profile
from calorie_tracker.domain.summary import DateRange
from calorie_tracker.domain.weights import WeightSample
from calorie_tracker.services.tracker import (
    DESCRIPTION_REQUIRED,
    WEIGHT_REQUIRED,
    AppState,
    EntryForm,
    TrackerController,
)
from tests.conftest import make_entry


def _http_error() -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://tracker.test/api")
    response = httpx.Response(500, request=request)
    return httpx.HTTPStatusError("boom", request=request, response=response)


@dataclass
class FakeTrackerClient(TrackerClient):
    """Fake API client with in-memory data and failure switches."""

    entries: list[LogEntry] = field(default_factory=list)
    weights: list[WeightSample] = field(default_factory=list)
    presets: list[FoodPreset] = field(default_factory=list)
    profile: Profile = field(default_factory=Profile)
    failing: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failing:
            raise _http_error()

    async def list_entries(self) -> list[LogEntry]:
        self._check("list_entries")
        return list(self.entries)

    async def list_weights(self) -> list[WeightSample]:
        self._check("list_weights")
        return list(self.weights)

    async def get_profile(self) -> Profile:
        self._check("get_profile")
        return self.profile

    async def list_presets(self) -> list[FoodPreset]:
        self._check("list_presets")
        return list(self.presets)

    async def create_entry(self, entry: NewLogEntry) -> LogEntry:
        self._check("create_entry")
        stored = LogEntry(
            id=len(self.entries) + 1,
            date=entry.date,
            kind=entry.kind,
            description=entry.description,
            calories_in=entry.calories_in,
            calories_out=entry.calories_out,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            vitamin_note=entry.vitamin_note,
            explanation=entry.explanation,
        )
        self.entries.append(stored)
        return stored

    async def record_weight(self, day: str, weight: float) -> WeightSample:
        self._check("record_weight")
        sample = WeightSample(id=len(self.weights) + 1, date=day, weight=weight)
        self.weights = [w for w in self.weights if w.date != day] + [sample]
        return sample

    async def update_profile(
        self, calorie_budget: float | None = None, protein_target: float | None = None
    ) -> Profile:
        self._check("update_profile")
        current = self.profile
        self.profile = Profile(
            calorie_budget=current.calorie_budget
            if calorie_budget is None
            else calorie_budget,
            protein_target=current.protein_target
            if protein_target is None
            else protein_target,
        )
        return self.profile

    async def create_preset(self, preset: dict[str, object]) -> FoodPreset:
        self._check("create_preset")
        created = FoodPreset(
            id=len(self.presets) + 1,
            name=str(preset["name"]),
            default_portion=str(preset.get("defaultPortion", "")),
            calories_in=float(preset.get("caloriesIn", 0)),
            protein=float(preset.get("protein", 0)),
            carbs=float(preset.get("carbs", 0)),
            fat=float(preset.get("fat", 0)),
            vitamin_note=str(preset.get("vitaminNote", "")),
        )
        self.presets.append(created)
        return created


def test_load_populates_state() -> None:
    client = FakeTrackerClient(
        entries=[make_entry(1, "2024-03-10", calories_in=500)],
        weights=[WeightSample(id=1, date="2024-03-10", weight=80)],
        profile=Profile(calorie_budget=2000, protein_target=100),
    )
    state = AppState()

    loaded = asyncio.run(TrackerController(client).load(state))

    assert loaded is True
    assert state.loading is False
    assert state.error == ""
    assert len(state.entries) == 1
    assert state.profile.calorie_budget == 2000
    assert set(client.calls) == {
        "list_entries",
        "list_weights",
        "get_profile",
        "list_presets",
    }


def test_load_failure_is_all_or_nothing() -> None:
    client = FakeTrackerClient(
        entries=[make_entry(1, "2024-03-10")],
        failing={"list_weights"},
    )
    state = AppState()

    loaded = asyncio.run(TrackerController(client).load(state))

    assert loaded is False
    assert state.loading is False
    assert state.error == "Failed to load data from API"
    assert state.entries == []
    assert state.weights == []


def test_add_entry_validation_skips_network() -> None:
    client = FakeTrackerClient()
    state = AppState()

    saved = asyncio.run(
        TrackerController(client).add_entry(
            state, EntryForm(date="2024-03-10", text="   ")
        )
    )

    assert saved is None
    assert state.error == DESCRIPTION_REQUIRED
    assert client.calls == []


def test_add_entry_appends_after_ack() -> None:
    client = FakeTrackerClient()
    state = AppState()
    form = EntryForm(
        date="2024-03-10", text=" 2 eggs ", calories_in="180", calories_out="abc"
    )

    saved = asyncio.run(TrackerController(client).add_entry(state, form))

    assert saved is not None
    assert saved.description == "2 eggs"
    assert saved.calories_in == 180
    assert saved.calories_out == 0
    assert saved.explanation == "2 eggs"
    assert state.entries == [saved]


def test_add_entry_write_failure_keeps_state() -> None:
    client = FakeTrackerClient(failing={"create_entry"})
    existing = make_entry(1, "2024-03-09")
    state = AppState(entries=[existing])

    saved = asyncio.run(
        TrackerController(client).add_entry(
            state, EntryForm(date="2024-03-10", text="soup")
        )
    )

    assert saved is None
    assert state.entries == [existing]
    assert state.error == "Failed to save entry to server"


def test_add_weight_validation() -> None:
    client = FakeTrackerClient()
    state = AppState()
    controller = TrackerController(client)

    assert asyncio.run(controller.add_weight(state, "2024-03-10", "heavy")) is None
    assert state.error == WEIGHT_REQUIRED
    assert asyncio.run(controller.add_weight(state, "", "80")) is None
    assert state.error == WEIGHT_REQUIRED
    assert client.calls == []


def test_add_weight_replaces_same_date() -> None:
    client = FakeTrackerClient()
    state = AppState(
        weights=[
            WeightSample(id=1, date="2024-03-09", weight=81),
            WeightSample(id=2, date="2024-03-10", weight=80.5),
        ]
    )

    saved = asyncio.run(
        TrackerController(client).add_weight(state, "2024-03-10", "80.1")
    )

    assert saved is not None
    assert [(w.date, w.weight) for w in state.weights] == [
        ("2024-03-09", 81),
        ("2024-03-10", 80.1),
    ]


def test_view_recomputes_for_selected_range() -> None:
    controller = TrackerController(FakeTrackerClient())
    state = AppState(
        entries=[
            make_entry(1, "2024-03-01", calories_in=900),
            make_entry(2, "2024-03-10", calories_in=500, calories_out=200),
        ],
        weights=[
            WeightSample(id=1, date="2024-03-01", weight=82),
            WeightSample(id=2, date="2024-03-10", weight=80),
        ],
    )

    everything = controller.view(state, today="2024-03-10")
    controller.set_range(state, "7")
    last_week = controller.view(state, today="2024-03-10")

    assert everything.summary.weight_delta == -2
    assert len(everything.daily) == 2
    assert state.date_range is DateRange.LAST_7
    assert [row.date for row in last_week.daily] == ["2024-03-10"]
    assert last_week.summary.weight_delta is None
    assert last_week.summary.today.net == 300


def test_update_profile_ignores_blank_inputs() -> None:
    client = FakeTrackerClient(profile=Profile(calorie_budget=2000, protein_target=90))
    state = AppState()

    profile = asyncio.run(
        TrackerController(client).update_profile(
            state, calorie_budget="", protein_target="120"
        )
    )

    assert profile == Profile(calorie_budget=2000, protein_target=120)
    assert state.profile == profile


def test_presets_add_and_prefill() -> None:
    client = FakeTrackerClient()
    state = AppState()
    controller = TrackerController(client)

    missing_name = asyncio.run(controller.add_preset(state, {"name": " "}))
    preset = asyncio.run(
        controller.add_preset(
            state, {"name": "Toast", "defaultPortion": "2 slices", "caloriesIn": 160}
        )
    )
    form = controller.prefill_from_preset(state, preset.id, day="2024-03-10")

    assert missing_name is None
    assert form is not None
    assert form.text == "Toast (2 slices)"
    assert form.calories_in == 160
    assert form.date == "2024-03-10"
    assert controller.prefill_from_preset(state, 999) is None


def test_add_weight_rejects_infinite_values() -> None:
    client = FakeTrackerClient()
    state = AppState()
    controller = TrackerController(client)

    assert asyncio.run(controller.add_weight(state, "2024-03-10", "inf")) is None
    assert asyncio.run(controller.add_weight(state, "2024-03-10", "-inf")) is None
    assert state.error == WEIGHT_REQUIRED
    assert client.calls == []
