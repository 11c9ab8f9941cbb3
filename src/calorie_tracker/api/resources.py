"""JSON resource endpoints for entries, weights, profile and presets."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, Response, status

from calorie_tracker.api.schemas import (
    DashboardOut,
    EntryCreate,
    EntryOut,
    PresetIn,
    PresetOut,
    ProfileOut,
    ProfileUpdate,
    WeightCreate,
    WeightOut,
)
from calorie_tracker.domain.summary import DateRange

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["tracker"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/entries")
async def list_entries(request: Request) -> list[EntryOut]:
    """Return every log entry."""
    entries = _container(request).entry_service.list_all()
    return [EntryOut.from_domain(entry) for entry in entries]


@router.post("/entries", status_code=status.HTTP_201_CREATED)
async def create_entry(body: EntryCreate, request: Request) -> EntryOut:
    """Create a log entry."""
    created = _container(request).entry_service.create(body.to_domain())
    return EntryOut.from_domain(created)


@router.get("/weights")
async def list_weights(request: Request) -> list[WeightOut]:
    """Return weight samples ascending by date."""
    samples = _container(request).weight_service.list_all()
    return [WeightOut.from_domain(sample) for sample in samples]


@router.post("/weights", status_code=status.HTTP_201_CREATED)
async def record_weight(body: WeightCreate, request: Request) -> WeightOut:
    """Record the weight for a date, replacing an earlier one."""
    sample = _container(request).weight_service.record(body.date, body.weight)
    return WeightOut.from_domain(sample)


@router.get("/profile")
async def get_profile(request: Request) -> ProfileOut:
    """Return the profile, creating it on first access."""
    return ProfileOut.from_domain(_container(request).profile_service.get())


@router.put("/profile")
async def update_profile(body: ProfileUpdate, request: Request) -> ProfileOut:
    """Update the provided goals."""
    profile = _container(request).profile_service.update(
        calorie_budget=body.calorie_budget,
        protein_target=body.protein_target,
    )
    return ProfileOut.from_domain(profile)


@router.get("/presets")
async def list_presets(request: Request) -> list[PresetOut]:
    """Return all food presets."""
    presets = _container(request).preset_service.list_all()
    return [PresetOut.from_domain(preset) for preset in presets]


@router.post("/presets", status_code=status.HTTP_201_CREATED)
async def create_preset(body: PresetIn, request: Request) -> PresetOut:
    """Create a food preset."""
    preset = _container(request).preset_service.create(body.model_dump())
    return PresetOut.from_domain(preset)


@router.get("/presets/{preset_id}")
async def get_preset(preset_id: int, request: Request) -> PresetOut:
    """Return one food preset."""
    return PresetOut.from_domain(_container(request).preset_service.get(preset_id))


@router.put("/presets/{preset_id}")
async def update_preset(preset_id: int, body: PresetIn, request: Request) -> PresetOut:
    """Replace a food preset."""
    preset = _container(request).preset_service.update(preset_id, body.model_dump())
    return PresetOut.from_domain(preset)


@router.delete("/presets/{preset_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_preset(preset_id: int, request: Request) -> Response:
    """Delete a food preset."""
    _container(request).preset_service.delete(preset_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/dashboard")
async def get_dashboard(
    request: Request,
    date_range: DateRange = Query(default=DateRange.ALL, alias="range"),
    today: str | None = None,
) -> DashboardOut:
    """Return daily totals, weight series and today's summary for a range."""
    view = _container(request).dashboard_service.get_dashboard(date_range, today)
    return DashboardOut.from_domain(view)
