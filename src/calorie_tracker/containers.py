"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from calorie_tracker.adapters.supabase_preset_repository import (
    SupabasePresetRepository,
)
from calorie_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from calorie_tracker.adapters.supabase_weight_repository import (
    SupabaseWeightRepository,
)
from calorie_tracker.adapters.tracker_client import HttpxTrackerClient
from calorie_tracker.config import Settings
from calorie_tracker.services.dashboard import DashboardService
from calorie_tracker.services.entries import EntryService
from calorie_tracker.services.presets import PresetService
from calorie_tracker.services.profile import ProfileService
from calorie_tracker.services.tracker import TrackerController
from calorie_tracker.services.weights import WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    weight_service: WeightService
    profile_service: ProfileService
    preset_service: PresetService
    dashboard_service: DashboardService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_service = EntryService(SupabaseEntryRepository(supabase_client))
    weight_service = WeightService(SupabaseWeightRepository(supabase_client))
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    preset_service = PresetService(SupabasePresetRepository(supabase_client))
    dashboard_service = DashboardService(
        entry_service=entry_service,
        weight_service=weight_service,
        timezone_name=resolved_settings.timezone,
        recent_limit=resolved_settings.recent_limit,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        entry_service=entry_service,
        weight_service=weight_service,
        profile_service=profile_service,
        preset_service=preset_service,
        dashboard_service=dashboard_service,
        close_resources=close_resources,
    )


def build_tracker_controller(
    settings: Settings | None = None,
) -> tuple[TrackerController, Callable[[], Awaitable[None]]]:
    """Create a client-side controller talking to the configured API."""
    resolved_settings = settings or Settings()
    client = HttpxTrackerClient.create(resolved_settings.api_base_url)
    controller = TrackerController(
        client=client,
        timezone_name=resolved_settings.timezone,
        recent_limit=resolved_settings.recent_limit,
    )
    return controller, client.close
