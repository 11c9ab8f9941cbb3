"""Server-side dashboard assembly."""

from dataclasses import dataclass

from calorie_tracker.domain.dates import ensure_iso_date, today_string
from calorie_tracker.domain.summary import DashboardView, DateRange
from calorie_tracker.services.aggregation import DEFAULT_RECENT_LIMIT, build_dashboard
from calorie_tracker.services.entries import EntryService
from calorie_tracker.services.weights import WeightService


@dataclass
class DashboardService:
    """Builds dashboard views from the current store snapshots."""

    entry_service: EntryService
    weight_service: WeightService
    timezone_name: str | None = None
    recent_limit: int = DEFAULT_RECENT_LIMIT

    def get_dashboard(
        self, date_range: DateRange = DateRange.ALL, today: str | None = None
    ) -> DashboardView:
        """Return the dashboard for a range ending today."""
        reference = (
            ensure_iso_date(today) if today else today_string(self.timezone_name)
        )
        return build_dashboard(
            self.entry_service.list_all(),
            self.weight_service.list_all(),
            date_range,
            reference,
            recent_limit=self.recent_limit,
        )
