"""Derived daily and dashboard views."""

from dataclasses import dataclass, field
from enum import StrEnum

from calorie_tracker.domain.entries import LogEntry
from calorie_tracker.domain.weights import WeightSample


class DateRange(StrEnum):
    """Trailing window applied to charts and the weight trend."""

    ALL = "all"
    LAST_7 = "7"
    LAST_30 = "30"
    TODAY = "today"

    @property
    def days(self) -> int | None:
        """Number of calendar days in the window, or None for no limit."""
        return _RANGE_DAYS[self]


_RANGE_DAYS: dict[DateRange, int | None] = {
    DateRange.ALL: None,
    DateRange.LAST_7: 7,
    DateRange.LAST_30: 30,
    DateRange.TODAY: 1,
}


@dataclass(frozen=True)
class DailyAggregate:
    """Totals of every entry logged on one date."""

    date: str
    calories_in: float = 0.0
    calories_out: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    @property
    def net(self) -> float:
        """Calories in minus calories out."""
        return self.calories_in - self.calories_out


@dataclass(frozen=True)
class DashboardSummary:
    """Today's figures plus the weight trend of the active series."""

    today: DailyAggregate
    latest_weight: WeightSample | None
    weight_delta: float | None


@dataclass(frozen=True)
class DashboardView:
    """Everything a renderer needs for one dashboard pass."""

    date_range: DateRange
    daily: list[DailyAggregate]
    weights: list[WeightSample]
    summary: DashboardSummary
    recent: list[LogEntry] = field(default_factory=list)
