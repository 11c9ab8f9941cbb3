"""Daily aggregation and dashboard summary engine.

Every function here is pure: it reads immutable snapshots of the entry and
weight collections and builds fresh results on each call.
"""

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from calorie_tracker.domain.dates import days_before
from calorie_tracker.domain.entries import LogEntry
from calorie_tracker.domain.summary import (
    DailyAggregate,
    DashboardSummary,
    DashboardView,
    DateRange,
)
from calorie_tracker.domain.weights import WeightSample

DEFAULT_RECENT_LIMIT = 10

_SUMMED_FIELDS = ("calories_in", "calories_out", "protein", "carbs", "fat")


class Dated(Protocol):
    """Anything carrying a canonical date string."""

    date: str


DatedT = TypeVar("DatedT", bound=Dated)


def coerce_number(value: object) -> float:
    """Return value as a finite float, or 0.0 when it is missing or not numeric."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


def aggregate_by_day(entries: Iterable[LogEntry]) -> list[DailyAggregate]:
    """Sum every entry's calories and macros per date, ascending by date."""
    values: dict[str, dict[str, list[float]]] = defaultdict(
        lambda: {name: [] for name in _SUMMED_FIELDS}
    )
    for entry in entries:
        day = values[entry.date]
        for name in _SUMMED_FIELDS:
            day[name].append(coerce_number(getattr(entry, name, None)))
    # fsum is correctly rounded, so totals do not depend on entry order
    return [
        DailyAggregate(
            date=day, **{name: math.fsum(parts) for name, parts in fields.items()}
        )
        for day, fields in sorted(values.items())
    ]


def build_weight_series(samples: Iterable[WeightSample]) -> list[WeightSample]:
    """Return one sample per date, ascending by date.

    Stores keep dates unique; if duplicates slip through, the one appearing
    last in the input wins.
    """
    by_date: dict[str, WeightSample] = {}
    for sample in samples:
        by_date[sample.date] = sample
    return [by_date[day] for day in sorted(by_date)]


def filter_by_range(
    series: Sequence[DatedT], date_range: DateRange, reference_date: str
) -> list[DatedT]:
    """Keep items inside the trailing window that ends on reference_date."""
    date_range = DateRange(date_range)
    if date_range is DateRange.ALL:
        return list(series)
    if date_range is DateRange.TODAY:
        return [item for item in series if item.date == reference_date]
    cutoff = days_before(reference_date, date_range.days - 1)
    return [item for item in series if item.date >= cutoff]


def summarize(
    daily: Sequence[DailyAggregate],
    weight_series: Sequence[WeightSample],
    today: str,
) -> DashboardSummary:
    """Build today's figures and the weight change across the series."""
    today_row = next(
        (row for row in daily if row.date == today), DailyAggregate(date=today)
    )
    latest = weight_series[-1] if weight_series else None
    delta = None
    if len(weight_series) >= 2:  # noqa: PLR2004
        delta = weight_series[-1].weight - weight_series[0].weight
    return DashboardSummary(today=today_row, latest_weight=latest, weight_delta=delta)


def recent_entries(
    entries: Iterable[LogEntry], limit: int = DEFAULT_RECENT_LIMIT
) -> list[LogEntry]:
    """Return the newest entries by date, newest id first within a day."""
    ranked = sorted(entries, key=lambda entry: (entry.date, entry.id), reverse=True)
    return ranked[: max(limit, 0)]


def build_dashboard(
    entries: Sequence[LogEntry],
    weights: Sequence[WeightSample],
    date_range: DateRange,
    today: str,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> DashboardView:
    """Recompute every dashboard view from the raw collections."""
    daily = aggregate_by_day(entries)
    weight_series = filter_by_range(build_weight_series(weights), date_range, today)
    return DashboardView(
        date_range=date_range,
        daily=filter_by_range(daily, date_range, today),
        weights=weight_series,
        summary=summarize(daily, weight_series, today),
        recent=recent_entries(entries, recent_limit),
    )
