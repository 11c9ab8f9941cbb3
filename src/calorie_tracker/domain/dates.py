"""Calendar-day helpers for canonical YYYY-MM-DD strings."""

import re
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from calorie_tracker.domain.errors import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def ensure_iso_date(value: object) -> str:
    """Return the value if it is a canonical calendar date string.

    Lexicographic order of canonical strings equals calendar order, so any
    other spelling is rejected rather than normalized.
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValidationError(f"Date must be formatted as YYYY-MM-DD: {value!r}")
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Not a calendar date: {value!r}") from exc
    return value


def today_string(timezone_name: str | None = None) -> str:
    """Return the current wall-clock day, local time unless a zone is given."""
    if timezone_name:
        return datetime.now(tz=ZoneInfo(timezone_name)).date().isoformat()
    return date.today().isoformat()


def days_before(day: str, days: int) -> str:
    """Return the canonical date `days` calendar days before `day`."""
    return (date.fromisoformat(day) - timedelta(days=days)).isoformat()
