"""Tests for calendar-day helpers."""

import re

import pytest

from calorie_tracker.domain.dates import days_before, ensure_iso_date, today_string
from calorie_tracker.domain.errors import ValidationError


def test_days_before_uses_calendar_days() -> None:
    assert days_before("2024-03-10", 6) == "2024-03-04"
    assert days_before("2024-03-01", 1) == "2024-02-29"
    assert days_before("2024-01-01", 0) == "2024-01-01"


@pytest.mark.parametrize("value", ["2024-1-01", "2024-13-01", None, 20240101])
def test_ensure_iso_date_rejects(value: object) -> None:
    with pytest.raises(ValidationError):
        ensure_iso_date(value)


def test_today_string_is_canonical() -> None:
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today_string())
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", today_string("Pacific/Auckland"))
