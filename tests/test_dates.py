from __future__ import annotations

from datetime import datetime, timezone

import pytest

from utils.dates import DayWindow, INVALID_DATE_MESSAGE, parse_day, to_storage, today_string
from utils.errors import ValidationError


def test_parse_day_accepts_padded_and_unpadded_parts(tz):
    assert parse_day("05", "03", "2025", tz).label == "05/03/2025"
    assert parse_day("5", "3", "2025", tz).label == "05/03/2025"


@pytest.mark.parametrize(
    "day, month, year",
    [
        ("31", "02", "2025"),
        ("29", "02", "2025"),
        ("00", "01", "2025"),
        ("12", "13", "2025"),
        ("aa", "01", "2025"),
        ("1", "1", "25"),
        ("123", "01", "2025"),
        ("\u0661\u0665", "01", "2025"),
        (" 15", "01", "2025"),
        ("15", "01", "2025\n"),
    ],
)
def test_parse_day_rejects_invalid_dates(tz, day, month, year):
    with pytest.raises(ValidationError) as exc:
        parse_day(day, month, year, tz)
    assert exc.value.message == INVALID_DATE_MESSAGE


def test_leap_day_is_accepted(tz):
    assert parse_day("29", "02", "2024", tz).label == "29/02/2024"


def test_day_window_storage_bounds_are_utc(tz):
    window = parse_day("18", "10", "2026", tz)
    start, end = window.storage_bounds()

    # Asia/Kolkata is UTC+05:30
    assert start == datetime(2026, 10, 17, 18, 30, 0)
    assert end == datetime(2026, 10, 18, 18, 29, 59, 999000)
    assert start.tzinfo is None and end.tzinfo is None


def test_day_window_local_bounds(tz):
    window = DayWindow(datetime(2025, 1, 15).date(), tz)
    assert (window.start.hour, window.start.minute, window.start.second) == (0, 0, 0)
    assert (window.end.hour, window.end.minute, window.end.second) == (23, 59, 59)
    assert window.end.microsecond == 999000


def test_today_string_uses_reference_timezone(tz):
    # 20:00 UTC is already the next day in Kolkata
    now = datetime(2026, 10, 18, 20, 0, tzinfo=timezone.utc)
    assert today_string(tz, now) == "19/10/2026"


def test_to_storage_truncates_to_milliseconds():
    value = datetime(2025, 1, 1, 10, 0, 0, 123456, tzinfo=timezone.utc)
    assert to_storage(value) == datetime(2025, 1, 1, 10, 0, 0, 123000)
