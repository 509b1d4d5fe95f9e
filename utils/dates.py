"""
utils/dates.py
-----------------
Reference-timezone helpers: "today", the DD/MM/YYYY day format and
conversion between local day windows and the naive UTC datetimes
MongoDB stores.
"""

import re
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from flask import current_app

from utils.errors import ValidationError

DATE_FORMAT = "%d/%m/%Y"
INVALID_DATE_MESSAGE = "Invalid date format. Use dd/mm/yyyy"

_DAY_MONTH_RE = re.compile(r"[0-9]{1,2}")
_YEAR_RE = re.compile(r"[0-9]{4}")


def reference_timezone(name=None):
    """ZoneInfo for `name`, or for the app's REFERENCE_TIMEZONE."""
    return ZoneInfo(name or current_app.config["REFERENCE_TIMEZONE"])


def now_in(tz):
    return datetime.now(tz)


def today_string(tz, now=None):
    now = now or now_in(tz)
    return now.astimezone(tz).strftime(DATE_FORMAT)


def to_storage(dt):
    """
    Naive UTC datetime with millisecond precision, the way BSON dates are stored.
    Naive input is assumed to already be UTC.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


def from_storage(dt, tz):
    return dt.replace(tzinfo=timezone.utc).astimezone(tz)


class DayWindow:
    """A calendar day in the reference timezone, as a closed interval."""

    def __init__(self, day, tz):
        self.day = day
        self.tz = tz
        self.start = datetime(day.year, day.month, day.day, tzinfo=tz)
        self.end = self.start + timedelta(hours=23, minutes=59, seconds=59, milliseconds=999)

    @property
    def label(self):
        return self.day.strftime(DATE_FORMAT)

    def storage_bounds(self):
        return to_storage(self.start), to_storage(self.end)

    def __repr__(self):
        return f"DayWindow({self.label}, {self.tz})"


def parse_day(day, month, year, tz):
    """
    Strictly parse path segments into a DayWindow.
    Day and month may be unpadded; the year must have four digits.
    """
    if not (_DAY_MONTH_RE.fullmatch(day) and _DAY_MONTH_RE.fullmatch(month) and _YEAR_RE.fullmatch(year)):
        raise ValidationError(INVALID_DATE_MESSAGE)

    date_str = f"{day.zfill(2)}/{month.zfill(2)}/{year}"
    try:
        parsed = datetime.strptime(date_str, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(INVALID_DATE_MESSAGE) from None

    return DayWindow(parsed, tz)
