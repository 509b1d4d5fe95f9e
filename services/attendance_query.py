"""
Day-based attendance listing.
"""

from utils.dates import parse_day, today_string


def resolve_day(day, month, year, tz, now=None):
    """
    Returns (DayWindow, None) when all three parts are given, or
    (None, "DD/MM/YYYY" of today) when the caller should redirect there.

    Raises ValidationError for anything that is not a real calendar date.
    """
    if day is None or month is None or year is None:
        return None, today_string(tz, now)
    return parse_day(day, month, year, tz), None


def _roll_number_or_blank(entry):
    _, student = entry
    if student is None:
        return ""
    return student.roll_number or ""


def list_attendance_for_day(ledger, window):
    """
    Events of one day joined with their students, ordered by roll number
    as plain strings ("A10" < "A2" < "A9"). Unknown students come first.
    """
    start, end = window.storage_bounds()
    logs = ledger.query_range(start, end)
    return sorted(logs, key=_roll_number_or_blank)
