from __future__ import annotations

from datetime import datetime, timedelta, timezone

from bson import ObjectId

from utils.dates import parse_day


def test_append_defaults_to_now(ledger, directory, db):
    student = directory.register("Asha Rao", "CS101", "fp-001")
    before = datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(seconds=1)

    event = ledger.append(student.id)

    after = datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(seconds=1)
    assert event.id is not None
    assert before <= event.timestamp <= after
    assert db.attendances.count_documents({"student_id": student.id}) == 1


def test_append_stores_aware_timestamps_as_utc(ledger, directory, db, tz):
    student = directory.register("Asha Rao", "CS101", "fp-001")
    ledger.append(student.id, datetime(2025, 1, 15, 9, 0, tzinfo=tz))

    doc = db.attendances.find_one({"student_id": student.id})
    assert doc["timestamp"] == datetime(2025, 1, 15, 3, 30)


def test_query_range_respects_day_boundaries(ledger, directory, tz):
    student = directory.register("Asha Rao", "CS101", "fp-001")
    inside = [
        datetime(2025, 1, 15, 0, 0, 0, 0, tzinfo=tz),
        datetime(2025, 1, 15, 12, 30, tzinfo=tz),
        datetime(2025, 1, 15, 23, 59, 59, 999000, tzinfo=tz),
    ]
    outside = [
        datetime(2025, 1, 14, 23, 59, 59, 999000, tzinfo=tz),
        datetime(2025, 1, 16, 0, 0, 0, 0, tzinfo=tz),
    ]
    for ts in inside + outside:
        ledger.append(student.id, ts)

    start, end = parse_day("15", "01", "2025", tz).storage_bounds()
    logs = ledger.query_range(start, end)

    assert [event.local_time(tz) for event, _ in logs] == inside
    assert all(s.roll_number == "CS101" for _, s in logs)


def test_query_range_returns_none_for_missing_student(ledger, tz):
    ledger.append(ObjectId(), datetime(2025, 1, 15, 10, 0, tzinfo=tz))

    start, end = parse_day("15", "01", "2025", tz).storage_bounds()
    [(event, student)] = ledger.query_range(start, end)

    assert student is None
    assert event.local_time(tz).hour == 10


def test_query_range_is_idempotent(ledger, directory, tz):
    student = directory.register("Asha Rao", "CS101", "fp-001")
    ledger.append(student.id, datetime(2025, 1, 15, 10, 0, tzinfo=tz))
    start, end = parse_day("15", "01", "2025", tz).storage_bounds()

    first = [(e.id, s.id) for e, s in ledger.query_range(start, end)]
    second = [(e.id, s.id) for e, s in ledger.query_range(start, end)]
    assert first == second
