from __future__ import annotations

import uuid
from zoneinfo import ZoneInfo

import mongomock
import pytest

from app import create_app
from config import TestingConfig
from models.attendance import AttendanceLedger
from models.student import StudentDirectory


@pytest.fixture
def tz():
    return ZoneInfo(TestingConfig.REFERENCE_TIMEZONE)


@pytest.fixture
def db():
    return mongomock.MongoClient().get_database(f"attendance_{uuid.uuid4().hex[:8]}")


@pytest.fixture
def app(db):
    return create_app(TestingConfig, db=db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def directory(db):
    return StudentDirectory(db)


@pytest.fixture
def ledger(db, tz):
    return AttendanceLedger(db, tz)
