"""Shared fixtures: an in-memory database and a controllable clock."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.pool import StaticPool

from job_search.data.database import Database


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def db():
    """Fresh, initialized in-memory database for each test."""
    database = Database(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database.initialize()
    try:
        yield database
    finally:
        database.dispose()


@pytest.fixture
def session(db):
    session = db.get_session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FakeClock()
