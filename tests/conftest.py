"""Pytest fixtures: SQLite database for fast, isolated tests."""
from datetime import datetime, timezone, timedelta
from typing import Optional

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from planner.database import Base, get_db
from planner.main import app

# Import all models so they register with Base.metadata
from planner.models.user import User                 # noqa: F401
from planner.models.contact import Contact           # noqa: F401
from planner.models.event import Event               # noqa: F401
from planner.models.invitation import EventInvitation  # noqa: F401
from planner.models.reminder import EventReminder    # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers that go through the API and return response JSON
# ---------------------------------------------------------------------------
def register_user(client: TestClient, username: str = "alice", password: str = "s3cret",
                  tz: str = "UTC") -> dict:
    """Helper: POST /api/users then /api/login; returns user JSON plus auth headers."""
    resp = client.post("/api/users/", json={
        "first_name": username.capitalize(),
        "last_name": "Tester",
        "username": username,
        "password": password,
        "default_timezone": tz,
    })
    assert resp.status_code == 201, resp.text
    user = resp.json()

    resp = client.post("/api/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    token = resp.json()["token"]
    user["token"] = token
    user["headers"] = {"Authorization": f"Bearer {token}"}
    return user


def create_test_contact(client: TestClient, headers: dict, first_name: str = "Ann",
                        last_name: str = "Lee", **extra) -> dict:
    """Helper: POST /api/contacts and return response JSON."""
    payload = {
        "first_name": first_name,
        "last_name": last_name,
        "email": f"{first_name.lower()}@example.com",
        "phone_number": "555-0100",
        **extra,
    }
    resp = client.post("/api/contacts/", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_event(client: TestClient, headers: dict, name: str = "Birthday Party",
                      contact_ids: Optional[list] = None, hours_from_now: int = 24 * 30):
    """Helper: POST /api/events and return the raw response."""
    when = datetime.now(timezone.utc) + timedelta(hours=hours_from_now)
    return client.post("/api/events/", json={
        "name": name,
        "address": "1 Main St",
        "time": when.isoformat(),
        "contact_ids": contact_ids or [],
    }, headers=headers)
