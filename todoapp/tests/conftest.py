"""Shared fixtures: in-memory database, seeded store, and API client."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from todoapp.database import get_session
from todoapp.main import app
from todoapp.models import Priority, Task


@pytest.fixture(name="session")
def session_fixture():
    """Create a fresh in-memory database for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="seeded_session")
def seeded_session_fixture(session: Session):
    """Three tasks: 111 open, 112 and 113 closed."""
    session.add_all([
        Task(
            id=111,
            description="first test todo",
            is_reminder_set=False,
            is_task_open=True,
            created_on=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc),
            priority=Priority.LOW,
        ),
        Task(
            id=112,
            description="second test todo",
            is_reminder_set=True,
            is_task_open=False,
            created_on=datetime(2024, 1, 2, 9, 0, tzinfo=timezone.utc),
            priority=Priority.MEDIUM,
        ),
        Task(
            id=113,
            description="third test todo",
            is_reminder_set=False,
            is_task_open=False,
            created_on=datetime(2024, 1, 3, 9, 0, tzinfo=timezone.utc),
            priority=Priority.HIGH,
        ),
    ])
    session.commit()
    return session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Create a test client with overridden database session."""
    def get_session_override():
        yield session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
