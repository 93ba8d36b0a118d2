"""Pytest fixtures for the todo API."""

import os

# Set env vars before importing anything from app
os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from app.db.models.todos import Todo  # noqa: F401
from app.db.repositories.todos import TodoRepository
from app.db.session import get_session
from app.features.todos.services import TodoService

# In-memory SQLite for tests
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


def override_get_session():
    with Session(engine) as session:
        yield session


@pytest.fixture(autouse=True)
def setup_db():
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db_engine():
    return engine


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def repo(session):
    return TodoRepository(session)


@pytest.fixture
def service(repo):
    return TodoService(repo)


@pytest.fixture
def statements():
    """SQL statements sent to the database while the test runs."""
    seen = []

    def _record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", _record)
    yield seen
    event.remove(engine, "before_cursor_execute", _record)


@pytest.fixture
def client():
    from app.main import app

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
