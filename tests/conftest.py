"""Shared test configuration: in-memory SQLite + FastAPI test client.

Every test gets a fresh database; the get_db dependency is overridden so
routes use it. DATABASE_URL is set before the app is imported so the
module-level engine never needs a PostgreSQL driver.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models.student import Student


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine, expire_on_commit=False,
    )


@pytest.fixture
def test_db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client with the DB dependency overridden."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Unhandled errors come back as 500 responses instead of raising in the test
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_students(test_db):
    """Insert a small, deliberately unordered set of students."""
    students = [
        Student(id=3, name="Carol", age=30, email="carol@example.com"),
        Student(id=1, name="alice", age=22, email="zed@example.com"),
        Student(id=5, name="Bob", age=45, email="bob@example.com"),
        Student(id=2, name="Dave", age=30, email="dave@example.com"),
        Student(id=4, name="Bob", age=19, email="bob2@example.com"),
    ]
    test_db.add_all(students)
    test_db.commit()
    return students
