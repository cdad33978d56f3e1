"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from database import Base, create_session_factory, get_db
from main import app
from models import Question
from seed_questions import seed_database


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session in a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db):
    """Database holding the default questionnaire."""
    seed_database(db)
    return db


@pytest.fixture
def question_ids(seeded_db):
    """Active question ids of the default questionnaire."""
    return [q.id for q in seeded_db.query(Question).order_by(Question.id).all()]


@pytest.fixture
def client(engine):
    """Test client whose requests use the in-memory database."""
    session_factory = create_session_factory(engine)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
