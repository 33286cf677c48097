"""Pytest configuration and fixtures for testing."""
import os

# Set test environment before importing app modules
os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['LOG_LEVEL'] = 'WARNING'

from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from config.database import get_db
from main import create_fastapi_app
from models.base_model import base as Base
from models.category import CategoryModel


# In-memory database shared by every session of a test
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine():
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},  # SQLite specific
        poolclass=StaticPool,
        echo=False
    )
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session_factory(engine) -> Generator[Callable[[], Session], None, None]:
    """Fresh tables per test; every session handed out is closed before the tables are dropped."""
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    sessions = []

    def _factory() -> Session:
        session = SessionLocal()
        sessions.append(session)
        return session

    try:
        yield _factory
    finally:
        for session in sessions:
            session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def api_client(db_session_factory) -> Generator[TestClient, None, None]:
    """Create a test client for API testing."""
    app = create_fastapi_app()

    def override_get_db():
        session = db_session_factory()
        try:
            yield session
            session.commit()  # Commit changes made by the request
        except Exception:
            session.rollback()  # Rollback on exception
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client


# Model fixtures
@pytest.fixture
def sample_category_data():
    """Sample category data."""
    return {
        "name": "Electronics"
    }


# Database seeding fixtures
@pytest.fixture(scope="function")
def seeded_db(db_session_factory) -> dict:
    session = db_session_factory()
    try:
        electronics = CategoryModel(name="Electronics")
        books = CategoryModel(name="Books")
        session.add_all([electronics, books])
        session.commit()
        session.refresh(electronics)
        session.refresh(books)

        return {
            "category": electronics,
            "other_category": books,
        }
    finally:
        session.close()
