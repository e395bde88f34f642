"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scriptorium.repositories.users import UserRepository
from scriptorium.schemas.user import User
from scriptorium.utils.config import Settings
from scriptorium.utils.database import (
    IN_MEMORY_SQLITE_URL,
    drop_db,
    get_engine,
    get_session_local,
    init_db,
)

@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the developer's environment."""
    return Settings(
        DATABASE_URL=IN_MEMORY_SQLITE_URL,
        ENVIRONMENT="testing",
        TESTING=False,
        DEBUG=False,
        LOG_LEVEL="INFO",
    )

@pytest.fixture(params=["memory", "file"])
def engine(request, tmp_path, test_settings):
    """
    Database engine with the users table created.

    Runs each test against in-memory SQLite and against a file database
    that is created fresh in the test's temporary directory.
    """
    if request.param == "memory":
        database_url = IN_MEMORY_SQLITE_URL
    else:
        database_url = f"sqlite:///{tmp_path / 'test.db'}"

    engine = get_engine(database_url, settings=test_settings)
    init_db(engine)

    yield engine

    drop_db(engine)
    engine.dispose()

@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return get_session_local(engine)

@pytest.fixture
def user_repository(session_factory) -> UserRepository:
    """Repository over a fresh, empty users table."""
    return UserRepository(session_factory)

@pytest.fixture
def make_user():
    """Factory for unsaved users with sensible defaults."""
    def _make_user(first_name="Jane", last_name="Doe", email="jane.doe@example.com",
                   password_hash="password123", **address) -> User:
        return User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
            **address
        )
    return _make_user
