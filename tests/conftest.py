"""Pytest configuration and fixtures."""

import os
import uuid
from collections.abc import Callable, Generator
from typing import Any

# Must be set before the application reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from users_api import models  # noqa: E402
from users_api.database import Base, get_db  # noqa: E402
from users_api.infrastructure.identity.repositories.user_repository import (  # noqa: E402
    UserRepository,
)
from users_api.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine; one shared connection so the TestClient thread sees the same database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def user_repository(db_session: Session) -> UserRepository:
    """Repository bound to the test session."""
    return UserRepository(db_session)


@pytest.fixture
def create_user_row(db_session: Session) -> Callable[..., models.User]:
    """Insert a user row directly, bypassing the API."""

    def _create(
        login: str = "player1",
        first_name: str = "",
        last_name: str = "",
        games_played: int = 0,
        **kwargs: Any,
    ) -> models.User:
        user = models.User(
            id=kwargs.pop("id", uuid.uuid4()),
            login=login,
            first_name=first_name,
            last_name=last_name,
            games_played=games_played,
            **kwargs,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _create
