import os
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.orm import Session

# Settings are read at import time
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret-with-enough-entropy-1234567890")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from waterwise.core.config import settings  # noqa: E402

TEST_USER = {
    "sub": "test-user-id",
    "email": "tester@example.com",
    "role": "authenticated",
    "aud": "authenticated",
    "user_metadata": {"full_name": "Test User"},
}


@pytest.fixture
def mock_db_session():
    """Fixture for mocking SQLAlchemy session."""
    return MagicMock(spec=Session)


@pytest.fixture
def mock_user():
    return dict(TEST_USER)


@pytest.fixture
def now():
    return datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def disable_seeding(monkeypatch):
    """Disable automatic seeding during tests to prevent slow startup."""
    monkeypatch.setattr(settings, "seeding", False)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "api: Mark tests as API tests")
    config.addinivalue_line("markers", "core: Mark tests as Core tests")
    config.addinivalue_line("markers", "services: Mark tests as Service tests")


def pytest_collection_modifyitems(items):
    """Add markers based on directory structure."""
    for item in items:
        path = str(item.fspath)

        if "test_api" in path:
            item.add_marker("api")

        if "test_core" in path:
            item.add_marker("core")

        if "test_services" in path:
            item.add_marker("services")


@pytest.fixture
def client(mock_db_session, mock_user):
    """
    Test client with dependency overrides.
    - Mocks DB session
    - Mocks Authentication (returns a member)
    - Content editor checks pass
    """
    from fastapi.testclient import TestClient

    from waterwise.api import deps
    from waterwise.core.database import get_db
    from waterwise.main import app

    def override_get_db():
        yield mock_db_session

    def override_get_current_user():
        return mock_user

    def override_get_current_user_with_token():
        return {**mock_user, "_token": "test-token"}

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[deps.get_current_user] = override_get_current_user
    app.dependency_overrides[deps.get_optional_current_user] = override_get_current_user
    app.dependency_overrides[deps.get_current_user_with_token] = (
        override_get_current_user_with_token
    )
    app.dependency_overrides[deps.require_content_editor] = override_get_current_user

    with patch("waterwise.main.init_db"), TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(mock_db_session):
    """Test client without any authenticated user."""
    from fastapi.testclient import TestClient

    from waterwise.core.database import get_db
    from waterwise.main import app

    def override_get_db():
        yield mock_db_session

    app.dependency_overrides[get_db] = override_get_db

    with patch("waterwise.main.init_db"), TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def db_session():
    """Real session on a private in-memory SQLite database."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool

    from waterwise import models  # noqa: F401
    from waterwise.core.database import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
