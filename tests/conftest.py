"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from tierboard.auth import StaticCredentialChecker
from tierboard.config import Settings
from tierboard.context import create_context
from tierboard.db.models import Base
from tierboard.db.session import build_engine, build_session_factory
from tierboard.server.app import create_app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "hunter2"


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = build_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create a session factory bound to the test engine."""
    return build_session_factory(test_engine)


@pytest.fixture
def test_session(test_session_factory):
    """Provide a test database session that auto-commits."""
    session = test_session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory database."""
    return Settings(
        database_url="sqlite:///:memory:",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        _env_file=None,
    )


@pytest.fixture
def app_context(test_settings):
    """Application context bound to a fresh in-memory database."""
    return create_context(test_settings)


@pytest.fixture
def api_client(app_context):
    """TestClient with the app's lifespan running (tables created)."""
    with TestClient(create_app(app_context)) as client:
        yield client


@pytest.fixture
def checker():
    """Credential checker for the test operator."""
    return StaticCredentialChecker(ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("HOST", "localhost")
    monkeypatch.setenv("PORT", "3001")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DB_NAME", raising=False)
    monkeypatch.delenv("CREDENTIALS_FILE", raising=False)


@pytest.fixture
def ann_payload():
    """Provide a valid create payload."""
    return {"playerName": "Ann", "tier": "lt1", "macetier": "", "region": "EU"}
