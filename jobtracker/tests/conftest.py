"""
Pytest fixtures for JobTracker API tests.
Uses in-memory SQLite and a stubbed MCP client.
"""
import os
import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LEGACY_REMOTE_OVERWRITE"] = "false"

from jobtracker.app.db.base import Base
from jobtracker.app.db.session import enable_sqlite_foreign_keys
from jobtracker.main import app
from jobtracker.app.core.dependencies import get_db, get_mcp_client
from jobtracker.app.repositories.job_repository import JobRepository
from jobtracker.app.schemas.search import McpSearchResponse
from jobtracker.app.services.mcp_client import McpClient

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import jobtracker.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repo(db_session):
    return JobRepository(db_session)


@pytest.fixture
def mcp_client():
    """MCP client stub; tests set search_jobs.return_value / side_effect."""
    client = MagicMock(spec=McpClient)
    client.search_jobs.return_value = McpSearchResponse(count=0, jobs=[])
    app.dependency_overrides[get_mcp_client] = lambda: client
    yield client
    app.dependency_overrides.pop(get_mcp_client, None)


@pytest.fixture
def client(db_session, mcp_client):
    """TestClient with a clean DB and stubbed MCP server."""
    return TestClient(app)


@pytest.fixture
def job_payload():
    return {
        "job_title": "Backend Engineer",
        "company_name": "Acme",
        "location": "Berlin",
        "job_url": "http://a.com/job1",
        "description": "Build APIs",
        "salary": "70k-90k",
        "job_type": "fulltime",
        "is_remote": True,
        "notes": "referral",
    }


@pytest.fixture
def created_job(client, job_payload):
    """A job saved through the API; returns the response data."""
    r = client.post("/api/jobs", json=job_payload)
    assert r.status_code == 201
    return r.json()["data"]
