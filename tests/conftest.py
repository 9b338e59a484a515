"""
Pytest fixtures for plan-api tests.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from backend.main import create_app
from backend.settings import Settings
from api.deps import get_current_user, get_plan_repo, get_settings
from models.profile import Profile
from tests.fakes import FakePlanRepository


# ---------------------------------------------------------------------------
# Auth Mock
# ---------------------------------------------------------------------------

TEST_USER_ID = "test-user-123"


async def mock_get_current_user() -> str:
    """Mock auth dependency that returns a test user."""
    return TEST_USER_ID


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "test-supabase-key")
    monkeypatch.setenv("ENVIRONMENT", "test")


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(
        environment="test",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-key",
        _env_file=None,
    )


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_plan_repo() -> FakePlanRepository:
    """Fresh in-memory plan repository."""
    return FakePlanRepository()


@pytest.fixture
def client(app, test_settings, fake_plan_repo) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient with settings, auth and persistence faked.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_current_user] = mock_get_current_user
    app.dependency_overrides[get_plan_repo] = lambda: fake_plan_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def profile_data() -> Dict[str, Any]:
    """Profile fields as submitted by the intake form."""
    return {
        "age": 30,
        "height": 175,
        "current_weight": 80,
        "target_weight": 70,
        "gender": "male",
    }


@pytest.fixture
def profile(profile_data) -> Profile:
    """Validated profile."""
    return Profile(**profile_data)


@pytest.fixture
def plan_request(profile_data) -> Dict[str, Any]:
    """Valid payload for generating a plan."""
    return {
        "profile": profile_data,
        "goals": ["both"],
        "conditions": ["none"],
        "locations": ["gym"],
    }
