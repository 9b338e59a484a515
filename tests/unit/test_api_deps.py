"""
Unit tests for api/deps.py dependency providers.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from api.deps import (
    get_current_user,
    get_plan_engine,
    get_plan_repo,
    get_supabase_client_required,
)
from backend.settings import Settings
from infrastructure.db import SupabasePlanRepository
from services.plan_engine import PlanEngine


@pytest.mark.unit
class TestSupabaseProviders:
    """Tests for database providers."""

    def test_required_client_raises_503_when_unconfigured(self):
        with patch("api.deps.get_supabase_client", return_value=None):
            with pytest.raises(HTTPException) as exc_info:
                get_supabase_client_required()

        assert exc_info.value.status_code == 503

    def test_plan_repo_wraps_client(self):
        client = MagicMock()

        repo = get_plan_repo(client=client)

        assert isinstance(repo, SupabasePlanRepository)


@pytest.mark.unit
class TestEngineProvider:
    """Tests for get_plan_engine."""

    def test_engine_uses_settings(self, profile):
        settings = Settings(plan_horizon_days=5, default_wake_time="06:00", _env_file=None)

        engine = get_plan_engine(settings=settings)
        plan = engine.generate(profile, ["both"], [], ["gym"])

        assert isinstance(engine, PlanEngine)
        assert len(plan.workouts) == 5
        assert plan.sleep.wake_time.hour == 6


@pytest.mark.unit
class TestGetCurrentUser:
    """Tests for the bearer auth stub."""

    @pytest.fixture
    def settings(self) -> Settings:
        return Settings(environment="test", _env_file=None)

    @pytest.mark.asyncio
    async def test_returns_token_as_user_id(self, settings):
        assert await get_current_user(authorization="Bearer user-42", settings=settings) == "user-42"

    @pytest.mark.asyncio
    async def test_missing_header_is_401(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(authorization=None, settings=settings)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_wrong_scheme_is_401(self, settings):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(authorization="Basic abc", settings=settings)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_blocked_in_production(self):
        settings = Settings(environment="production", _env_file=None)

        with pytest.raises(RuntimeError):
            await get_current_user(authorization="Bearer user-42", settings=settings)
