"""
Integration tests for the onboarding endpoint.

Uses the real PlanEngine with an in-memory plan repository.
"""

import pytest

from api.deps import get_current_user, get_settings
from backend.settings import Settings

TEST_USER_ID = "test-user-123"


@pytest.mark.integration
class TestCompleteOnboarding:
    """Test POST /onboarding."""

    def test_onboarding_persists_plan(self, client, plan_request, fake_plan_repo):
        response = client.post("/onboarding", json=plan_request)

        assert response.status_code == 201
        data = response.json()
        assert data["user_id"] == TEST_USER_ID
        assert data["records_written"]["workout_plans"] == 7
        assert data["records_written"]["diet_plans"] == 28
        assert data["records_written"]["weight_logs"] == 1
        assert len(fake_plan_repo.rows("daily_tasks")) == 7
        assert fake_plan_repo.profile(TEST_USER_ID)["age"] == 30

    def test_response_plan_matches_preview(self, client, plan_request):
        plan_request["start_date"] = "2026-04-06"

        preview = client.post("/plans/preview", json=plan_request).json()
        onboarding = client.post("/onboarding", json=plan_request).json()

        assert onboarding["plan"] == preview

    def test_generation_error_is_422_and_writes_nothing(self, client, plan_request, fake_plan_repo):
        plan_request["locations"] = []

        response = client.post("/onboarding", json=plan_request)

        assert response.status_code == 422
        assert fake_plan_repo.total_rows() == 0

    def test_persistence_failure_is_502(self, client, plan_request, fake_plan_repo):
        fake_plan_repo.fail_on("sleep_schedules")

        response = client.post("/onboarding", json=plan_request)

        assert response.status_code == 502
        assert "sleep_schedules" in response.json()["detail"]

    def test_requires_authorization(self, app, client, plan_request):
        app.dependency_overrides.pop(get_current_user)

        response = client.post("/onboarding", json=plan_request)

        assert response.status_code == 401

    def test_bearer_token_is_user_id(self, app, client, plan_request, fake_plan_repo):
        app.dependency_overrides.pop(get_current_user)

        response = client.post(
            "/onboarding",
            json=plan_request,
            headers={"Authorization": "Bearer user-abc"},
        )

        assert response.status_code == 201
        assert response.json()["user_id"] == "user-abc"
        assert fake_plan_repo.rows("workout_plans")[0]["user_id"] == "user-abc"

    def test_auth_stub_refuses_production(self, app, client, plan_request):
        production = Settings(environment="production", _env_file=None)
        app.dependency_overrides[get_settings] = lambda: production
        app.dependency_overrides.pop(get_current_user)

        with pytest.raises(RuntimeError):
            client.post(
                "/onboarding",
                json=plan_request,
                headers={"Authorization": "Bearer user-abc"},
            )
