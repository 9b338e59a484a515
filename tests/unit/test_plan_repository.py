"""
Unit tests for SupabasePlanRepository.

The Supabase client is mocked; these tests check the table names,
payload shapes and error wrapping.
"""

from unittest.mock import MagicMock

import pytest

from application.exceptions import PlanPersistenceError
from application.ports import PlanRepository
from infrastructure.db import SupabasePlanRepository
from tests.fakes import FakePlanRepository

pytestmark = pytest.mark.unit


def _client_returning(data) -> MagicMock:
    client = MagicMock()
    table = client.table.return_value
    table.insert.return_value.execute.return_value = MagicMock(data=data)
    table.update.return_value.eq.return_value.execute.return_value = MagicMock(data=data)
    return client


class TestProtocolCompliance:
    """Both implementations satisfy the PlanRepository protocol."""

    @pytest.mark.parametrize("repo_cls", [SupabasePlanRepository, FakePlanRepository])
    def test_has_protocol_methods(self, repo_cls):
        for name in dir(PlanRepository):
            if name.startswith("_"):
                continue
            assert callable(getattr(repo_cls, name, None)), f"{repo_cls.__name__}.{name}"


class TestInserts:
    """Tests for insert-based writes."""

    def test_goals_payload(self):
        client = _client_returning([{"id": "g1"}])
        repo = SupabasePlanRepository(client)

        result = repo.add_goals("user-1", ["both"])

        client.table.assert_called_with("user_goals")
        client.table.return_value.insert.assert_called_once_with(
            [{"user_id": "user-1", "goal_type": "both", "is_active": True}]
        )
        assert result == [{"id": "g1"}]

    def test_rows_are_tagged_with_user_id(self):
        client = _client_returning([{"id": "w1"}, {"id": "w2"}])
        repo = SupabasePlanRepository(client)
        entries = [{"day": 1}, {"day": 2}]

        repo.save_workout_plans("user-1", entries)

        payload = client.table.return_value.insert.call_args[0][0]
        assert payload == [{"user_id": "user-1", "day": 1}, {"user_id": "user-1", "day": 2}]
        assert entries == [{"day": 1}, {"day": 2}]

    def test_sleep_schedule_returns_single_row(self):
        client = _client_returning([{"id": "s1"}])
        repo = SupabasePlanRepository(client)

        assert repo.save_sleep_schedule("user-1", {"bedtime": "22:30:00"}) == {"id": "s1"}
        client.table.assert_called_with("sleep_schedules")

    def test_weight_log(self):
        client = _client_returning([{"id": "l1"}])
        repo = SupabasePlanRepository(client)

        repo.log_weight("user-1", 80.0, "2026-01-05")

        client.table.assert_called_with("weight_logs")
        client.table.return_value.insert.assert_called_once_with(
            [{"user_id": "user-1", "weight": 80.0, "log_date": "2026-01-05"}]
        )

    def test_empty_rows_skip_the_request(self):
        client = _client_returning([])
        repo = SupabasePlanRepository(client)

        assert repo.add_conditions("user-1", []) == []
        client.table.assert_not_called()

    def test_client_error_is_wrapped(self):
        client = MagicMock()
        client.table.return_value.insert.return_value.execute.side_effect = Exception("timeout")
        repo = SupabasePlanRepository(client)

        with pytest.raises(PlanPersistenceError) as exc_info:
            repo.save_diet_plans("user-1", [{"day": 1}])

        assert exc_info.value.step == "diet_plans"
        assert "timeout" in exc_info.value.message

    def test_missing_data_is_an_error(self):
        client = _client_returning(None)
        repo = SupabasePlanRepository(client)

        with pytest.raises(PlanPersistenceError):
            repo.save_daily_tasks("user-1", [{"day": 1}])


    @pytest.mark.parametrize("write", ["sleep", "weight"])
    def test_single_row_insert_with_no_rows_is_an_error(self, write):
        client = _client_returning([])
        repo = SupabasePlanRepository(client)

        with pytest.raises(PlanPersistenceError) as exc_info:
            if write == "sleep":
                repo.save_sleep_schedule("user-1", {"bedtime": "22:30:00"})
            else:
                repo.log_weight("user-1", 80.0, "2026-01-05")

        assert exc_info.value.message == "Insert returned no rows"


class TestUpdateProfile:
    """Tests for update_profile."""

    def test_updates_by_user_id(self):
        client = _client_returning([{"id": "user-1", "age": 30}])
        repo = SupabasePlanRepository(client)

        result = repo.update_profile("user-1", {"age": 30})

        client.table.assert_called_with("user_profiles")
        client.table.return_value.update.return_value.eq.assert_called_once_with("id", "user-1")
        assert result == {"id": "user-1", "age": 30}

    def test_missing_profile_is_an_error(self):
        client = _client_returning([])
        repo = SupabasePlanRepository(client)

        with pytest.raises(PlanPersistenceError) as exc_info:
            repo.update_profile("user-1", {"age": 30})

        assert exc_info.value.step == "user_profiles"
