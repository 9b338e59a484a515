"""
Supabase implementation of PlanRepository.

This implementation uses the Supabase Python client to write to the
onboarding tables: user_profiles, user_goals, user_medical_conditions,
user_exercise_locations, workout_plans, diet_plans, sleep_schedules,
daily_tasks and weight_logs.
"""

from typing import Dict, List

from supabase import Client

from application.exceptions import PlanPersistenceError


class SupabasePlanRepository:
    """
    Supabase-backed plan repository implementation.

    Every write is wrapped so a failure surfaces as PlanPersistenceError
    naming the table that failed.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def update_profile(self, user_id: str, profile: Dict) -> Dict:
        """
        Update the user's profile row.

        Args:
            user_id: The user's ID
            profile: Profile fields

        Returns:
            Updated profile dictionary
        """
        try:
            response = (
                self._client.table("user_profiles")
                .update(profile)
                .eq("id", user_id)
                .execute()
            )
        except Exception as e:
            raise PlanPersistenceError("user_profiles", str(e)) from e

        if not response.data:
            raise PlanPersistenceError("user_profiles", f"No profile found for user {user_id}")
        return response.data[0]

    def add_goals(self, user_id: str, goals: List[str]) -> List[Dict]:
        rows = [{"goal_type": goal, "is_active": True} for goal in goals]
        return self._insert_many("user_goals", user_id, rows)

    def add_conditions(self, user_id: str, conditions: List[str]) -> List[Dict]:
        rows = [{"condition": condition} for condition in conditions]
        return self._insert_many("user_medical_conditions", user_id, rows)

    def add_locations(self, user_id: str, locations: List[str]) -> List[Dict]:
        rows = [{"location": location} for location in locations]
        return self._insert_many("user_exercise_locations", user_id, rows)

    def save_workout_plans(self, user_id: str, entries: List[Dict]) -> List[Dict]:
        return self._insert_many("workout_plans", user_id, entries)

    def save_diet_plans(self, user_id: str, entries: List[Dict]) -> List[Dict]:
        return self._insert_many("diet_plans", user_id, entries)

    def save_sleep_schedule(self, user_id: str, schedule: Dict) -> Dict:
        return self._insert_one("sleep_schedules", user_id, schedule)

    def save_daily_tasks(self, user_id: str, tasks: List[Dict]) -> List[Dict]:
        return self._insert_many("daily_tasks", user_id, tasks)

    def log_weight(self, user_id: str, weight: float, log_date: str) -> Dict:
        row = {"weight": weight, "log_date": log_date}
        return self._insert_one("weight_logs", user_id, row)

    def _insert_one(self, table: str, user_id: str, row: Dict) -> Dict:
        """Insert a single row and return it; an empty result is an error."""
        created = self._insert_many(table, user_id, [row])
        if not created:
            raise PlanPersistenceError(table, "Insert returned no rows")
        return created[0]

    def _insert_many(self, table: str, user_id: str, rows: List[Dict]) -> List[Dict]:
        """
        Insert rows tagged with the user id in a single request.

        Args:
            table: Target table name
            user_id: The user's ID
            rows: Row dictionaries (not modified)

        Returns:
            Created rows

        Raises:
            PlanPersistenceError: If the insert fails
        """
        if not rows:
            return []

        payload = [{"user_id": user_id, **row} for row in rows]
        try:
            response = self._client.table(table).insert(payload).execute()
        except Exception as e:
            raise PlanPersistenceError(table, str(e)) from e

        if response.data is None:
            raise PlanPersistenceError(table, "Insert returned no data")
        return response.data
