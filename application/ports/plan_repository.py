"""
Plan repository port (interface).

This Protocol defines the contract for persisting onboarding selections and
generated plan artifacts. Infrastructure implementations (e.g., Supabase)
must satisfy this interface.
"""

from typing import Dict, List, Protocol


class PlanRepository(Protocol):
    """
    Repository interface for onboarding and plan persistence.

    All methods work with dictionaries. Records are written as given; the
    repository only attaches the user id.
    """

    def update_profile(self, user_id: str, profile: Dict) -> Dict:
        """
        Update the user's profile with anthropometric data.

        Args:
            user_id: The user's ID
            profile: Profile fields (age, height, weights, gender)

        Returns:
            Updated profile dictionary
        """
        ...

    def add_goals(self, user_id: str, goals: List[str]) -> List[Dict]:
        """
        Record the user's selected goals as active.

        Args:
            user_id: The user's ID
            goals: Goal values as selected (e.g. "both")

        Returns:
            Created goal rows
        """
        ...

    def add_conditions(self, user_id: str, conditions: List[str]) -> List[Dict]:
        """
        Record the user's medical conditions.

        Args:
            user_id: The user's ID
            conditions: Condition values as selected

        Returns:
            Created condition rows
        """
        ...

    def add_locations(self, user_id: str, locations: List[str]) -> List[Dict]:
        """
        Record the user's exercise locations.

        Args:
            user_id: The user's ID
            locations: Location values as selected

        Returns:
            Created location rows
        """
        ...

    def save_workout_plans(self, user_id: str, entries: List[Dict]) -> List[Dict]:
        """
        Save workout plan entries.

        Args:
            user_id: The user's ID
            entries: Serialized WorkoutPlanEntry records

        Returns:
            Created rows
        """
        ...

    def save_diet_plans(self, user_id: str, entries: List[Dict]) -> List[Dict]:
        """
        Save diet plan entries.

        Args:
            user_id: The user's ID
            entries: Serialized DietPlanEntry records

        Returns:
            Created rows
        """
        ...

    def save_sleep_schedule(self, user_id: str, schedule: Dict) -> Dict:
        """
        Save the sleep schedule.

        Args:
            user_id: The user's ID
            schedule: Serialized SleepSchedule record

        Returns:
            Created row
        """
        ...

    def save_daily_tasks(self, user_id: str, tasks: List[Dict]) -> List[Dict]:
        """
        Save daily tasks.

        Args:
            user_id: The user's ID
            tasks: Serialized DailyTask records

        Returns:
            Created rows
        """
        ...

    def log_weight(self, user_id: str, weight: float, log_date: str) -> Dict:
        """
        Record a weight observation.

        Args:
            user_id: The user's ID
            weight: Weight in kg
            log_date: ISO date of the observation

        Returns:
            Created row
        """
        ...
