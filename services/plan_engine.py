"""
Plan engine facade.

Composes the four generators into one call:
1. Validation - profile and every selection, before anything is built
2. Workout plan
3. Diet plan
4. Sleep schedule
5. Daily tasks derived from the three outputs above

Each step receives plain data from the previous ones; the engine keeps
no state between calls and never mutates its inputs.
"""

import logging
from datetime import date, time
from typing import Any, Iterable, Optional, Union

from core.constants import DEFAULT_HORIZON_DAYS, DEFAULT_WAKE_TIME
from models.plan import GeneratedPlan
from services.daily_task_aggregator import DailyTaskAggregator
from services.diet_planner import DietPlanner
from services.exercise_catalog import ExerciseCatalog
from services.selection import (
    normalize_conditions,
    normalize_goals,
    normalize_locations,
    normalize_profile,
    selection_values,
)
from services.sleep_planner import SleepPlanner
from services.workout_planner import WorkoutPlanner

logger = logging.getLogger(__name__)


class PlanEngine:
    """
    Generates a complete lifestyle plan.

    Either returns all four artifacts or raises a PlanGenerationError;
    a partially populated plan is never returned.
    """

    def __init__(
        self,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
        wake_time: Union[str, time] = DEFAULT_WAKE_TIME,
        catalog: Optional[ExerciseCatalog] = None,
    ):
        """
        Initialize the engine and its generators.

        Args:
            horizon_days: Number of days each plan covers
            wake_time: Anchor wake time for the sleep schedule
            catalog: Exercise catalog and condition rules (defaults to built-in)
        """
        self._workout_planner = WorkoutPlanner(catalog=catalog, horizon_days=horizon_days)
        self._diet_planner = DietPlanner(horizon_days=horizon_days)
        self._sleep_planner = SleepPlanner(wake_time=wake_time)
        self._task_aggregator = DailyTaskAggregator()

    def generate(
        self,
        profile: Any,
        goals: Iterable[Any],
        conditions: Optional[Iterable[Any]],
        locations: Iterable[Any],
        start_date: Optional[date] = None,
    ) -> GeneratedPlan:
        """
        Generate all four plan artifacts.

        Args:
            profile: Profile or mapping of profile fields
            goals: Selected goals (non-empty)
            conditions: Medical conditions (may be empty or just 'none')
            locations: Exercise locations (non-empty)
            start_date: Optional first day of the plan

        Returns:
            GeneratedPlan with workouts, meals, sleep and daily tasks

        Raises:
            InvalidProfileError: If the profile is invalid
            EmptySelectionError: If goals or locations are empty
            InvalidSelectionError: If a selection value is not recognized
        """
        profile = normalize_profile(profile)
        goals = selection_values(goals)
        conditions = selection_values(conditions)
        locations = selection_values(locations)

        # Validate every input up front so no generator runs on bad data
        normalize_goals(goals)
        normalize_conditions(conditions)
        normalize_locations(locations)

        workouts = self._workout_planner.generate(
            profile, goals, conditions, locations, start_date=start_date
        )
        meals = self._diet_planner.generate(profile, goals, start_date=start_date)
        sleep = self._sleep_planner.generate(goals)
        daily_tasks = self._task_aggregator.generate(workouts, meals, sleep)

        logger.info(
            f"Generated plan: workouts={len(workouts)}, meals={len(meals)}, "
            f"daily_tasks={len(daily_tasks)}"
        )

        return GeneratedPlan(
            workouts=workouts,
            meals=meals,
            sleep=sleep,
            daily_tasks=daily_tasks,
        )
