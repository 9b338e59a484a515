"""
Services package for plan-api.

Contains the plan generation engine:
- Profile and selection normalization
- Exercise catalog and condition-based eligibility
- Workout, diet and sleep generators
- Daily task aggregation
- PlanEngine facade composing all of the above
"""

from services.daily_task_aggregator import DailyTaskAggregator, generate_daily_tasks
from services.diet_planner import DietPlanner, generate_diet_plan, split_calories
from services.exercise_catalog import (
    CONDITION_RULES,
    DEFAULT_EXERCISES,
    CatalogExercise,
    ConditionRule,
    ExerciseCatalog,
    Restrictions,
)
from services.plan_engine import PlanEngine
from services.selection import (
    normalize_conditions,
    normalize_goals,
    normalize_locations,
    normalize_profile,
    selection_values,
)
from services.sleep_planner import SleepPlanner, generate_sleep_schedule
from services.workout_planner import WorkoutPlanner, generate_workout_plan

__all__ = [
    # Normalization
    "normalize_conditions",
    "normalize_goals",
    "normalize_locations",
    "normalize_profile",
    "selection_values",
    # Catalog
    "CONDITION_RULES",
    "DEFAULT_EXERCISES",
    "CatalogExercise",
    "ConditionRule",
    "ExerciseCatalog",
    "Restrictions",
    # Generators
    "WorkoutPlanner",
    "generate_workout_plan",
    "DietPlanner",
    "generate_diet_plan",
    "split_calories",
    "SleepPlanner",
    "generate_sleep_schedule",
    "DailyTaskAggregator",
    "generate_daily_tasks",
    # Facade
    "PlanEngine",
]
