"""Models package for plan-api."""

from models.profile import (
    ExerciseLocation,
    Gender,
    Goal,
    MedicalCondition,
    Profile,
)
from models.plan import (
    DailyTask,
    DietPlanEntry,
    GeneratedPlan,
    Intensity,
    MealSummary,
    MealType,
    SleepSchedule,
    SleepSummary,
    WorkoutCategory,
    WorkoutPlanEntry,
    WorkoutSummary,
)
from models.onboarding import GeneratePlanRequest, OnboardingResponse

__all__ = [
    "ExerciseLocation",
    "Gender",
    "Goal",
    "MedicalCondition",
    "Profile",
    "DailyTask",
    "DietPlanEntry",
    "GeneratedPlan",
    "Intensity",
    "MealSummary",
    "MealType",
    "SleepSchedule",
    "SleepSummary",
    "WorkoutCategory",
    "WorkoutPlanEntry",
    "WorkoutSummary",
    "GeneratePlanRequest",
    "OnboardingResponse",
]
