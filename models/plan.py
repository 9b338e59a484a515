"""
Plan artifact models.

These are the four artifacts produced by the plan engine. They carry no
identity; the caller attaches a user id and timestamps when persisting.
"""

from datetime import date, time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.profile import ExerciseLocation


class WorkoutCategory(str, Enum):
    """Exercise categories used for scheduling and condition filtering."""

    HIIT = "hiit"  # high-intensity cardio
    CARDIO = "cardio"  # steady-state cardio
    STRENGTH = "strength"
    MOBILITY = "mobility"  # low-impact recovery, walking, stretching


class Intensity(str, Enum):
    """Session intensity, ordered low to high."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _INTENSITY_RANK[self]


_INTENSITY_RANK = {Intensity.LOW: 0, Intensity.MODERATE: 1, Intensity.HIGH: 2}


class MealType(str, Enum):
    """Meal slots in a day, in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class WorkoutPlanEntry(BaseModel):
    """One scheduled workout session."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1, description="1-based day within the plan horizon")
    scheduled_date: Optional[date] = None
    exercise_id: str
    exercise_name: str
    category: WorkoutCategory
    intensity: Intensity
    duration_minutes: Optional[int] = Field(None, ge=1)
    sets: Optional[int] = Field(None, ge=1)
    reps: Optional[str] = None
    muscle_groups: List[str] = []
    location: ExerciseLocation
    instructions: Optional[str] = None
    is_fallback: bool = False


class DietPlanEntry(BaseModel):
    """One meal slot on one day."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1)
    scheduled_date: Optional[date] = None
    meal_type: MealType
    target_calories: int = Field(ge=0)
    protein_g: int = Field(ge=0)
    carbs_g: int = Field(ge=0)
    fat_g: int = Field(ge=0)
    description: Optional[str] = None


class SleepSchedule(BaseModel):
    """A single sleep recommendation applied across the horizon."""

    model_config = ConfigDict(frozen=True)

    bedtime: time
    wake_time: time
    duration_hours: float = Field(gt=0, le=24)
    wind_down_time: time


class WorkoutSummary(BaseModel):
    """Workout fields copied into a daily task."""

    model_config = ConfigDict(frozen=True)

    exercise_name: str
    category: WorkoutCategory
    intensity: Intensity
    duration_minutes: Optional[int] = None
    sets: Optional[int] = None
    reps: Optional[str] = None
    location: ExerciseLocation


class MealSummary(BaseModel):
    """Meal fields copied into a daily task."""

    model_config = ConfigDict(frozen=True)

    meal_type: MealType
    target_calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    description: Optional[str] = None


class SleepSummary(BaseModel):
    """Sleep fields copied into a daily task."""

    model_config = ConfigDict(frozen=True)

    bedtime: time
    wake_time: time
    duration_hours: float


class DailyTask(BaseModel):
    """Everything a user should do on one day of the plan."""

    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1)
    scheduled_date: Optional[date] = None
    workouts: List[WorkoutSummary] = []
    meals: List[MealSummary] = []
    total_calories: int = 0
    sleep: SleepSummary
    checklist: List[str] = []


class GeneratedPlan(BaseModel):
    """The four artifacts produced by one generation call."""

    workouts: List[WorkoutPlanEntry]
    meals: List[DietPlanEntry]
    sleep: SleepSchedule
    daily_tasks: List[DailyTask]
