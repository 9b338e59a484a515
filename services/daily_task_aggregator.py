"""
Daily task aggregator.

Bundles the workout entries, meal entries and the sleep recommendation
for each day into one task. Everything on a task is copied from the
source entries; nothing is recomputed from the profile.
"""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional, Sequence

from models.plan import (
    DailyTask,
    DietPlanEntry,
    MealSummary,
    MealType,
    SleepSchedule,
    SleepSummary,
    WorkoutPlanEntry,
    WorkoutSummary,
)

logger = logging.getLogger(__name__)

MEAL_ORDER: Dict[MealType, int] = {meal: i for i, meal in enumerate(MealType)}


class DailyTaskAggregator:
    """Derives one daily task per plan day from the other three artifacts."""

    def generate(
        self,
        workouts: Sequence[WorkoutPlanEntry],
        meals: Sequence[DietPlanEntry],
        sleep: SleepSchedule,
    ) -> List[DailyTask]:
        """
        Build the daily task list.

        Args:
            workouts: Workout entries (any order)
            meals: Diet entries (any order)
            sleep: The single sleep recommendation

        Returns:
            One task per day present in workouts or meals, ascending by day
        """
        workouts_by_day: Dict[int, List[WorkoutPlanEntry]] = defaultdict(list)
        meals_by_day: Dict[int, List[DietPlanEntry]] = defaultdict(list)

        for workout in workouts:
            workouts_by_day[workout.day].append(workout)
        for meal in meals:
            meals_by_day[meal.day].append(meal)

        sleep_summary = SleepSummary(
            bedtime=sleep.bedtime,
            wake_time=sleep.wake_time,
            duration_hours=sleep.duration_hours,
        )

        tasks = []
        for day in sorted(set(workouts_by_day) | set(meals_by_day)):
            day_workouts = workouts_by_day.get(day, [])
            day_meals = sorted(meals_by_day.get(day, []), key=lambda m: MEAL_ORDER[m.meal_type])

            workout_summaries = [_summarize_workout(w) for w in day_workouts]
            meal_summaries = [_summarize_meal(m) for m in day_meals]

            tasks.append(
                DailyTask(
                    day=day,
                    scheduled_date=_scheduled_date(day_workouts, day_meals),
                    workouts=workout_summaries,
                    meals=meal_summaries,
                    total_calories=sum(m.target_calories for m in day_meals),
                    sleep=sleep_summary,
                    checklist=_checklist(workout_summaries, meal_summaries, sleep_summary),
                )
            )

        logger.info(f"Generated {len(tasks)} daily task(s)")
        return tasks


def _summarize_workout(entry: WorkoutPlanEntry) -> WorkoutSummary:
    return WorkoutSummary(
        exercise_name=entry.exercise_name,
        category=entry.category,
        intensity=entry.intensity,
        duration_minutes=entry.duration_minutes,
        sets=entry.sets,
        reps=entry.reps,
        location=entry.location,
    )


def _summarize_meal(entry: DietPlanEntry) -> MealSummary:
    return MealSummary(
        meal_type=entry.meal_type,
        target_calories=entry.target_calories,
        protein_g=entry.protein_g,
        carbs_g=entry.carbs_g,
        fat_g=entry.fat_g,
        description=entry.description,
    )


def _scheduled_date(
    workouts: Sequence[WorkoutPlanEntry], meals: Sequence[DietPlanEntry]
) -> Optional[date]:
    for entry in [*workouts, *meals]:
        if entry.scheduled_date is not None:
            return entry.scheduled_date
    return None


def _checklist(
    workouts: Sequence[WorkoutSummary],
    meals: Sequence[MealSummary],
    sleep: SleepSummary,
) -> List[str]:
    items = []
    for workout in workouts:
        if workout.sets is not None:
            volume = f"{workout.sets} x {workout.reps}"
        else:
            volume = f"{workout.duration_minutes} min"
        items.append(f"Workout: {workout.exercise_name} ({volume}) at {workout.location.value}")

    for meal in meals:
        items.append(
            f"{meal.meal_type.value.capitalize()}: {meal.target_calories} kcal "
            f"(P {meal.protein_g}g / C {meal.carbs_g}g / F {meal.fat_g}g)"
        )

    items.append(
        f"Sleep: in bed by {sleep.bedtime:%H:%M}, up at {sleep.wake_time:%H:%M}"
    )
    return items


def generate_daily_tasks(
    workouts: Sequence[WorkoutPlanEntry],
    meals: Sequence[DietPlanEntry],
    sleep: SleepSchedule,
) -> List[DailyTask]:
    """Derive daily tasks from already generated artifacts."""
    return DailyTaskAggregator().generate(workouts, meals, sleep)
