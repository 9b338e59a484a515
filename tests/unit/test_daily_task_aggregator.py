"""
Unit tests for the daily task aggregator.
"""

from datetime import date, time

import pytest

from models.plan import DietPlanEntry, MealType
from services.daily_task_aggregator import DailyTaskAggregator, generate_daily_tasks
from services.diet_planner import generate_diet_plan
from services.sleep_planner import generate_sleep_schedule
from services.workout_planner import generate_workout_plan


@pytest.fixture
def artifacts(profile):
    """Workouts, meals and sleep for the boundary profile."""
    start = date(2026, 5, 4)
    workouts = generate_workout_plan(profile, ["both"], [], ["gym"], start_date=start)
    meals = generate_diet_plan(profile, ["both"], start_date=start)
    sleep = generate_sleep_schedule(["both"])
    return workouts, meals, sleep


@pytest.mark.unit
class TestDailyTaskAggregator:
    """Tests for DailyTaskAggregator.generate."""

    def test_one_task_per_day(self, artifacts):
        tasks = generate_daily_tasks(*artifacts)

        assert [t.day for t in tasks] == list(range(1, 8))

    def test_every_task_has_workout_meals_and_sleep(self, artifacts):
        for task in generate_daily_tasks(*artifacts):
            assert len(task.workouts) == 1
            assert [m.meal_type for m in task.meals] == list(MealType)
            assert task.sleep.bedtime == time(22, 30)

    def test_values_are_copied_from_sources(self, artifacts):
        workouts, meals, sleep = artifacts
        tasks = generate_daily_tasks(workouts, meals, sleep)

        for task, workout in zip(tasks, workouts):
            assert task.workouts[0].exercise_name == workout.exercise_name
            assert task.workouts[0].location == workout.location
            assert task.scheduled_date == workout.scheduled_date
            day_meals = [m for m in meals if m.day == task.day]
            assert task.total_calories == sum(m.target_calories for m in day_meals)
            assert task.sleep.duration_hours == sleep.duration_hours

    def test_input_order_does_not_matter(self, artifacts):
        workouts, meals, sleep = artifacts

        ordered = generate_daily_tasks(workouts, meals, sleep)
        shuffled = generate_daily_tasks(list(reversed(workouts)), list(reversed(meals)), sleep)

        assert ordered == shuffled

    def test_checklist_contents(self, artifacts):
        task = generate_daily_tasks(*artifacts)[0]

        assert len(task.checklist) == 6
        assert task.checklist[0].startswith("Workout: ")
        assert task.checklist[1].startswith("Breakfast: ")
        assert task.checklist[-1] == "Sleep: in bed by 22:30, up at 07:00"

    def test_day_with_only_meals(self, artifacts):
        _, _, sleep = artifacts
        meal = DietPlanEntry(
            day=3,
            meal_type=MealType.DINNER,
            target_calories=600,
            protein_g=40,
            carbs_g=60,
            fat_g=20,
        )

        tasks = DailyTaskAggregator().generate([], [meal], sleep)

        assert len(tasks) == 1
        assert tasks[0].day == 3
        assert tasks[0].workouts == []
        assert tasks[0].total_calories == 600
        assert tasks[0].scheduled_date is None

    def test_no_entries_no_tasks(self, artifacts):
        _, _, sleep = artifacts
        assert DailyTaskAggregator().generate([], [], sleep) == []
