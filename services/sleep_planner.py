"""
Sleep schedule generator.

One recommendation applied across the whole horizon: a goal-adjusted
duration counted back from a fixed wake time.
"""

import logging
from datetime import datetime, time, timedelta
from typing import Any, Dict, Iterable, Union

from core.constants import DEFAULT_WAKE_TIME
from models.plan import SleepSchedule
from models.profile import Goal
from services.selection import normalize_goals

logger = logging.getLogger(__name__)

BASELINE_SLEEP_HOURS = 8.0

# Hours of sleep per goal effect; muscle gain sits at the top of the
# healthy 7-9 hour range for recovery
SLEEP_HOURS: Dict[Goal, float] = {
    Goal.WEIGHT_LOSS: BASELINE_SLEEP_HOURS,
    Goal.MUSCLE_GAIN: 9.0,
}

WIND_DOWN_MINUTES = 30


class SleepPlanner:
    """Generates the sleep recommendation for a set of goals."""

    def __init__(self, wake_time: Union[str, time] = DEFAULT_WAKE_TIME):
        """
        Initialize the sleep planner.

        Args:
            wake_time: Anchor wake time, as a time or an "HH:MM" string
        """
        self._wake_time = parse_clock_time(wake_time)

    def generate(self, goals: Iterable[Any]) -> SleepSchedule:
        """
        Generate the sleep schedule for the goals.

        Raises:
            EmptySelectionError: If goals are empty
            InvalidSelectionError: If a goal is not recognized
        """
        effects = normalize_goals(goals)
        hours = [SLEEP_HOURS.get(effect, BASELINE_SLEEP_HOURS) for effect in effects]
        duration = sum(hours) / len(hours)

        wake = datetime.combine(datetime.min.date(), self._wake_time) + timedelta(days=1)
        bedtime = wake - timedelta(hours=duration)
        wind_down = bedtime - timedelta(minutes=WIND_DOWN_MINUTES)

        schedule = SleepSchedule(
            bedtime=bedtime.time(),
            wake_time=self._wake_time,
            duration_hours=duration,
            wind_down_time=wind_down.time(),
        )
        logger.info(
            f"Generated sleep schedule: {schedule.bedtime:%H:%M}-{schedule.wake_time:%H:%M} "
            f"({duration}h)"
        )
        return schedule


def parse_clock_time(value: Union[str, time]) -> time:
    """Parse an "HH:MM" string (or pass through a time)."""
    if isinstance(value, time):
        return value
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except ValueError as e:
        raise ValueError(f"Invalid clock time '{value}', expected HH:MM") from e


def generate_sleep_schedule(
    goals: Iterable[Any],
    wake_time: Union[str, time] = DEFAULT_WAKE_TIME,
) -> SleepSchedule:
    """Generate a sleep schedule anchored at the wake time."""
    return SleepPlanner(wake_time=wake_time).generate(goals)
