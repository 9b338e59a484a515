"""
Workout plan generator.

Turns a profile, goal effects, medical conditions and exercise locations
into one session per day across the plan horizon:

1. Session mix - pick category/intensity counts for the goal effects
2. Distribution - spread high-intensity days apart, interleave the rest
3. Selection - fill each session from the eligible pool, downgrading or
   substituting when a category is not permitted
4. Fallback - a gentle walk/stretch session when nothing eligible remains
"""

import logging
from datetime import date, timedelta
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from core.constants import DEFAULT_HORIZON_DAYS, MAX_HORIZON_DAYS, MIN_HORIZON_DAYS
from models.plan import Intensity, WorkoutCategory, WorkoutPlanEntry
from models.profile import ExerciseLocation, Goal
from services.exercise_catalog import CatalogExercise, ExerciseCatalog, Restrictions
from services.selection import (
    normalize_conditions,
    normalize_goals,
    normalize_locations,
    normalize_profile,
)

logger = logging.getLogger(__name__)

SessionKind = Tuple[WorkoutCategory, Intensity]

HIIT_HIGH: SessionKind = (WorkoutCategory.HIIT, Intensity.HIGH)
CARDIO_MODERATE: SessionKind = (WorkoutCategory.CARDIO, Intensity.MODERATE)
STRENGTH_HIGH: SessionKind = (WorkoutCategory.STRENGTH, Intensity.HIGH)
STRENGTH_MODERATE: SessionKind = (WorkoutCategory.STRENGTH, Intensity.MODERATE)
RECOVERY: SessionKind = (WorkoutCategory.MOBILITY, Intensity.LOW)

# Weekly session mix per set of goal effects. Order matters: the remaining
# sessions are interleaved in this order after high-intensity days are placed.
SESSION_MIX: Dict[FrozenSet[Goal], List[Tuple[SessionKind, int]]] = {
    frozenset({Goal.WEIGHT_LOSS}): [
        (HIIT_HIGH, 2),
        (STRENGTH_MODERATE, 2),
        (CARDIO_MODERATE, 2),
        (RECOVERY, 1),
    ],
    frozenset({Goal.MUSCLE_GAIN}): [
        (STRENGTH_HIGH, 2),
        (RECOVERY, 2),
        (STRENGTH_MODERATE, 2),
        (CARDIO_MODERATE, 1),
    ],
    frozenset({Goal.WEIGHT_LOSS, Goal.MUSCLE_GAIN}): [
        (STRENGTH_HIGH, 1),
        (HIIT_HIGH, 1),
        (CARDIO_MODERATE, 2),
        (STRENGTH_MODERATE, 2),
        (RECOVERY, 1),
    ],
}

MIX_DAYS = 7

# Category to try when a session's own category has nothing eligible
CATEGORY_SUBSTITUTES: Dict[WorkoutCategory, WorkoutCategory] = {
    WorkoutCategory.HIIT: WorkoutCategory.CARDIO,
    WorkoutCategory.CARDIO: WorkoutCategory.MOBILITY,
    WorkoutCategory.STRENGTH: WorkoutCategory.MOBILITY,
}

# Duration (minutes) or sets/reps per resolved session kind
PRESCRIPTIONS: Dict[SessionKind, Dict[str, Any]] = {
    (WorkoutCategory.HIIT, Intensity.HIGH): {"duration_minutes": 20},
    (WorkoutCategory.CARDIO, Intensity.HIGH): {"duration_minutes": 25},
    (WorkoutCategory.CARDIO, Intensity.MODERATE): {"duration_minutes": 35},
    (WorkoutCategory.CARDIO, Intensity.LOW): {"duration_minutes": 30},
    (WorkoutCategory.STRENGTH, Intensity.HIGH): {"sets": 4, "reps": "5-8"},
    (WorkoutCategory.STRENGTH, Intensity.MODERATE): {"sets": 3, "reps": "8-12"},
    (WorkoutCategory.STRENGTH, Intensity.LOW): {"sets": 2, "reps": "12-15"},
    (WorkoutCategory.MOBILITY, Intensity.LOW): {"duration_minutes": 25},
}

FALLBACK_PRESCRIPTION = {"duration_minutes": 20}

_LEVELS_DESCENDING = (Intensity.HIGH, Intensity.MODERATE, Intensity.LOW)


class WorkoutPlanner:
    """
    Generates a workout plan covering the plan horizon.

    The planner is stateless between calls; each call builds its own
    rotation counters, so identical inputs give identical plans.
    """

    def __init__(
        self,
        catalog: Optional[ExerciseCatalog] = None,
        horizon_days: int = DEFAULT_HORIZON_DAYS,
    ):
        """
        Initialize the workout planner.

        Args:
            catalog: Exercise catalog and condition rules (defaults to built-in)
            horizon_days: Number of days each plan covers
        """
        if not MIN_HORIZON_DAYS <= horizon_days <= MAX_HORIZON_DAYS:
            raise ValueError(
                f"horizon_days must be between {MIN_HORIZON_DAYS} and {MAX_HORIZON_DAYS}"
            )
        self._catalog = catalog or ExerciseCatalog()
        self._horizon_days = horizon_days

    @property
    def catalog(self) -> ExerciseCatalog:
        return self._catalog

    def generate(
        self,
        profile: Any,
        goals: Iterable[Any],
        conditions: Optional[Iterable[Any]],
        locations: Iterable[Any],
        start_date: Optional[date] = None,
    ) -> List[WorkoutPlanEntry]:
        """
        Generate one workout entry per day of the horizon.

        Args:
            profile: Profile or mapping of profile fields
            goals: Selected goals (non-empty)
            conditions: Medical conditions (may be empty or just 'none')
            locations: Exercise locations (non-empty)
            start_date: Optional first day; entries get calendar dates when set

        Returns:
            Entries ordered by day

        Raises:
            InvalidProfileError: If the profile is invalid
            EmptySelectionError: If goals or locations are empty
            InvalidSelectionError: If a selection value is not recognized
        """
        profile = normalize_profile(profile)
        effects = normalize_goals(goals)
        active_conditions = normalize_conditions(conditions)
        requested_locations = normalize_locations(locations)

        restrictions = self._catalog.restrictions_for(active_conditions, age=profile.age)
        pool = self._catalog.eligible_pool(
            requested_locations, active_conditions, age=profile.age
        )

        schedule = self.distribute_sessions(self.session_counts(effects))

        rotation: Dict[SessionKind, int] = {}
        entries: List[WorkoutPlanEntry] = []
        fallback_days = 0

        for day, kind in enumerate(schedule, start=1):
            exercise, resolved = self._select(kind, pool, restrictions, rotation)
            scheduled = start_date + timedelta(days=day - 1) if start_date else None

            if exercise is None:
                fallback_days += 1
                entries.append(
                    self._fallback_entry(day, scheduled, requested_locations)
                )
                continue

            logger.debug(f"Day {day}: {kind} resolved to {exercise.id} as {resolved}")
            entries.append(
                self._build_entry(day, scheduled, exercise, resolved, requested_locations)
            )

        if fallback_days:
            logger.info(
                f"Used fallback session on {fallback_days} of {len(entries)} day(s): "
                f"no condition-safe exercise available"
            )

        logger.info(
            f"Generated workout plan: days={len(entries)}, "
            f"goals={sorted(g.value for g in effects)}, "
            f"conditions={sorted(c.value for c in active_conditions)}, "
            f"locations={[loc.value for loc in requested_locations]}"
        )
        return entries

    def session_counts(self, effects: FrozenSet[Goal]) -> List[Tuple[SessionKind, int]]:
        """
        Scale the weekly session mix for the goal effects to the horizon.

        Uses largest-remainder rounding so the counts sum to the horizon.
        """
        mix = SESSION_MIX[frozenset(effects)]
        exact = [(kind, count * self._horizon_days / MIX_DAYS) for kind, count in mix]
        counts = [int(value) for _, value in exact]

        shortfall = self._horizon_days - sum(counts)
        by_remainder = sorted(
            range(len(exact)),
            key=lambda i: (-(exact[i][1] - counts[i]), i),
        )
        for i in by_remainder[:shortfall]:
            counts[i] += 1

        return [(kind, count) for (kind, _), count in zip(mix, counts)]

    def distribute_sessions(
        self, counts: Sequence[Tuple[SessionKind, int]]
    ) -> List[SessionKind]:
        """
        Lay sessions out across the horizon.

        High-intensity sessions are spaced evenly and kept off adjacent days
        whenever the count allows it. Remaining sessions are interleaved
        round-robin in mix order.
        """
        horizon = self._horizon_days
        high = [kind for kind, n in counts if kind[1] == Intensity.HIGH for _ in range(n)]
        others = [(kind, n) for kind, n in counts if kind[1] != Intensity.HIGH]

        positions = [(i * horizon) // len(high) for i in range(len(high))] if high else []
        if _has_adjacent(positions) and len(high) <= (horizon + 1) // 2:
            positions = [2 * i for i in range(len(high))]

        schedule: List[Optional[SessionKind]] = [None] * horizon
        for position, kind in zip(positions, high):
            schedule[position] = kind

        remaining = iter(_round_robin(others))
        for i in range(horizon):
            if schedule[i] is None:
                schedule[i] = next(remaining)

        return [kind for kind in schedule if kind is not None]

    def _select(
        self,
        kind: SessionKind,
        pool: List[CatalogExercise],
        restrictions: Restrictions,
        rotation: Dict[SessionKind, int],
    ) -> Tuple[Optional[CatalogExercise], Optional[SessionKind]]:
        """Pick an exercise for a session, downgrading or substituting as needed."""
        for candidate in _candidate_kinds(kind):
            if candidate[1].rank > restrictions.max_intensity.rank:
                continue

            matches = [
                ex for ex in pool
                if ex.category == candidate[0] and ex.intensity == candidate[1]
            ]
            if not matches:
                continue

            index = rotation.get(candidate, 0)
            rotation[candidate] = index + 1
            return matches[index % len(matches)], candidate

        return None, None

    def _build_entry(
        self,
        day: int,
        scheduled: Optional[date],
        exercise: CatalogExercise,
        kind: SessionKind,
        requested_locations: Tuple[ExerciseLocation, ...],
    ) -> WorkoutPlanEntry:
        location = next(loc for loc in requested_locations if loc in exercise.locations)
        return WorkoutPlanEntry(
            day=day,
            scheduled_date=scheduled,
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            category=kind[0],
            intensity=kind[1],
            muscle_groups=list(exercise.muscle_groups),
            location=location,
            instructions=exercise.instructions,
            **PRESCRIPTIONS.get(kind, FALLBACK_PRESCRIPTION),
        )

    def _fallback_entry(
        self,
        day: int,
        scheduled: Optional[date],
        requested_locations: Tuple[ExerciseLocation, ...],
    ) -> WorkoutPlanEntry:
        fallback = self._catalog.fallback
        return WorkoutPlanEntry(
            day=day,
            scheduled_date=scheduled,
            exercise_id=fallback.id,
            exercise_name=fallback.name,
            category=fallback.category,
            intensity=fallback.intensity,
            muscle_groups=list(fallback.muscle_groups),
            location=requested_locations[0],
            instructions=fallback.instructions,
            is_fallback=True,
            **FALLBACK_PRESCRIPTION,
        )


def _candidate_kinds(kind: SessionKind) -> Iterator[SessionKind]:
    """
    Yield session kinds to try, most to least preferred.

    Steps down through intensities within the category, then moves to the
    substitute category starting no higher than moderate.
    """
    category: Optional[WorkoutCategory] = kind[0]
    ceiling = kind[1]
    while category is not None:
        for level in _LEVELS_DESCENDING:
            if level.rank <= ceiling.rank:
                yield (category, level)
        category = CATEGORY_SUBSTITUTES.get(category)
        if ceiling.rank > Intensity.MODERATE.rank:
            ceiling = Intensity.MODERATE


def _has_adjacent(positions: Sequence[int]) -> bool:
    return any(b - a < 2 for a, b in zip(positions, positions[1:]))


def _round_robin(groups: Sequence[Tuple[SessionKind, int]]) -> List[SessionKind]:
    remaining = [[kind, n] for kind, n in groups if n > 0]
    ordered: List[SessionKind] = []
    while remaining:
        for group in remaining:
            ordered.append(group[0])
            group[1] -= 1
        remaining = [group for group in remaining if group[1] > 0]
    return ordered


def generate_workout_plan(
    profile: Any,
    goals: Iterable[Any],
    conditions: Optional[Iterable[Any]],
    locations: Iterable[Any],
    start_date: Optional[date] = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> List[WorkoutPlanEntry]:
    """Generate a workout plan with the built-in catalog."""
    return WorkoutPlanner(horizon_days=horizon_days).generate(
        profile, goals, conditions, locations, start_date=start_date
    )
