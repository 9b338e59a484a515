"""
Exercise catalog and condition-based eligibility.

Each catalog exercise carries a set of restriction tags and the locations it
can be performed at. Each medical condition carries a set of forbidden tags
and an intensity ceiling. An exercise is eligible when it is available at one
of the requested locations, none of its tags are forbidden, and its
intensity does not exceed the ceiling. Adding a condition or an exercise is a
data change here, not a logic change in the planners.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from core.constants import SENIOR_AGE
from models.plan import Intensity, WorkoutCategory
from models.profile import ExerciseLocation, MedicalCondition

logger = logging.getLogger(__name__)

GYM = ExerciseLocation.GYM
HOME = ExerciseLocation.HOME
OUTDOORS = ExerciseLocation.OUTDOORS


@dataclass(frozen=True)
class CatalogExercise:
    """A schedulable exercise session."""

    id: str
    name: str
    category: WorkoutCategory
    intensity: Intensity
    locations: FrozenSet[ExerciseLocation]
    tags: FrozenSet[str] = frozenset()
    muscle_groups: Tuple[str, ...] = ()
    instructions: Optional[str] = None


@dataclass(frozen=True)
class ConditionRule:
    """Restrictions a medical condition places on exercise selection."""

    forbidden_tags: FrozenSet[str] = frozenset()
    max_intensity: Intensity = Intensity.HIGH


@dataclass(frozen=True)
class Restrictions:
    """Combined restrictions of every active condition."""

    forbidden_tags: FrozenSet[str] = frozenset()
    max_intensity: Intensity = Intensity.HIGH

    def permits(self, exercise: CatalogExercise) -> bool:
        if exercise.tags & self.forbidden_tags:
            return False
        return exercise.intensity.rank <= self.max_intensity.rank


def _exercise(
    id: str,
    name: str,
    category: WorkoutCategory,
    intensity: Intensity,
    locations: Iterable[ExerciseLocation],
    tags: Iterable[str] = (),
    muscle_groups: Sequence[str] = (),
    instructions: Optional[str] = None,
) -> CatalogExercise:
    return CatalogExercise(
        id=id,
        name=name,
        category=category,
        intensity=intensity,
        locations=frozenset(locations),
        tags=frozenset(tags),
        muscle_groups=tuple(muscle_groups),
        instructions=instructions,
    )


# Restriction tags:
#   hiit             - near-maximal cardio intervals
#   high_impact      - running, jumping, plyometrics
#   heavy_load       - near-maximal resistance
#   isometric_strain - sustained holds and bracing that spike blood pressure
#   breath_intensive - sustained hard breathing
#   cold_air         - performed outdoors regardless of temperature
#   long_endurance   - continuous sessions long enough to swing blood glucose
DEFAULT_EXERCISES: Tuple[CatalogExercise, ...] = (
    # High-intensity cardio
    _exercise(
        "treadmill-intervals", "Treadmill Sprint Intervals",
        WorkoutCategory.HIIT, Intensity.HIGH, [GYM],
        tags=["hiit", "high_impact", "breath_intensive"],
        muscle_groups=["legs", "cardiovascular"],
        instructions="30s hard / 90s easy, repeat 8 times after a 5 minute warm-up",
    ),
    _exercise(
        "bike-intervals", "Stationary Bike Intervals",
        WorkoutCategory.HIIT, Intensity.HIGH, [GYM],
        tags=["hiit"],
        muscle_groups=["legs", "cardiovascular"],
        instructions="20s all-out / 40s easy spin, repeat 10 times",
    ),
    _exercise(
        "rowing-intervals", "Rowing Intervals",
        WorkoutCategory.HIIT, Intensity.HIGH, [GYM],
        tags=["hiit", "breath_intensive"],
        muscle_groups=["back", "legs", "cardiovascular"],
        instructions="250m hard / 1 minute rest, repeat 6 times",
    ),
    _exercise(
        "bodyweight-circuit", "Bodyweight HIIT Circuit",
        WorkoutCategory.HIIT, Intensity.HIGH, [HOME],
        tags=["hiit", "high_impact", "breath_intensive"],
        muscle_groups=["full_body", "cardiovascular"],
        instructions="Burpees, jump squats, mountain climbers: 40s on / 20s off, 4 rounds",
    ),
    _exercise(
        "hill-sprints", "Hill Sprints",
        WorkoutCategory.HIIT, Intensity.HIGH, [OUTDOORS],
        tags=["hiit", "high_impact", "breath_intensive", "cold_air"],
        muscle_groups=["legs", "glutes", "cardiovascular"],
        instructions="Sprint uphill 15s, walk down to recover, repeat 8 times",
    ),
    # Steady-state cardio
    _exercise(
        "elliptical", "Elliptical Trainer",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [GYM],
        muscle_groups=["legs", "cardiovascular"],
        instructions="Steady pace you can hold a conversation at",
    ),
    _exercise(
        "lap-swimming", "Lap Swimming",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [GYM],
        muscle_groups=["full_body", "cardiovascular"],
        instructions="Easy continuous laps; rest at the wall as needed",
    ),
    _exercise(
        "stair-climber", "Stair Climber",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [GYM],
        tags=["breath_intensive"],
        muscle_groups=["legs", "glutes", "cardiovascular"],
    ),
    _exercise(
        "dance-cardio", "Dance Cardio",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [HOME],
        muscle_groups=["full_body", "cardiovascular"],
        instructions="Follow-along routine at a comfortable pace",
    ),
    _exercise(
        "jump-rope", "Jump Rope",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [HOME, OUTDOORS],
        tags=["high_impact", "breath_intensive"],
        muscle_groups=["calves", "cardiovascular"],
        instructions="1 minute on / 30s off",
    ),
    _exercise(
        "brisk-walk", "Brisk Walk",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [OUTDOORS],
        muscle_groups=["legs", "cardiovascular"],
    ),
    _exercise(
        "long-run", "Long Easy Run",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [OUTDOORS],
        tags=["high_impact", "cold_air", "long_endurance"],
        muscle_groups=["legs", "cardiovascular"],
    ),
    _exercise(
        "outdoor-cycling", "Outdoor Cycling",
        WorkoutCategory.CARDIO, Intensity.MODERATE, [OUTDOORS],
        tags=["long_endurance"],
        muscle_groups=["legs", "cardiovascular"],
    ),
    _exercise(
        "recumbent-bike", "Recumbent Bike",
        WorkoutCategory.CARDIO, Intensity.LOW, [GYM],
        muscle_groups=["legs", "cardiovascular"],
    ),
    _exercise(
        "marching-in-place", "Marching In Place",
        WorkoutCategory.CARDIO, Intensity.LOW, [HOME],
        muscle_groups=["legs", "cardiovascular"],
    ),
    # Resistance
    _exercise(
        "barbell-squat", "Barbell Back Squat",
        WorkoutCategory.STRENGTH, Intensity.HIGH, [GYM],
        tags=["heavy_load", "isometric_strain"],
        muscle_groups=["quadriceps", "glutes", "core"],
    ),
    _exercise(
        "deadlift", "Conventional Deadlift",
        WorkoutCategory.STRENGTH, Intensity.HIGH, [GYM],
        tags=["heavy_load", "isometric_strain"],
        muscle_groups=["hamstrings", "glutes", "back"],
    ),
    _exercise(
        "bench-press", "Barbell Bench Press",
        WorkoutCategory.STRENGTH, Intensity.HIGH, [GYM],
        tags=["heavy_load"],
        muscle_groups=["chest", "shoulders", "triceps"],
    ),
    _exercise(
        "advanced-calisthenics", "Advanced Calisthenics",
        WorkoutCategory.STRENGTH, Intensity.HIGH, [HOME, OUTDOORS],
        tags=["isometric_strain"],
        muscle_groups=["back", "chest", "core", "legs"],
        instructions="Pull-ups, dips, pistol squats: 4 sets near failure",
    ),
    _exercise(
        "machine-circuit", "Machine Circuit",
        WorkoutCategory.STRENGTH, Intensity.MODERATE, [GYM],
        muscle_groups=["full_body"],
        instructions="Leg press, chest press, lat pulldown, seated row",
    ),
    _exercise(
        "dumbbell-full-body", "Dumbbell Full Body",
        WorkoutCategory.STRENGTH, Intensity.MODERATE, [GYM, HOME],
        muscle_groups=["full_body"],
        instructions="Goblet squat, dumbbell row, floor press, Romanian deadlift",
    ),
    _exercise(
        "bodyweight-strength", "Bodyweight Strength",
        WorkoutCategory.STRENGTH, Intensity.MODERATE, [HOME, OUTDOORS],
        muscle_groups=["chest", "legs", "core"],
        instructions="Push-ups, split squats, glute bridges",
    ),
    _exercise(
        "plank-wall-sit", "Plank & Wall Sit Core Session",
        WorkoutCategory.STRENGTH, Intensity.MODERATE, [HOME, GYM],
        tags=["isometric_strain"],
        muscle_groups=["core", "quadriceps"],
    ),
    _exercise(
        "resistance-bands", "Resistance Band Circuit",
        WorkoutCategory.STRENGTH, Intensity.LOW, [HOME, OUTDOORS],
        muscle_groups=["full_body"],
    ),
    # Recovery
    _exercise(
        "yoga-flow", "Gentle Yoga Flow",
        WorkoutCategory.MOBILITY, Intensity.LOW, [GYM, HOME],
        muscle_groups=["full_body"],
    ),
    _exercise(
        "foam-rolling", "Foam Rolling & Stretching",
        WorkoutCategory.MOBILITY, Intensity.LOW, [GYM, HOME],
        muscle_groups=["full_body"],
    ),
    _exercise(
        "easy-walk", "Easy Walk",
        WorkoutCategory.MOBILITY, Intensity.LOW, [OUTDOORS],
        muscle_groups=["legs"],
    ),
)

CONDITION_RULES: Dict[MedicalCondition, ConditionRule] = {
    MedicalCondition.NONE: ConditionRule(),
    MedicalCondition.ASTHMA: ConditionRule(
        forbidden_tags=frozenset({"breath_intensive", "cold_air"}),
    ),
    MedicalCondition.DIABETES: ConditionRule(
        forbidden_tags=frozenset({"long_endurance"}),
    ),
    MedicalCondition.HEART_CONDITION: ConditionRule(
        forbidden_tags=frozenset({"hiit", "heavy_load", "isometric_strain"}),
        max_intensity=Intensity.MODERATE,
    ),
}

# Used when no condition-safe exercise exists for a session
FALLBACK_EXERCISE = _exercise(
    "gentle-walk-stretch", "Gentle Walk & Stretch",
    WorkoutCategory.MOBILITY, Intensity.LOW, list(ExerciseLocation),
    muscle_groups=["full_body"],
    instructions="Easy 10 minute walk followed by 10 minutes of light stretching",
)


@dataclass
class ExerciseCatalog:
    """
    Queryable exercise catalog.

    Provides methods to:
    - Build the location pool (union over requested locations)
    - Combine the restrictions of several medical conditions
    - Filter the location pool down to the eligible pool
    """

    exercises: Tuple[CatalogExercise, ...] = DEFAULT_EXERCISES
    condition_rules: Dict[MedicalCondition, ConditionRule] = field(
        default_factory=lambda: dict(CONDITION_RULES)
    )
    fallback: CatalogExercise = FALLBACK_EXERCISE

    def location_pool(
        self, locations: Iterable[ExerciseLocation]
    ) -> List[CatalogExercise]:
        """Exercises available at any of the given locations, in catalog order."""
        wanted = set(locations)
        return [ex for ex in self.exercises if ex.locations & wanted]

    def restrictions_for(
        self,
        conditions: Iterable[MedicalCondition],
        age: Optional[int] = None,
    ) -> Restrictions:
        """
        Combine the rules of every active condition.

        Forbidden tags are unioned and the lowest intensity ceiling wins, so
        the most restrictive condition decides each category. Users aged
        SENIOR_AGE or older are additionally capped at moderate intensity.
        """
        forbidden: set = set()
        ceiling = Intensity.HIGH
        if age is not None and age >= SENIOR_AGE:
            ceiling = Intensity.MODERATE
        for condition in conditions:
            rule = self.condition_rules.get(condition, ConditionRule())
            forbidden |= rule.forbidden_tags
            if rule.max_intensity.rank < ceiling.rank:
                ceiling = rule.max_intensity
        return Restrictions(forbidden_tags=frozenset(forbidden), max_intensity=ceiling)

    def eligible_pool(
        self,
        locations: Iterable[ExerciseLocation],
        conditions: Iterable[MedicalCondition],
        age: Optional[int] = None,
    ) -> List[CatalogExercise]:
        """
        Exercises available at the given locations and safe for all conditions.

        Args:
            locations: Requested exercise locations
            conditions: Active medical conditions ('none' has no effect)
            age: User age; seniors only get low and moderate sessions

        Returns:
            Eligible exercises in catalog order
        """
        locations = list(locations)
        restrictions = self.restrictions_for(conditions, age=age)
        pool = self.location_pool(locations)
        eligible = [ex for ex in pool if restrictions.permits(ex)]

        if not eligible:
            logger.info(
                f"No eligible exercises for locations={sorted({loc.value for loc in locations})} "
                f"after condition filtering"
            )
        return eligible
