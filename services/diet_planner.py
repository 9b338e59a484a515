"""
Diet plan generator.

Estimates a weight-neutral daily energy target from the profile
(Mifflin-St Jeor BMR times an activity factor), shifts it by a goal
offset scaled to how far the user is from their target weight, and splits
it across fixed meal slots with goal-specific macro ratios.
"""

import logging
from datetime import date, timedelta
from typing import Any, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from core.constants import DEFAULT_HORIZON_DAYS, MAX_HORIZON_DAYS, MIN_HORIZON_DAYS
from models.plan import DietPlanEntry, MealType
from models.profile import Gender, Goal
from services.selection import normalize_goals, normalize_profile

logger = logging.getLogger(__name__)

# Mifflin-St Jeor sex constant; "other" uses the midpoint
BMR_GENDER_OFFSET: Dict[Gender, float] = {
    Gender.MALE: 5.0,
    Gender.FEMALE: -161.0,
    Gender.OTHER: -78.0,
}

# Lowest BMR the estimate will use
BMR_FLOOR = 800.0

# Moderately active: the generated workout plan trains most days
ACTIVITY_FACTOR = 1.55

# (max |weight delta| in kg, loss offset, gain offset); first matching tier wins
GOAL_OFFSET_TIERS: Tuple[Tuple[float, float, float], ...] = (
    (5.0, -0.10, 0.05),
    (15.0, -0.15, 0.10),
    (float("inf"), -0.20, 0.15),
)

MEAL_WEIGHTS: Dict[MealType, float] = {
    MealType.BREAKFAST: 0.25,
    MealType.LUNCH: 0.35,
    MealType.DINNER: 0.30,
    MealType.SNACK: 0.10,
}

# Share of calories from (protein, carbs, fat)
MACRO_RATIOS: Dict[Goal, Tuple[float, float, float]] = {
    Goal.WEIGHT_LOSS: (0.30, 0.40, 0.30),
    Goal.MUSCLE_GAIN: (0.35, 0.45, 0.20),
}

KCAL_PER_GRAM = (4.0, 4.0, 9.0)

MEAL_SUGGESTIONS: Dict[MealType, Tuple[str, ...]] = {
    MealType.BREAKFAST: (
        "Greek yogurt with berries and oats",
        "Veggie omelette with whole-grain toast",
        "Overnight oats with chia and banana",
        "Cottage cheese with fruit and walnuts",
    ),
    MealType.LUNCH: (
        "Grilled chicken quinoa bowl with roasted vegetables",
        "Turkey and avocado whole-wheat wrap with side salad",
        "Lentil soup with mixed greens",
        "Tuna salad with brown rice",
        "Tofu stir-fry with vegetables and rice noodles",
    ),
    MealType.DINNER: (
        "Baked salmon with sweet potato and broccoli",
        "Lean beef stir-fry with brown rice",
        "Chickpea curry with basmati rice",
        "Roast chicken with quinoa and green beans",
        "Shrimp and vegetable whole-wheat pasta",
        "Black bean tacos with slaw",
    ),
    MealType.SNACK: (
        "Apple with peanut butter",
        "Protein shake",
        "Hummus with carrot sticks",
        "Handful of almonds",
    ),
}


class DietPlanner:
    """Generates meal slots with calorie and macro targets for each day."""

    def __init__(self, horizon_days: int = DEFAULT_HORIZON_DAYS):
        if not MIN_HORIZON_DAYS <= horizon_days <= MAX_HORIZON_DAYS:
            raise ValueError(
                f"horizon_days must be between {MIN_HORIZON_DAYS} and {MAX_HORIZON_DAYS}"
            )
        self._horizon_days = horizon_days

    def generate(
        self,
        profile: Any,
        goals: Iterable[Any],
        start_date: Optional[date] = None,
    ) -> List[DietPlanEntry]:
        """
        Generate meal entries for every day of the horizon.

        Args:
            profile: Profile or mapping of profile fields
            goals: Selected goals (non-empty)
            start_date: Optional first day; entries get calendar dates when set

        Returns:
            Entries ordered by day, then meal slot

        Raises:
            InvalidProfileError: If the profile is invalid
            EmptySelectionError: If goals are empty
            InvalidSelectionError: If a goal is not recognized
        """
        profile = normalize_profile(profile)
        effects = normalize_goals(goals)

        daily_target = self.daily_target(profile, effects)
        ratios = self.macro_ratios(effects)
        slot_calories = split_calories(daily_target, list(MEAL_WEIGHTS.values()))

        entries: List[DietPlanEntry] = []
        for day in range(1, self._horizon_days + 1):
            scheduled = start_date + timedelta(days=day - 1) if start_date else None
            for meal_type, calories in zip(MEAL_WEIGHTS, slot_calories):
                protein_g, carbs_g, fat_g = _macro_grams(calories, ratios)
                suggestions = MEAL_SUGGESTIONS[meal_type]
                entries.append(
                    DietPlanEntry(
                        day=day,
                        scheduled_date=scheduled,
                        meal_type=meal_type,
                        target_calories=calories,
                        protein_g=protein_g,
                        carbs_g=carbs_g,
                        fat_g=fat_g,
                        description=suggestions[(day - 1) % len(suggestions)],
                    )
                )

        logger.info(
            f"Generated diet plan: days={self._horizon_days}, "
            f"daily_target={daily_target} kcal, goals={sorted(g.value for g in effects)}"
        )
        return entries

    def estimate_baseline(self, profile: Any) -> float:
        """
        Weight-neutral daily energy estimate in kcal.

        Mifflin-St Jeor BMR (floored at BMR_FLOOR) times ACTIVITY_FACTOR.
        """
        profile = normalize_profile(profile)
        bmr = (
            10.0 * profile.current_weight
            + 6.25 * profile.height
            - 5.0 * profile.age
            + BMR_GENDER_OFFSET[profile.gender]
        )
        return max(bmr, BMR_FLOOR) * ACTIVITY_FACTOR

    def goal_offset(self, effects: FrozenSet[Goal], weight_delta: float) -> float:
        """
        Fractional adjustment to the baseline for the goal effects.

        Deficit for weight loss, surplus for muscle gain, the midpoint when
        both are present. Larger weight gaps get larger adjustments.
        """
        magnitude = abs(weight_delta)
        _, loss, gain = next(tier for tier in GOAL_OFFSET_TIERS if magnitude < tier[0])
        per_effect = {Goal.WEIGHT_LOSS: loss, Goal.MUSCLE_GAIN: gain}
        offsets = [per_effect[effect] for effect in sorted(effects, key=lambda g: g.value)]
        return sum(offsets) / len(offsets)

    def daily_target(self, profile: Any, goals: Iterable[Any]) -> int:
        """Daily calorie target for the profile and goals."""
        profile = normalize_profile(profile)
        effects = normalize_goals(goals)
        baseline = self.estimate_baseline(profile)
        return round(baseline * (1 + self.goal_offset(effects, profile.weight_delta)))

    def macro_ratios(self, effects: FrozenSet[Goal]) -> Tuple[float, float, float]:
        """Average (protein, carbs, fat) calorie shares across goal effects."""
        ratios = [MACRO_RATIOS[effect] for effect in sorted(effects, key=lambda g: g.value)]
        protein, carbs, fat = (sum(shares) / len(ratios) for shares in zip(*ratios))
        return protein, carbs, fat


def split_calories(total: int, weights: Sequence[float]) -> List[int]:
    """
    Split a calorie total across weighted slots.

    Largest-remainder rounding keeps the slots summing exactly to the total.
    """
    weight_sum = sum(weights)
    exact = [total * w / weight_sum for w in weights]
    parts = [int(value) for value in exact]

    shortfall = total - sum(parts)
    by_remainder = sorted(range(len(exact)), key=lambda i: (-(exact[i] - parts[i]), i))
    for i in by_remainder[:shortfall]:
        parts[i] += 1
    return parts


def _macro_grams(calories: int, ratios: Tuple[float, float, float]) -> Tuple[int, int, int]:
    protein, carbs, fat = (
        round(calories * ratio / kcal) for ratio, kcal in zip(ratios, KCAL_PER_GRAM)
    )
    return protein, carbs, fat


def generate_diet_plan(
    profile: Any,
    goals: Iterable[Any],
    start_date: Optional[date] = None,
    horizon_days: int = DEFAULT_HORIZON_DAYS,
) -> List[DietPlanEntry]:
    """Generate a diet plan covering the horizon."""
    return DietPlanner(horizon_days=horizon_days).generate(
        profile, goals, start_date=start_date
    )
