"""
Profile and selection normalization.

Every generator funnels its inputs through these helpers so validation
happens once, before any artifact is built. Selections are accepted as enum
members, plain strings, or the record shapes the onboarding client submits
(e.g. {"goal_type": "both"}).
"""

from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import ValidationError

from core.exceptions import EmptySelectionError, InvalidProfileError, InvalidSelectionError
from models.profile import ExerciseLocation, Goal, MedicalCondition, Profile

E = TypeVar("E", Goal, MedicalCondition, ExerciseLocation)

# Key used by the onboarding client when it wraps a selection in a record
RECORD_KEYS = {
    Goal: "goal_type",
    MedicalCondition: "condition",
    ExerciseLocation: "location",
}

# Goal effects a selection expands to
GOAL_EFFECTS = {
    Goal.WEIGHT_LOSS: {Goal.WEIGHT_LOSS},
    Goal.MUSCLE_GAIN: {Goal.MUSCLE_GAIN},
    Goal.BOTH: {Goal.WEIGHT_LOSS, Goal.MUSCLE_GAIN},
}


def normalize_profile(data: Any) -> Profile:
    """
    Build a validated Profile from a Profile instance or a mapping.

    Args:
        data: Profile, or a mapping with age, height, current_weight,
              target_weight and gender

    Returns:
        Validated, immutable Profile

    Raises:
        InvalidProfileError: If a field is missing, non-numeric, or out of range
    """
    if isinstance(data, Profile):
        return data

    if not isinstance(data, Mapping):
        raise InvalidProfileError(
            f"Profile must be a mapping, got {type(data).__name__}"
        )

    try:
        return Profile.model_validate(dict(data))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidProfileError(
            f"Invalid profile: {'; '.join(errors)}", errors=errors
        ) from e


def normalize_goals(goals: Optional[Iterable[Any]]) -> FrozenSet[Goal]:
    """
    Expand selected goals into goal effects.

    The result never contains Goal.BOTH; it is replaced by its two
    constituent effects.

    Raises:
        EmptySelectionError: If no goal is selected
        InvalidSelectionError: If a goal is not recognized
    """
    members = _coerce_all(Goal, goals, "goals")
    if not members:
        raise EmptySelectionError("goals")

    effects = set()
    for goal in members:
        effects.update(GOAL_EFFECTS[goal])
    return frozenset(effects)


def normalize_conditions(conditions: Optional[Iterable[Any]]) -> FrozenSet[MedicalCondition]:
    """
    Return the active medical conditions.

    'none' is dropped, so both an empty selection and ['none'] yield an
    empty set.

    Raises:
        InvalidSelectionError: If a condition is not recognized
    """
    members = _coerce_all(MedicalCondition, conditions, "conditions")
    return frozenset(c for c in members if c != MedicalCondition.NONE)


def normalize_locations(locations: Optional[Iterable[Any]]) -> Tuple[ExerciseLocation, ...]:
    """
    Return the selected locations de-duplicated in canonical order.

    Raises:
        EmptySelectionError: If no location is selected
        InvalidSelectionError: If a location is not recognized
    """
    members = set(_coerce_all(ExerciseLocation, locations, "locations"))
    if not members:
        raise EmptySelectionError("locations")
    return tuple(loc for loc in ExerciseLocation if loc in members)


def selection_values(values: Optional[Iterable[Any]]) -> List[Any]:
    """
    Materialize a selection as a list without splitting single values.

    A lone string, enum member or record mapping is one selection, not an
    iterable of characters or keys. None becomes an empty list.
    """
    if values is None:
        return []
    if isinstance(values, (str, Mapping)):
        return [values]
    return list(values)


def _coerce_all(enum_cls: Type[E], values: Optional[Iterable[Any]], field: str) -> list:
    return [_coerce(enum_cls, value, field) for value in selection_values(values)]


def _coerce(enum_cls: Type[E], value: Any, field: str) -> E:
    if isinstance(value, enum_cls):
        return value

    raw = value
    if isinstance(value, Mapping):
        raw = value.get(RECORD_KEYS[enum_cls])

    if not isinstance(raw, str):
        raise InvalidSelectionError(field, value)

    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        raise InvalidSelectionError(field, value) from None
