"""
Input models for plan generation.

A Profile is the immutable snapshot of the user's anthropometrics taken at
generation time. Goals, conditions and locations are closed enumerations
matching the onboarding form options.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from core.constants import AGE_RANGE, HEIGHT_CM_RANGE, WEIGHT_KG_RANGE


class Gender(str, Enum):
    """Gender options used by the energy estimate."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    """User goals. BOTH is shorthand for WEIGHT_LOSS + MUSCLE_GAIN."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    BOTH = "both"


class MedicalCondition(str, Enum):
    """Medical conditions that restrict exercise selection."""

    NONE = "none"
    ASTHMA = "asthma"
    DIABETES = "diabetes"
    HEART_CONDITION = "heart_condition"


class ExerciseLocation(str, Enum):
    """Places a user can exercise. Declaration order is the canonical order."""

    GYM = "gym"
    HOME = "home"
    OUTDOORS = "outdoors"


class Profile(BaseModel):
    """Anthropometric snapshot used as generation input."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(ge=AGE_RANGE[0], le=AGE_RANGE[1], description="Age in years")
    height: float = Field(
        ge=HEIGHT_CM_RANGE[0], le=HEIGHT_CM_RANGE[1], description="Height in cm"
    )
    current_weight: float = Field(
        ge=WEIGHT_KG_RANGE[0], le=WEIGHT_KG_RANGE[1], description="Current weight in kg"
    )
    target_weight: float = Field(
        ge=WEIGHT_KG_RANGE[0], le=WEIGHT_KG_RANGE[1], description="Target weight in kg"
    )
    gender: Gender = Field(description="Gender used by the energy estimate")

    @property
    def weight_delta(self) -> float:
        """Target minus current weight; negative means losing weight."""
        return self.target_weight - self.current_weight
