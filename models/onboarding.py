"""
Request/response models for plan generation and onboarding.

These models define the API contract. Selection lists default to empty so
that the engine, not the request parser, reports empty selections.
"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models.plan import GeneratedPlan
from models.profile import ExerciseLocation, Goal, MedicalCondition, Profile


class GeneratePlanRequest(BaseModel):
    """Request model for generating a lifestyle plan."""

    profile: Profile = Field(description="Anthropometric snapshot")
    goals: List[Goal] = Field(
        default_factory=list,
        description="Selected goals; 'both' is shorthand for weight_loss + muscle_gain",
    )
    conditions: List[MedicalCondition] = Field(
        default_factory=list,
        description="Medical conditions; empty or ['none'] means no restriction",
    )
    locations: List[ExerciseLocation] = Field(
        default_factory=list,
        description="Where the user can exercise",
    )
    start_date: Optional[date] = Field(
        None,
        description="First day of the plan. When set, entries carry calendar dates.",
    )


class OnboardingResponse(BaseModel):
    """Response model for a completed onboarding."""

    user_id: str
    plan: GeneratedPlan
    records_written: Dict[str, int] = Field(
        default_factory=dict,
        description="Number of rows written per table",
    )
