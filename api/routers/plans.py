"""
Plan generation router.

This router provides a stateless preview endpoint: it runs the plan engine
and returns the four artifacts without persisting anything.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_plan_engine
from core.exceptions import PlanGenerationError
from models.onboarding import GeneratePlanRequest
from models.plan import GeneratedPlan
from services.plan_engine import PlanEngine

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


@router.post("/preview", response_model=GeneratedPlan)
def preview_plan(
    request: GeneratePlanRequest,
    engine: PlanEngine = Depends(get_plan_engine),
):
    """
    Generate a lifestyle plan without saving it.

    Returns the workout plan, diet plan, sleep schedule and daily tasks
    for the submitted profile and selections.

    Raises:
        HTTPException 422: If the profile or selections are invalid
    """
    logger.info(
        f"Plan preview request: goals={[g.value for g in request.goals]}, "
        f"locations={[loc.value for loc in request.locations]}"
    )

    try:
        return engine.generate(
            profile=request.profile,
            goals=request.goals,
            conditions=request.conditions,
            locations=request.locations,
            start_date=request.start_date,
        )
    except PlanGenerationError as e:
        logger.warning(f"Plan preview rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e))
