"""
Onboarding router.

This router completes onboarding: it generates the user's plan and
persists the profile, selections, plan artifacts and baseline weight.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_plan_engine, get_plan_repo
from application.ports import PlanRepository
from application.use_cases import CompleteOnboardingUseCase
from core.exceptions import PlanGenerationError
from models.onboarding import GeneratePlanRequest, OnboardingResponse
from services.plan_engine import PlanEngine

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/onboarding",
    tags=["Onboarding"],
)


def get_onboarding_use_case(
    plan_repo: PlanRepository = Depends(get_plan_repo),
    engine: PlanEngine = Depends(get_plan_engine),
) -> CompleteOnboardingUseCase:
    """
    Create and return a CompleteOnboardingUseCase instance.

    Args:
        plan_repo: Plan repository
        engine: Plan engine

    Returns:
        Configured CompleteOnboardingUseCase instance
    """
    return CompleteOnboardingUseCase(plan_repo=plan_repo, engine=engine)


@router.post("", response_model=OnboardingResponse, status_code=201)
def complete_onboarding(
    request: GeneratePlanRequest,
    user_id: str = Depends(get_current_user),
    use_case: CompleteOnboardingUseCase = Depends(get_onboarding_use_case),
):
    """
    Complete onboarding for the current user.

    Generates the full plan first; nothing is written if the inputs are
    invalid. The user is only reported as onboarded when every record has
    been written.

    Raises:
        HTTPException 422: If the profile or selections are invalid
        HTTPException 502: If persistence fails partway
    """
    logger.info(f"Onboarding request for user {user_id}")

    try:
        result = use_case.execute(user_id=user_id, request=request)
    except PlanGenerationError as e:
        logger.warning(f"Onboarding rejected for user {user_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    if not result.success:
        raise HTTPException(
            status_code=502,
            detail=f"Failed to save plan at step '{result.failed_step}': {result.error}",
        )

    return OnboardingResponse(
        user_id=user_id,
        plan=result.plan,
        records_written=result.records_written,
    )
