"""
CompleteOnboarding Use Case.

Turns a finished intake form into a persisted lifestyle plan:
1. Generate all four plan artifacts (nothing is written if this fails)
2. Update the profile and record goals, conditions and locations
3. Save workout, diet, sleep and daily task records
4. Log the current weight as the baseline weight observation

Persistence runs step by step. If a step fails the result reports which
step failed and is never marked successful; cleaning up rows written by
earlier steps is left to the caller.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

from application.exceptions import PlanPersistenceError
from application.ports import PlanRepository
from models.onboarding import GeneratePlanRequest
from models.plan import GeneratedPlan
from services.plan_engine import PlanEngine

logger = logging.getLogger(__name__)


@dataclass
class CompleteOnboardingResult:
    """Result of the CompleteOnboarding use case execution."""

    success: bool
    plan: Optional[GeneratedPlan] = None
    records_written: Dict[str, int] = field(default_factory=dict)
    failed_step: Optional[str] = None
    error: Optional[str] = None


class CompleteOnboardingUseCase:
    """
    Use case for completing onboarding.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = CompleteOnboardingUseCase(plan_repo=repo, engine=PlanEngine())
        >>> result = use_case.execute(user_id="user-123", request=request)
        >>> if result.success:
        ...     print(result.records_written)
    """

    def __init__(
        self,
        plan_repo: PlanRepository,
        engine: Optional[PlanEngine] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            plan_repo: Repository for persisting selections and plan records
            engine: Plan engine (defaults to a 7-day engine)
        """
        self._plan_repo = plan_repo
        self._engine = engine or PlanEngine()

    def execute(
        self,
        user_id: str,
        request: GeneratePlanRequest,
        today: Optional[date] = None,
    ) -> CompleteOnboardingResult:
        """
        Execute the onboarding workflow.

        Args:
            user_id: The user's ID
            request: Profile and selections from the intake form
            today: Date used for the baseline weight log when the request
                   has no start date (defaults to today)

        Returns:
            CompleteOnboardingResult with the plan and per-table row counts

        Raises:
            PlanGenerationError: If the inputs are invalid; nothing is written
        """
        plan = self._engine.generate(
            profile=request.profile,
            goals=request.goals,
            conditions=request.conditions,
            locations=request.locations,
            start_date=request.start_date,
        )

        profile = request.profile
        log_date = request.start_date or today or date.today()
        records_written: Dict[str, int] = {}

        steps: List[Tuple[str, Callable[[], object]]] = [
            ("user_profiles", lambda: self._plan_repo.update_profile(
                user_id, profile.model_dump(mode="json"))),
            ("user_goals", lambda: self._plan_repo.add_goals(
                user_id, [g.value for g in request.goals])),
            ("user_medical_conditions", lambda: self._plan_repo.add_conditions(
                user_id, [c.value for c in request.conditions])),
            ("user_exercise_locations", lambda: self._plan_repo.add_locations(
                user_id, [loc.value for loc in request.locations])),
            ("workout_plans", lambda: self._plan_repo.save_workout_plans(
                user_id, [w.model_dump(mode="json") for w in plan.workouts])),
            ("diet_plans", lambda: self._plan_repo.save_diet_plans(
                user_id, [m.model_dump(mode="json") for m in plan.meals])),
            ("sleep_schedules", lambda: self._plan_repo.save_sleep_schedule(
                user_id, plan.sleep.model_dump(mode="json"))),
            ("daily_tasks", lambda: self._plan_repo.save_daily_tasks(
                user_id, [t.model_dump(mode="json") for t in plan.daily_tasks])),
            ("weight_logs", lambda: self._plan_repo.log_weight(
                user_id, profile.current_weight, log_date.isoformat())),
        ]

        for step, write in steps:
            try:
                written = write()
            except PlanPersistenceError as e:
                logger.error(f"Onboarding persistence failed for user {user_id} at {e.step}: {e.message}")
                return CompleteOnboardingResult(
                    success=False,
                    plan=plan,
                    records_written=records_written,
                    failed_step=e.step,
                    error=e.message,
                )
            except Exception as e:
                logger.exception(f"Onboarding persistence failed for user {user_id} at {step}: {e}")
                return CompleteOnboardingResult(
                    success=False,
                    plan=plan,
                    records_written=records_written,
                    failed_step=step,
                    error=str(e),
                )

            records_written[step] = len(written) if isinstance(written, list) else 1

        logger.info(f"Onboarding completed for user {user_id}: {records_written}")
        return CompleteOnboardingResult(
            success=True,
            plan=plan,
            records_written=records_written,
        )
