"""
Application Use Cases for the Plan API.

This package contains application-level use cases that orchestrate the plan
engine and repository ports. Dependencies are injected via constructors for
testability.

Usage:
    from application.use_cases import CompleteOnboardingUseCase

    use_case = CompleteOnboardingUseCase(plan_repo=plan_repo)
    result = use_case.execute(user_id="user-123", request=request)
"""

from application.use_cases.complete_onboarding import (
    CompleteOnboardingResult,
    CompleteOnboardingUseCase,
)

__all__ = [
    "CompleteOnboardingResult",
    "CompleteOnboardingUseCase",
]
