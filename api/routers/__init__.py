"""
Router package for the Plan API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- plans: Stateless plan preview
- onboarding: Plan generation with persistence
"""

from api.routers.health import router as health_router
from api.routers.onboarding import router as onboarding_router
from api.routers.plans import router as plans_router

__all__ = [
    "health_router",
    "onboarding_router",
    "plans_router",
]
