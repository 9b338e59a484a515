"""
FastAPI Dependency Providers for the Plan API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and engine providers create new instances per-request
- Auth providers extract user from headers

Usage in routers:
    from api.deps import get_plan_repo, get_current_user
    from application.ports import PlanRepository

    @router.post("/onboarding")
    def complete_onboarding(
        user_id: str = Depends(get_current_user),
        plan_repo: PlanRepository = Depends(get_plan_repo),
    ):
        ...

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_plan_repo] = lambda: FakePlanRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

from application.ports import PlanRepository
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.db import SupabasePlanRepository
from services.plan_engine import PlanEngine


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Use this dependency when the endpoint requires database access.
    Raises HTTPException 503 if database is not available.

    Returns:
        Client: Supabase client instance

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_plan_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PlanRepository:
    """
    Get PlanRepository implementation.

    Returns a SupabasePlanRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        PlanRepository: Repository for onboarding and plan persistence
    """
    return SupabasePlanRepository(client)


# =============================================================================
# Engine Provider
# =============================================================================


def get_plan_engine(
    settings: Settings = Depends(get_settings),
) -> PlanEngine:
    """
    Get a PlanEngine configured from settings.

    Args:
        settings: Application settings (injected)

    Returns:
        PlanEngine: Engine using the configured horizon and wake time
    """
    return PlanEngine(
        horizon_days=settings.plan_horizon_days,
        wake_time=settings.default_wake_time,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the current authenticated user ID.

    Extracts user ID from the Authorization header.

    Args:
        authorization: Bearer token header
        settings: Application settings (injected)

    Returns:
        str: User ID from authentication

    Raises:
        HTTPException: 401 if authentication fails
        RuntimeError: If auth stub is used in production
    """
    # Block production deployment with the auth stub
    if settings.is_production:
        raise RuntimeError(
            "Authentication stub cannot be used in production. "
            "Implement proper JWT validation before deploying."
        )

    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization header",
        )

    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header format",
        )

    token = authorization[7:]  # Remove "Bearer " prefix

    if not token:
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
        )

    # Stub: the token is the user id
    return token


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_plan_repo",
    # Engine
    "get_plan_engine",
    # Authentication
    "get_current_user",
]
