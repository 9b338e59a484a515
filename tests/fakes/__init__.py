"""
Fake implementations for testing.

This package provides in-memory fake implementations of repository
interfaces for fast, isolated testing without database dependencies.
"""

from tests.fakes.plan_repository import FakePlanRepository

__all__ = [
    "FakePlanRepository",
]
