"""
Database infrastructure package.
"""

from infrastructure.db.plan_repository import SupabasePlanRepository

__all__ = [
    "SupabasePlanRepository",
]
