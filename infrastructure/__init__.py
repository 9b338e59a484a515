"""
Infrastructure layer package for plan-api.

This package contains concrete implementations of the port interfaces.
"""

from infrastructure.db import SupabasePlanRepository

__all__ = [
    "SupabasePlanRepository",
]
