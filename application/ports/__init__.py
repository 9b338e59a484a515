"""
Port interfaces (Protocols) for plan-api.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.plan_repository import PlanRepository

__all__ = [
    "PlanRepository",
]
