"""
Plan generation error taxonomy.

Raised by the engine before any artifact is produced, so a caller either
receives a complete collection or one of these errors.
"""

from typing import List, Optional


class PlanGenerationError(Exception):
    """Base error for plan generation failures."""

    pass


class InvalidProfileError(PlanGenerationError):
    """Profile is missing fields, non-numeric, or outside a sane range."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class EmptySelectionError(PlanGenerationError):
    """A required selection (goals or locations) is empty."""

    def __init__(self, field: str):
        super().__init__(f"At least one value is required for '{field}'")
        self.field = field


class InvalidSelectionError(PlanGenerationError):
    """A selection contains a value the engine does not recognize."""

    def __init__(self, field: str, value: object):
        super().__init__(f"Unrecognized value for '{field}': {value!r}")
        self.field = field
        self.value = value
