"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class PlanPersistenceError(Exception):
    """Error while writing onboarding records.

    Raised by repositories when a write fails. Carries the name of the
    step that failed so the caller can report how far persistence got.
    """

    def __init__(self, step: str, message: str):
        super().__init__(f"{step}: {message}")
        self.step = step
        self.message = message
