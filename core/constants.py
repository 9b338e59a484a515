"""
Shared constants for plan generation.

This module has no dependencies on models or services to avoid circular imports.
"""

# Number of days covered by a generated plan
DEFAULT_HORIZON_DAYS = 7
MIN_HORIZON_DAYS = 1
MAX_HORIZON_DAYS = 28

# Wake time every sleep schedule is anchored to unless overridden
DEFAULT_WAKE_TIME = "07:00"

# Sane physiological ranges for profile fields (inclusive)
AGE_RANGE = (0, 120)
HEIGHT_CM_RANGE = (50.0, 272.0)
WEIGHT_KG_RANGE = (20.0, 650.0)

# Users at or above this age never get high-intensity sessions
SENIOR_AGE = 65
