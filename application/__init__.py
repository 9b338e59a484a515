"""
Application Layer for the Plan API.

This package contains:
- ports/: Repository interfaces (what the use cases need)
- use_cases/: Workflows coordinating the plan engine and repositories
- exceptions: Errors shared with the infrastructure layer
"""
