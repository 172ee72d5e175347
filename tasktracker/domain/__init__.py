"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from tasktracker.domain.enums import TaskStatus
from tasktracker.domain.exceptions import (
    ResourceNotFoundException,
    TaskNotFoundException,
    TaskTrackerException,
    ValidationException,
)

__all__ = [
    # Enums
    "TaskStatus",
    # Exceptions
    "ResourceNotFoundException",
    "TaskNotFoundException",
    "TaskTrackerException",
    "ValidationException",
]
