"""Domain enumerations for the task tracker.

Enums represent fixed sets of domain values (e.g. task status).
"""

from enum import Enum

_STATUS_DISPLAY_VALUES: dict[str, str] = {
    "PENDING": "Pending",
    "IN_PROGRESS": "In Progress",
    "COMPLETED": "Completed",
}


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Any status may move to any other; none is terminal. New tasks start
    as PENDING.
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @property
    def display_value(self) -> str:
        """Human-readable label (e.g. 'In Progress')."""
        return _STATUS_DISPLAY_VALUES[self.value]

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [status.value for status in cls]
