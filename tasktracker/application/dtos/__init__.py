"""Application DTOs (no ORM dependency)."""

from tasktracker.application.dtos.task import TaskFilter, TaskPage, TaskResult

__all__ = [
    "TaskFilter",
    "TaskPage",
    "TaskResult",
]
