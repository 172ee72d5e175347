"""Application use cases: one entry point per workflow."""

from tasktracker.application.use_cases.tasks import TaskService

__all__ = [
    "TaskService",
]
