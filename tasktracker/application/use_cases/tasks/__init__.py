"""Task use cases."""

from tasktracker.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]
