"""Application layer: interfaces, DTOs, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from tasktracker.application.dtos import TaskFilter, TaskPage, TaskResult
from tasktracker.application.interfaces import ITaskRepository
from tasktracker.application.use_cases.tasks import TaskService

__all__ = [
    "ITaskRepository",
    "TaskFilter",
    "TaskPage",
    "TaskResult",
    "TaskService",
]
