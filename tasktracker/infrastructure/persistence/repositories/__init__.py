"""Persistence repositories. Re-exports for dependency injection."""

from tasktracker.infrastructure.persistence.repositories.base import BaseRepository
from tasktracker.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = [
    "BaseRepository",
    "TaskRepository",
]
