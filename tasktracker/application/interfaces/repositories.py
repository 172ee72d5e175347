"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain enums only; no infrastructure imports.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

from tasktracker.domain.enums import TaskStatus

if TYPE_CHECKING:
    from tasktracker.application.dtos.task import TaskFilter, TaskResult


class ITaskRepository(Protocol):
    """Protocol for the task store (DIP).

    Write methods return None when the task does not exist; the service
    turns that into TaskNotFoundException.
    """

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        """Return task by id, or None."""

    async def create_task(
        self,
        title: str,
        description: str | None,
        due_date: datetime,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> TaskResult:
        """Insert a task; id is assigned by the store."""

    async def replace_task(
        self,
        task_id: int,
        title: str,
        description: str | None,
        due_date: datetime,
        status: TaskStatus,
        updated_at: datetime,
    ) -> TaskResult | None:
        """Overwrite title, description, due_date, status and updated_at."""

    async def update_status(
        self, task_id: int, status: TaskStatus, updated_at: datetime
    ) -> TaskResult | None:
        """Overwrite status and updated_at only."""

    async def delete_task(self, task_id: int) -> bool:
        """Delete task permanently. Return False if it did not exist."""

    async def count_filtered(self, task_filter: TaskFilter) -> int:
        """Return number of tasks matching the filter."""

    async def find_filtered(
        self, task_filter: TaskFilter, skip: int, limit: int
    ) -> list[TaskResult]:
        """Return one slice of matching tasks ordered by due_date, then id."""
