"""Task repository. Returns application DTOs; filtering and paging run in SQL."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.application.dtos.task import TaskFilter, TaskResult
from tasktracker.domain.enums import TaskStatus
from tasktracker.infrastructure.persistence.filters.task_filters import from_filter
from tasktracker.infrastructure.persistence.models.task import Task
from tasktracker.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        due_date=t.due_date,
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def get_by_id(self, task_id: int) -> TaskResult | None:
        orm = await super().get_by_id(task_id)
        return _to_result(orm) if orm else None

    async def create_task(
        self,
        title: str,
        description: str | None,
        due_date: datetime,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> TaskResult:
        """Insert a task and return the result DTO (id assigned by the database)."""
        task = Task(
            title=title,
            description=description,
            due_date=due_date,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
        created = await self.create(task)
        return _to_result(created)

    async def replace_task(
        self,
        task_id: int,
        title: str,
        description: str | None,
        due_date: datetime,
        status: TaskStatus,
        updated_at: datetime,
    ) -> TaskResult | None:
        """Overwrite the mutable fields; return None if the task does not exist."""
        entity = await super().get_by_id(task_id)
        if entity is None:
            return None
        entity.title = title
        entity.description = description
        entity.due_date = due_date
        entity.status = status
        entity.updated_at = updated_at
        updated = await self.update(entity)
        return _to_result(updated)

    async def update_status(
        self, task_id: int, status: TaskStatus, updated_at: datetime
    ) -> TaskResult | None:
        """Overwrite status only; return None if the task does not exist."""
        entity = await super().get_by_id(task_id)
        if entity is None:
            return None
        entity.status = status
        entity.updated_at = updated_at
        updated = await self.update(entity)
        return _to_result(updated)

    async def delete_task(self, task_id: int) -> bool:
        """Delete task; return False if it did not exist."""
        entity = await super().get_by_id(task_id)
        if entity is None:
            return False
        await self.delete(entity)
        return True

    async def count_filtered(self, task_filter: TaskFilter) -> int:
        """Return number of tasks matching the filter (single COUNT query)."""
        result = await self.db.execute(
            select(func.count(Task.id)).where(from_filter(task_filter))
        )
        return result.scalar() or 0

    async def find_filtered(
        self, task_filter: TaskFilter, skip: int, limit: int
    ) -> list[TaskResult]:
        """Return matching tasks ordered by due_date then id (stable tie-break)."""
        result = await self.db.execute(
            select(Task)
            .where(from_filter(task_filter))
            .order_by(Task.due_date.asc(), Task.id.asc())
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(t) for t in result.scalars().all()]
