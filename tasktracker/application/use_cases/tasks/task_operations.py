"""Task operations: create, get, replace, update status, delete, list (delegate to ITaskRepository)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from tasktracker.application.dtos.task import TaskFilter, TaskPage, TaskResult
from tasktracker.application.interfaces.repositories import ITaskRepository
from tasktracker.domain.enums import TaskStatus
from tasktracker.domain.exceptions import TaskNotFoundException, ValidationException
from tasktracker.shared.telemetry.logging import get_logger
from tasktracker.shared.telemetry.tracing import add_span_attributes, traced
from tasktracker.shared.utils.datetime import utc_now

logger = get_logger(__name__)


class TaskService:
    """Business rules for tasks: not-found semantics, timestamps, initial status.

    Input shape (required fields, lengths, date format) is validated by the
    API schemas before reaching this layer.
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self._clock = clock

    @traced("task.create")
    async def create_task(
        self,
        title: str,
        due_date: datetime,
        description: str | None = None,
    ) -> TaskResult:
        """Create a task with status PENDING and created_at == updated_at."""
        logger.info("Creating task with title: %s", title)
        now = self._clock()
        created = await self.task_repo.create_task(
            title=title,
            description=description,
            due_date=due_date,
            status=TaskStatus.PENDING,
            created_at=now,
            updated_at=now,
        )
        logger.info("Task created successfully with ID: %s", created.id)
        return created

    @traced("task.get")
    async def get_task(self, task_id: int) -> TaskResult:
        """Return task by id; raise TaskNotFoundException if absent."""
        logger.debug("Fetching task with ID: %s", task_id)
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            logger.warning("Task not found with ID: %s", task_id)
            raise TaskNotFoundException(task_id)
        return task

    @traced("task.replace")
    async def replace_task(
        self,
        task_id: int,
        title: str,
        due_date: datetime,
        status: TaskStatus,
        description: str | None = None,
    ) -> TaskResult:
        """Overwrite title, description, due_date and status; created_at is kept."""
        logger.info("Updating task ID: %s", task_id)
        updated = await self.task_repo.replace_task(
            task_id=task_id,
            title=title,
            description=description,
            due_date=due_date,
            status=status,
            updated_at=self._clock(),
        )
        if updated is None:
            logger.warning("Attempted to update non-existent task with ID: %s", task_id)
            raise TaskNotFoundException(task_id)
        logger.info("Task updated successfully for ID: %s", task_id)
        return updated

    @traced("task.update_status")
    async def update_status(self, task_id: int, status: TaskStatus) -> TaskResult:
        """Overwrite status only; raise TaskNotFoundException if absent."""
        logger.info("Updating status for task ID: %s to %s", task_id, status.value)
        updated = await self.task_repo.update_status(
            task_id=task_id,
            status=status,
            updated_at=self._clock(),
        )
        if updated is None:
            logger.warning(
                "Attempted to update status of non-existent task with ID: %s", task_id
            )
            raise TaskNotFoundException(task_id)
        logger.info("Task status updated successfully for ID: %s", task_id)
        return updated

    @traced("task.delete")
    async def delete_task(self, task_id: int) -> None:
        """Delete task permanently; raise TaskNotFoundException if absent."""
        logger.info("Deleting task with ID: %s", task_id)
        deleted = await self.task_repo.delete_task(task_id)
        if not deleted:
            logger.warning("Attempted to delete non-existent task with ID: %s", task_id)
            raise TaskNotFoundException(task_id)
        logger.info("Task deleted successfully with ID: %s", task_id)

    @traced("task.list")
    async def list_tasks(
        self,
        task_filter: TaskFilter | None = None,
        page: int = 0,
        size: int = 10,
    ) -> TaskPage:
        """Return one page of tasks matching the filter, ordered by due_date then id.

        Counting and slicing happen in the store; at most `size` rows are loaded.
        """
        if page < 0:
            raise ValidationException("Page index must not be less than zero", field="page")
        if size < 1:
            raise ValidationException("Page size must not be less than one", field="size")
        task_filter = task_filter or TaskFilter()
        logger.debug(
            "Fetching tasks with filters - status: %s, search: %s, dueDateFrom: %s, dueDateTo: %s, page: %s",
            task_filter.status,
            task_filter.search,
            task_filter.due_date_from,
            task_filter.due_date_to,
            page,
        )
        total = await self.task_repo.count_filtered(task_filter)
        content: list[TaskResult] = []
        if total > page * size:
            content = await self.task_repo.find_filtered(
                task_filter, skip=page * size, limit=size
            )
        result = TaskPage(content=content, number=page, size=size, total_elements=total)
        add_span_attributes(total_elements=total, page=page)
        logger.debug(
            "Found %d tasks (page %d of %d)",
            result.number_of_elements,
            page + 1,
            result.total_pages,
        )
        return result
