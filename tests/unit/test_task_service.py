"""TaskService unit tests with a mocked repository."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from tasktracker.application.dtos.task import TaskFilter, TaskResult
from tasktracker.application.use_cases.tasks import TaskService
from tasktracker.domain.enums import TaskStatus
from tasktracker.domain.exceptions import TaskNotFoundException, ValidationException

NOW = datetime(2026, 1, 10, 8, 0, 0)
DUE = datetime(2026, 2, 15, 14, 30, 0)


def _task_result(
    task_id: int = 1,
    title: str = "Review documentation",
    status: TaskStatus = TaskStatus.PENDING,
) -> TaskResult:
    return TaskResult(
        id=task_id,
        title=title,
        description=None,
        status=status,
        due_date=DUE,
        created_at=NOW,
        updated_at=NOW,
    )


@pytest.fixture
def task_service_mocks():
    """TaskService with a mocked repo and a fixed clock."""
    task_repo = AsyncMock()
    svc = TaskService(task_repo, clock=lambda: NOW)
    return svc, task_repo


async def test_create_task_starts_pending_with_equal_timestamps(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.create_task = AsyncMock(return_value=_task_result())

    result = await svc.create_task(title="Review documentation", due_date=DUE)

    assert result.id == 1
    kwargs = task_repo.create_task.await_args.kwargs
    assert kwargs["status"] == TaskStatus.PENDING
    assert kwargs["description"] is None
    assert kwargs["created_at"] == NOW
    assert kwargs["updated_at"] == NOW


async def test_get_task_returns_task(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.get_by_id = AsyncMock(return_value=_task_result(task_id=7))

    result = await svc.get_task(7)

    assert result.id == 7
    task_repo.get_by_id.assert_awaited_once_with(7)


async def test_get_task_missing_raises_not_found(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.get_by_id = AsyncMock(return_value=None)

    with pytest.raises(TaskNotFoundException) as exc_info:
        await svc.get_task(999)

    assert exc_info.value.message == "Task not found with id: 999"
    assert exc_info.value.task_id == 999


async def test_replace_task_stamps_updated_at(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.replace_task = AsyncMock(
        return_value=_task_result(status=TaskStatus.COMPLETED)
    )

    result = await svc.replace_task(
        task_id=1,
        title="Review documentation",
        due_date=DUE,
        status=TaskStatus.COMPLETED,
    )

    assert result.status == TaskStatus.COMPLETED
    kwargs = task_repo.replace_task.await_args.kwargs
    assert kwargs["updated_at"] == NOW
    assert kwargs["description"] is None
    assert "created_at" not in kwargs


async def test_replace_task_missing_raises_not_found(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.replace_task = AsyncMock(return_value=None)

    with pytest.raises(TaskNotFoundException):
        await svc.replace_task(
            task_id=5, title="x", due_date=DUE, status=TaskStatus.PENDING
        )


async def test_update_status_passes_status_and_clock(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.update_status = AsyncMock(
        return_value=_task_result(status=TaskStatus.IN_PROGRESS)
    )

    result = await svc.update_status(1, TaskStatus.IN_PROGRESS)

    assert result.status == TaskStatus.IN_PROGRESS
    task_repo.update_status.assert_awaited_once_with(
        task_id=1, status=TaskStatus.IN_PROGRESS, updated_at=NOW
    )


async def test_update_status_missing_raises_not_found(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.update_status = AsyncMock(return_value=None)

    with pytest.raises(TaskNotFoundException):
        await svc.update_status(3, TaskStatus.COMPLETED)


async def test_delete_task(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.delete_task = AsyncMock(return_value=True)

    await svc.delete_task(1)

    task_repo.delete_task.assert_awaited_once_with(1)


async def test_delete_task_missing_raises_not_found(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.delete_task = AsyncMock(return_value=False)

    with pytest.raises(TaskNotFoundException):
        await svc.delete_task(42)


async def test_list_tasks_computes_offset(task_service_mocks) -> None:
    """Page 2 of size 10 skips 20 rows and reports page metadata."""
    svc, task_repo = task_service_mocks
    task_repo.count_filtered = AsyncMock(return_value=25)
    task_repo.find_filtered = AsyncMock(
        return_value=[_task_result(task_id=i) for i in range(21, 26)]
    )
    task_filter = TaskFilter(status=TaskStatus.PENDING)

    page = await svc.list_tasks(task_filter, page=2, size=10)

    task_repo.find_filtered.assert_awaited_once_with(task_filter, skip=20, limit=10)
    assert page.number == 2
    assert page.size == 10
    assert page.total_elements == 25
    assert page.total_pages == 3
    assert page.number_of_elements == 5
    assert page.last is True
    assert page.first is False


async def test_list_tasks_beyond_last_page_skips_fetch(task_service_mocks) -> None:
    """A page past the end is empty and does not query rows."""
    svc, task_repo = task_service_mocks
    task_repo.count_filtered = AsyncMock(return_value=3)
    task_repo.find_filtered = AsyncMock()

    page = await svc.list_tasks(None, page=5, size=10)

    task_repo.find_filtered.assert_not_awaited()
    assert page.content == []
    assert page.total_elements == 3
    assert page.empty is False


async def test_list_tasks_defaults_to_empty_filter(task_service_mocks) -> None:
    svc, task_repo = task_service_mocks
    task_repo.count_filtered = AsyncMock(return_value=0)

    page = await svc.list_tasks()

    task_repo.count_filtered.assert_awaited_once_with(TaskFilter())
    assert page.empty is True
    assert page.number == 0
    assert page.size == 10


@pytest.mark.parametrize(
    ("page", "size", "field"),
    [(-1, 10, "page"), (0, 0, "size")],
)
async def test_list_tasks_rejects_bad_paging(task_service_mocks, page, size, field) -> None:
    svc, _ = task_service_mocks

    with pytest.raises(ValidationException) as exc_info:
        await svc.list_tasks(page=page, size=size)

    assert exc_info.value.details == {"field": field}
