"""Task API: thin routes delegating to TaskService."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from tasktracker.api.dependencies import get_task_service, get_task_service_for_write
from tasktracker.application.dtos.task import TaskFilter
from tasktracker.application.use_cases.tasks import TaskService
from tasktracker.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from tasktracker.core.limiter import limit_writes
from tasktracker.domain.enums import TaskStatus
from tasktracker.schemas.error import ErrorResponse
from tasktracker.schemas.task import (
    TaskCreateRequest,
    TaskPageResponse,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)
from tasktracker.shared.utils.datetime import to_naive_utc

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Validation failed"}}


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    responses={**_BAD_REQUEST},
)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Create a task. Status is always PENDING on creation."""
    created = await task_svc.create_task(
        title=body.title,
        description=body.description,
        due_date=body.due_date,
    )
    return TaskResponse.model_validate(created)


@router.get("", response_model=TaskPageResponse, responses={**_BAD_REQUEST})
async def list_tasks(
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    status: Annotated[TaskStatus | None, Query(description="Exact status")] = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive text in title or description"),
    ] = None,
    due_date_from: Annotated[
        datetime | None, Query(alias="dueDateFrom", description="Inclusive lower bound")
    ] = None,
    due_date_to: Annotated[
        datetime | None, Query(alias="dueDateTo", description="Inclusive upper bound")
    ] = None,
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = DEFAULT_PAGE,
    size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
):
    """List tasks with optional filters, ordered by due date (then id)."""
    task_filter = TaskFilter(
        status=status,
        search=search,
        due_date_from=to_naive_utc(due_date_from),
        due_date_to=to_naive_utc(due_date_to),
    )
    result = await task_svc.list_tasks(task_filter, page=page, size=size)
    return TaskPageResponse.model_validate(result)


@router.get("/{task_id}", response_model=TaskResponse, responses={**_NOT_FOUND})
async def get_task(
    task_id: int,
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Return a single task."""
    task = await task_svc.get_task(task_id)
    return TaskResponse.model_validate(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
@limit_writes
async def replace_task(
    request: Request,
    task_id: int,
    body: TaskUpdateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Replace title, description, due date and status of a task."""
    updated = await task_svc.replace_task(
        task_id=task_id,
        title=body.title,
        description=body.description,
        due_date=body.due_date,
        status=body.status,
    )
    return TaskResponse.model_validate(updated)


@router.patch(
    "/{task_id}/status",
    response_model=TaskResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
@limit_writes
async def update_task_status(
    request: Request,
    task_id: int,
    body: TaskStatusUpdateRequest,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Change only the status of a task."""
    updated = await task_svc.update_status(task_id=task_id, status=body.status)
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204, responses={**_NOT_FOUND})
@limit_writes
async def delete_task(
    request: Request,
    task_id: int,
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Delete a task permanently."""
    await task_svc.delete_task(task_id)
    return Response(status_code=204)
