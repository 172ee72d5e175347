"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and the task service.
Routes depend only on these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.application.use_cases.tasks import TaskService
from tasktracker.infrastructure.persistence.database import get_db, get_db_transactional
from tasktracker.infrastructure.persistence.repositories import TaskRepository


async def get_task_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskService:
    """Task service for read operations (get, list)."""
    return TaskService(TaskRepository(db))


async def get_task_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TaskService:
    """Task service for create/replace/status/delete (one transaction per request)."""
    return TaskService(TaskRepository(db))
