"""Pydantic request/response schemas for the API."""

from tasktracker.schemas.error import ErrorResponse
from tasktracker.schemas.health import HealthResponse, ReadinessResponse
from tasktracker.schemas.task import (
    TaskCreateRequest,
    TaskPageResponse,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ReadinessResponse",
    "TaskCreateRequest",
    "TaskPageResponse",
    "TaskResponse",
    "TaskStatusUpdateRequest",
    "TaskUpdateRequest",
]
