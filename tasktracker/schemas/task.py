"""Task API schemas.

Wire names are camelCase (dueDate, statusDisplayValue, ...). Required fields
are declared optional with validate_default so a missing field produces the
same per-field message as an explicit null.
"""

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from tasktracker.core.constants import (
    DATETIME_FORMAT,
    DATETIME_FORMAT_DISPLAY,
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)
from tasktracker.domain.enums import TaskStatus

# strptime alone accepts unpadded fields such as 2026-2-5T1:2:3.
_WIRE_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")


def parse_wire_datetime(value: Any) -> datetime:
    """Parse yyyy-MM-ddTHH:mm:ss strictly (no fraction, no offset)."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and _WIRE_DATETIME_RE.fullmatch(value):
        try:
            return datetime.strptime(value, DATETIME_FORMAT)
        except ValueError:
            pass
    raise ValueError(f"Invalid date format. Expected format: {DATETIME_FORMAT_DISPLAY}")


def format_wire_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class _TaskFieldsMixin(_CamelModel):
    """title, description, dueDate shared by create and replace bodies."""

    title: str | None = Field(default=None, validate_default=True)
    description: str | None = Field(default=None)
    due_date: datetime | None = Field(
        default=None,
        validate_default=True,
        description=f"Due date, format {DATETIME_FORMAT_DISPLAY}",
        json_schema_extra={"example": "2026-02-15T14:30:00"},
    )

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise ValueError("Title is required")
        if len(v) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must not exceed {TITLE_MAX_LENGTH} characters")
        return v

    @field_validator("description")
    @classmethod
    def _description_length(cls, v: str | None) -> str | None:
        if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
            )
        return v

    @field_validator("due_date", mode="before")
    @classmethod
    def _due_date_format(cls, v: Any) -> datetime:
        if v is None:
            raise ValueError("Due date is required")
        return parse_wire_datetime(v)


def _validate_status(v: Any) -> Any:
    if v is None:
        raise ValueError("Status is required")
    if isinstance(v, TaskStatus) or (isinstance(v, str) and v in TaskStatus.values()):
        return v
    raise ValueError(f"Status must be one of: {', '.join(TaskStatus.values())}")


class TaskCreateRequest(_TaskFieldsMixin):
    """Request body for creating a task. Status is always PENDING on creation."""


class TaskUpdateRequest(_TaskFieldsMixin):
    """Request body for replacing a task (all fields)."""

    status: TaskStatus | None = Field(default=None, validate_default=True)

    @field_validator("status", mode="before")
    @classmethod
    def _status_required(cls, v: Any) -> Any:
        return _validate_status(v)


class TaskStatusUpdateRequest(_CamelModel):
    """Request body for PATCH /tasks/{id}/status."""

    status: TaskStatus | None = Field(default=None, validate_default=True)

    @field_validator("status", mode="before")
    @classmethod
    def _status_required(cls, v: Any) -> Any:
        return _validate_status(v)


class TaskResponse(_CamelModel):
    """Task representation."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    title: str
    description: str | None
    status: TaskStatus
    status_display_value: str
    due_date: datetime
    created_at: datetime
    updated_at: datetime

    @field_serializer("due_date", "created_at", "updated_at")
    def _serialize_datetime(self, value: datetime) -> str:
        return format_wire_datetime(value)


class TaskPageResponse(_CamelModel):
    """One page of tasks plus pagination metadata (number is zero-based)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    content: list[TaskResponse]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
