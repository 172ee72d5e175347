"""DTOs for tasks, listing filters, and result pages (no dependency on ORM)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from tasktracker.domain.enums import TaskStatus


@dataclass(frozen=True)
class TaskResult:
    """Task as returned by the store and the service."""

    id: int
    title: str
    description: str | None
    status: TaskStatus
    due_date: datetime
    created_at: datetime
    updated_at: datetime

    @property
    def status_display_value(self) -> str:
        return self.status.display_value


@dataclass(frozen=True)
class TaskFilter:
    """Optional listing criteria. An empty filter matches every task."""

    status: TaskStatus | None = None
    search: str | None = None
    due_date_from: datetime | None = None
    due_date_to: datetime | None = None

    @property
    def is_empty(self) -> bool:
        return (
            self.status is None
            and not (self.search and self.search.strip())
            and self.due_date_from is None
            and self.due_date_to is None
        )


@dataclass(frozen=True)
class TaskPage:
    """One page of a filtered, sorted task listing plus position metadata.

    number is zero-based; size is the requested page size (not the number
    of items on this page, see number_of_elements).
    """

    content: list[TaskResult]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def first(self) -> bool:
        return self.number == 0

    @property
    def last(self) -> bool:
        return self.number >= self.total_pages - 1

    @property
    def empty(self) -> bool:
        return self.total_elements == 0
