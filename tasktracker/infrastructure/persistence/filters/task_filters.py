"""Composable SQL predicates for task listings.

Each builder takes one optional criterion and returns a list of clauses:
empty when the criterion is absent, so inactive criteria never narrow the
result. combine() ANDs whatever is active; with nothing active it yields
true(), i.e. match all.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import ColumnElement, and_, or_, true

from tasktracker.application.dtos.task import TaskFilter
from tasktracker.domain.enums import TaskStatus
from tasktracker.infrastructure.persistence.models.task import Task

LIKE_ESCAPE_CHAR = "\\"


def escape_like(term: str, escape_char: str = LIKE_ESCAPE_CHAR) -> str:
    """Escape LIKE wildcards so % and _ (and the escape char itself) match literally."""
    return (
        term.replace(escape_char, escape_char * 2)
        .replace("%", f"{escape_char}%")
        .replace("_", f"{escape_char}_")
    )


def by_status(status: TaskStatus | None) -> list[ColumnElement[bool]]:
    """Exact status match, or no constraint when status is None."""
    if status is None:
        return []
    return [Task.status == status]


def by_text(term: str | None) -> list[ColumnElement[bool]]:
    """Case-insensitive substring match on title OR description.

    None, empty and whitespace-only terms contribute no constraint. The term
    itself is used as given (not stripped). Rows with a NULL description can
    still match on title.
    """
    if term is None or not term.strip():
        return []
    pattern = f"%{escape_like(term)}%"
    return [
        or_(
            Task.title.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
            Task.description.ilike(pattern, escape=LIKE_ESCAPE_CHAR),
        )
    ]


def by_due_date_range(
    due_date_from: datetime | None, due_date_to: datetime | None
) -> list[ColumnElement[bool]]:
    """Inclusive due_date bounds; each bound is independently optional."""
    clauses: list[ColumnElement[bool]] = []
    if due_date_from is not None:
        clauses.append(Task.due_date >= due_date_from)
    if due_date_to is not None:
        clauses.append(Task.due_date <= due_date_to)
    return clauses


def combine(
    status: TaskStatus | None = None,
    term: str | None = None,
    due_date_from: datetime | None = None,
    due_date_to: datetime | None = None,
) -> ColumnElement[bool]:
    """AND of every active criterion; true() when none is active."""
    clauses = [
        *by_status(status),
        *by_text(term),
        *by_due_date_range(due_date_from, due_date_to),
    ]
    if not clauses:
        return true()
    return and_(*clauses)


def from_filter(task_filter: TaskFilter) -> ColumnElement[bool]:
    """Build the combined predicate from a TaskFilter DTO."""
    if task_filter.is_empty:
        return true()
    return combine(
        status=task_filter.status,
        term=task_filter.search,
        due_date_from=task_filter.due_date_from,
        due_date_to=task_filter.due_date_to,
    )
