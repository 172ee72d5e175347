"""Query predicates built from optional listing criteria."""

from tasktracker.infrastructure.persistence.filters.task_filters import (
    by_due_date_range,
    by_status,
    by_text,
    combine,
    escape_like,
    from_filter,
)

__all__ = [
    "by_due_date_range",
    "by_status",
    "by_text",
    "combine",
    "escape_like",
    "from_filter",
]
