"""Tests for the task listing predicate builders (no database)."""

from datetime import datetime

from sqlalchemy import true

from tasktracker.application.dtos.task import TaskFilter
from tasktracker.domain.enums import TaskStatus
from tasktracker.infrastructure.persistence.filters import (
    by_due_date_range,
    by_status,
    by_text,
    combine,
    escape_like,
    from_filter,
)


def test_escape_like_wildcards() -> None:
    assert escape_like("50%") == "50\\%"
    assert escape_like("a_b") == "a\\_b"


def test_escape_like_escapes_escape_char_first() -> None:
    """A literal backslash is doubled before wildcards are escaped."""
    assert escape_like("c:\\tmp_%") == "c:\\\\tmp\\_\\%"


def test_escape_like_plain_text_unchanged() -> None:
    assert escape_like("Review docs") == "Review docs"


def test_by_status_none_is_inactive() -> None:
    assert by_status(None) == []


def test_by_status_builds_one_clause() -> None:
    assert len(by_status(TaskStatus.COMPLETED)) == 1


def test_by_text_blank_terms_are_inactive() -> None:
    assert by_text(None) == []
    assert by_text("") == []
    assert by_text("   ") == []


def test_by_text_escapes_pattern_and_sets_escape_char() -> None:
    """Search term is wrapped in % and its own wildcards are escaped."""
    (clause,) = by_text("50%_off")
    compiled = clause.compile()
    assert "%50\\%\\_off%" in compiled.params.values()
    assert "ESCAPE" in str(compiled)


def test_by_text_matches_title_or_description() -> None:
    (clause,) = by_text("docs")
    sql = str(clause.compile())
    assert "task.title" in sql
    assert "task.description" in sql
    assert " OR " in sql


def test_by_due_date_range_bounds_are_independent() -> None:
    start = datetime(2026, 1, 1)
    end = datetime(2026, 1, 31, 23, 59, 59)
    assert by_due_date_range(None, None) == []
    assert len(by_due_date_range(start, None)) == 1
    assert len(by_due_date_range(None, end)) == 1
    assert len(by_due_date_range(start, end)) == 2


def test_due_date_range_is_inclusive() -> None:
    start = datetime(2026, 1, 1)
    end = datetime(2026, 1, 31)
    lower, upper = by_due_date_range(start, end)
    assert ">=" in str(lower.compile())
    assert "<=" in str(upper.compile())


def test_combine_without_criteria_matches_all() -> None:
    assert combine().compare(true())


def test_combine_ands_active_criteria() -> None:
    sql = str(
        combine(
            status=TaskStatus.PENDING,
            term="docs",
            due_date_from=datetime(2026, 1, 1),
        ).compile()
    )
    assert sql.count(" AND ") == 2
    assert "task.status" in sql
    assert "task.due_date >=" in sql


def test_combine_ignores_blank_search() -> None:
    clause = combine(status=TaskStatus.PENDING, term="  ")
    sql = str(clause.compile())
    assert "task.status" in sql
    assert "LIKE" not in sql.upper()


def test_from_filter_empty_filter_matches_all() -> None:
    assert TaskFilter().is_empty
    assert from_filter(TaskFilter()).compare(true())


def test_from_filter_uses_all_fields() -> None:
    task_filter = TaskFilter(
        status=TaskStatus.IN_PROGRESS,
        search="report",
        due_date_from=datetime(2026, 1, 1),
        due_date_to=datetime(2026, 2, 1),
    )
    assert not task_filter.is_empty
    sql = str(from_filter(task_filter).compile())
    assert "task.status" in sql
    assert "task.due_date >=" in sql
    assert "task.due_date <=" in sql


def test_from_filter_blank_search_only_matches_all() -> None:
    assert from_filter(TaskFilter(search="   ")).compare(true())
