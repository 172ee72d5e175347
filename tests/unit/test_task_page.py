"""Tests for TaskPage metadata and TaskFilter emptiness."""

from datetime import datetime

import pytest

from tasktracker.application.dtos.task import TaskFilter, TaskPage, TaskResult
from tasktracker.domain.enums import TaskStatus


def _items(n: int) -> list[TaskResult]:
    at = datetime(2026, 1, 1)
    return [
        TaskResult(
            id=i,
            title=f"Task {i}",
            description=None,
            status=TaskStatus.PENDING,
            due_date=at,
            created_at=at,
            updated_at=at,
        )
        for i in range(1, n + 1)
    ]


@pytest.mark.parametrize(
    ("total", "size", "expected_pages"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (100, 100, 1)],
)
def test_total_pages_is_ceiling(total: int, size: int, expected_pages: int) -> None:
    page = TaskPage(content=[], number=0, size=size, total_elements=total)
    assert page.total_pages == expected_pages


def test_empty_listing() -> None:
    page = TaskPage(content=[], number=0, size=10, total_elements=0)
    assert page.empty is True
    assert page.first is True
    assert page.last is True
    assert page.number_of_elements == 0


def test_middle_page() -> None:
    page = TaskPage(content=_items(10), number=1, size=10, total_elements=25)
    assert page.first is False
    assert page.last is False
    assert page.number_of_elements == 10


def test_last_partial_page() -> None:
    page = TaskPage(content=_items(5), number=2, size=10, total_elements=25)
    assert page.last is True
    assert page.number_of_elements == 5


def test_page_past_the_end_is_last_but_not_empty() -> None:
    """empty reflects the whole listing; the page itself holds no items."""
    page = TaskPage(content=[], number=7, size=10, total_elements=25)
    assert page.last is True
    assert page.empty is False
    assert page.number_of_elements == 0


def test_filter_is_empty() -> None:
    assert TaskFilter().is_empty
    assert TaskFilter(search="  ").is_empty
    assert not TaskFilter(search="a").is_empty
    assert not TaskFilter(status=TaskStatus.COMPLETED).is_empty
    assert not TaskFilter(due_date_to=datetime(2026, 1, 1)).is_empty
