"""Tests for TaskStatus values and display labels."""

import pytest

from tasktracker.domain.enums import TaskStatus


def test_values_in_declaration_order() -> None:
    assert TaskStatus.values() == ["PENDING", "IN_PROGRESS", "COMPLETED"]


@pytest.mark.parametrize(
    ("status", "label"),
    [
        (TaskStatus.PENDING, "Pending"),
        (TaskStatus.IN_PROGRESS, "In Progress"),
        (TaskStatus.COMPLETED, "Completed"),
    ],
)
def test_display_value(status: TaskStatus, label: str) -> None:
    assert status.display_value == label


def test_status_from_wire_value() -> None:
    assert TaskStatus("IN_PROGRESS") is TaskStatus.IN_PROGRESS
    with pytest.raises(ValueError):
        TaskStatus("In Progress")
