"""Persistence models: ORM entities and mixins."""

from tasktracker.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    TimestampMixin,
)
from tasktracker.infrastructure.persistence.models.task import Task

__all__ = [
    "IntegerIdMixin",
    "Task",
    "TimestampMixin",
]
