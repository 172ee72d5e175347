"""Task ORM model. The only persisted entity of the service."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tasktracker.core.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from tasktracker.domain.enums import TaskStatus
from tasktracker.infrastructure.persistence.database import Base
from tasktracker.infrastructure.persistence.models.mixins import (
    IntegerIdMixin,
    TimestampMixin,
)


class Task(IntegerIdMixin, TimestampMixin, Base):
    """Task row. Table: task."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True
    )
    status: Mapped[TaskStatus] = mapped_column(
        Enum(
            TaskStatus,
            name="task_status",
            native_enum=False,
            length=32,
            validate_strings=True,
        ),
        nullable=False,
        default=TaskStatus.PENDING,
        server_default=TaskStatus.PENDING.value,
    )
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    __table_args__ = (
        Index("ix_task_due_date_id", "due_date", "id"),
        Index("ix_task_status", "status"),
        # SQLite otherwise hands out max(id)+1 again after the newest row is deleted.
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Task id={self.id} status={self.status} due_date={self.due_date}>"
