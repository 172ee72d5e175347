"""Seed sample tasks for local development.

Creates the task table if missing, then inserts tasks from a JSON file
(list of {"title", "description"?, "dueDate", "status"?}) or, without a
path, a small built-in sample. Tasks go through TaskService so timestamps
and the initial PENDING status are applied as in the API; a non-PENDING
"status" is applied afterwards with update_status.

Usage:
    python -m scripts.seed_tasks [path/to/tasks.json]

Requires: DATABASE_URL (any SQLAlchemy async URL).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from tasktracker.application.use_cases.tasks import TaskService
from tasktracker.domain.enums import TaskStatus
from tasktracker.infrastructure.persistence import database as db_mod
from tasktracker.infrastructure.persistence.repositories import TaskRepository
from tasktracker.schemas.task import parse_wire_datetime

SAMPLE_TASKS: list[dict[str, Any]] = [
    {
        "title": "Review documentation",
        "description": "Check the API guide for outdated examples",
        "dueDate": "2026-02-15T14:30:00",
    },
    {
        "title": "Prepare hearing bundle",
        "description": None,
        "dueDate": "2026-01-20T09:00:00",
        "status": "IN_PROGRESS",
    },
    {
        "title": "Archive closed cases",
        "description": "Move 2025 cases to cold storage",
        "dueDate": "2026-01-22T17:00:00",
        "status": "COMPLETED",
    },
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=False)


def _load_tasks(path: Path | None) -> list[dict[str, Any]]:
    if path is None:
        return SAMPLE_TASKS
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of tasks")
    return data


async def run(path: Path | None) -> None:
    tasks = _load_tasks(path)
    await db_mod.init_models()
    db_mod._ensure_engine()
    assert db_mod.AsyncSessionLocal is not None

    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            svc = TaskService(TaskRepository(session))
            for item in tasks:
                created = await svc.create_task(
                    title=item["title"],
                    description=item.get("description"),
                    due_date=parse_wire_datetime(item["dueDate"]),
                )
                status = TaskStatus(item.get("status", TaskStatus.PENDING.value))
                if status is not TaskStatus.PENDING:
                    await svc.update_status(created.id, status)
                print(f"  Created task {created.id}: {created.title} ({status.value})")

    await db_mod.dispose_engine()
    print(f"Seed completed: {len(tasks)} task(s).")


def main() -> None:
    _load_env()
    path_arg = sys.argv[1] if len(sys.argv) > 1 else None
    path = Path(path_arg).resolve() if path_arg else None
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
