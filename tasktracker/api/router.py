"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from tasktracker.api.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from tasktracker.api.endpoints import health, tasks

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
