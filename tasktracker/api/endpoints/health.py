"""Health check endpoints, used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tasktracker.infrastructure.persistence.database import get_db
from tasktracker.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReadinessResponse:
    """Return 200 when the database answers a trivial query.

    Connection failures propagate to the generic handler (500).
    """
    await db.execute(text("SELECT 1"))
    return ReadinessResponse()
