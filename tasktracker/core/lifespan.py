"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (logging, schema,
telemetry, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tasktracker.core.config import get_settings
from tasktracker.infrastructure.persistence import database
from tasktracker.shared.telemetry.logging import setup_logging
from tasktracker.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, schema creation (if enabled), SQLAlchemy
    instrumentation (when telemetry was set up in create_app).
    Shutdown order: telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    if settings.database_create_tables:
        await database.init_models()

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.instrument_sqlalchemy(database.get_engine())

    yield

    # ---- Shutdown ----
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)

    await database.dispose_engine()
