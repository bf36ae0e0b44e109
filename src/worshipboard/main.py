"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from worshipboard import __version__
from worshipboard.api.exception_handlers import register_exception_handlers
from worshipboard.api.routers import planning_center_router
from worshipboard.application.services.credentials_service import (
    DatabaseCredentialSource,
)
from worshipboard.application.services.planning_center_sync_service import (
    PlanningCenterSyncService,
)
from worshipboard.config import Settings, get_settings
from worshipboard.domain.exceptions import ConfigurationError
from worshipboard.infrastructure.integrations.planning_center_client import (
    PlanningCenterClient,
)
from worshipboard.infrastructure.observability import (
    RequestLoggingMiddleware,
    configure_logging,
)
from worshipboard.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the WorshipBoard API application.

    Args:
        settings: Explicit settings (tests); defaults to get_settings()
    """
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.observability.level,
        json_format=settings.observability.json_format,
        app_name=settings.app_name,
    )

    # Hey future me - a fresh install has no credentials yet. That must NOT crash
    # startup: the admin opens Settings, saves the PAT and POSTs /initialize. Until
    # then every Planning Center route answers 409 (not initialized).
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = Database(settings.database)
        client = PlanningCenterClient(
            settings.planning_center,
            credential_source=DatabaseCredentialSource(
                db, fallback_settings=settings.planning_center
            ),
        )
        service = PlanningCenterSyncService(client)
        await db.create_tables()
        app.state.db = db
        app.state.planning_center = service

        try:
            await service.initialize()
        except ConfigurationError as e:
            logger.warning("Planning Center not initialized at startup: %s", e.message)

        try:
            yield
        finally:
            await service.close()
            await db.close()
            logger.info("WorshipBoard shut down")

    app = FastAPI(title="WorshipBoard", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(planning_center_router, prefix="/api")
    return app
