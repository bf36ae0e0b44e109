"""Dependency injection for API endpoints."""

import logging
from collections.abc import AsyncGenerator
from typing import cast

from fastapi import Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from worshipboard.application.services.credentials_service import CredentialsService
from worshipboard.application.services.planning_center_sync_service import (
    PlanningCenterSyncService,
)
from worshipboard.config import Settings, get_settings
from worshipboard.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    db: Database = request.app.state.db
    async with db.session_scope() as session:
        yield session


# Hey future me - the facade is built ONCE in the lifespan handler (see main.py) and
# lives on app.state. If it's missing, startup went wrong - 503, not 500.
def get_planning_center_service(request: Request) -> PlanningCenterSyncService:
    """Get the Planning Center sync facade from app state.

    Raises:
        HTTPException: 503 if the service was not set up at startup
    """
    if not hasattr(request.app.state, "planning_center"):
        raise HTTPException(
            status_code=503,
            detail="Planning Center service not available",
        )
    return cast(PlanningCenterSyncService, request.app.state.planning_center)


def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with (global settings otherwise)."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        return get_settings()
    return cast(Settings, settings)


# Yo, the env fallback must be the SAME one the lifespan handed to the client, so it
# comes from app.state (set by create_app) and not from the global get_settings().
async def get_credentials_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> CredentialsService:
    """Get CredentialsService with env fallback enabled."""
    return CredentialsService(session, fallback_settings=settings.planning_center)
