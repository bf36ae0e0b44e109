"""Credentials Service - Database-first credential management.

Hey future me - this is where Planning Center credentials come from!

Pattern:
1. Check the settings table (DB) first: pc_client_id / pc_client_secret
2. Fall back to environment variables (PLANNING_CENTER_CLIENT_ID / _SECRET)
3. Settings UI saves to DB, making it the primary source

Missing values are NOT an error here - we hand back whatever we found and the
Planning Center client raises ConfigurationError if it's incomplete.

Usage:
    credentials = CredentialsService(session, fallback_settings=settings.planning_center)
    pc = await credentials.get_planning_center_credentials()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worshipboard.application.services.app_settings_service import AppSettingsService
from worshipboard.domain.ports import ICredentialSource, PlanningCenterCredentials

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from worshipboard.config.settings import PlanningCenterSettings
    from worshipboard.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)

CLIENT_ID_KEY = "pc_client_id"
CLIENT_SECRET_KEY = "pc_client_secret"


class CredentialsService(ICredentialSource):
    """Service for fetching credentials from DB with env fallback.

    The fallback_settings parameter is optional. If not provided,
    only DB values are used.
    """

    def __init__(
        self,
        session: AsyncSession,
        fallback_settings: PlanningCenterSettings | None = None,
    ) -> None:
        """Initialize credentials service.

        Args:
            session: Database session for settings queries
            fallback_settings: Optional Planning Center settings for .env fallback
        """
        self._settings_service = AppSettingsService(session)
        self._fallback = fallback_settings

    async def get_planning_center_credentials(self) -> PlanningCenterCredentials:
        """Get Planning Center Personal Access Token credentials.

        Checks DB first, falls back to env vars per value if DB is empty.

        Returns:
            PlanningCenterCredentials (possibly incomplete)
        """
        stored = await self._settings_service.get_many(CLIENT_ID_KEY, CLIENT_SECRET_KEY)
        application_id = stored.get(CLIENT_ID_KEY, "")
        secret = stored.get(CLIENT_SECRET_KEY, "")

        if not application_id and self._fallback:
            application_id = self._fallback.client_id
            if application_id:
                logger.debug("Planning Center client_id loaded from env (DB empty)")
        if not secret and self._fallback:
            secret = self._fallback.client_secret
            if secret:
                logger.debug("Planning Center client_secret loaded from env (DB empty)")

        return PlanningCenterCredentials(application_id=application_id, secret=secret)

    async def save_planning_center_credentials(
        self, application_id: str, secret: str
    ) -> None:
        """Save Planning Center credentials to database.

        Args:
            application_id: Personal Access Token application ID
            secret: Personal Access Token secret
        """
        await self._settings_service.set(CLIENT_ID_KEY, application_id)
        await self._settings_service.set(CLIENT_SECRET_KEY, secret)
        logger.info("Planning Center credentials saved to database")


# Yo, the Planning Center client lives for the whole process but DB sessions don't.
# This adapter opens a fresh session per lookup so the client can hold on to it.
class DatabaseCredentialSource(ICredentialSource):
    """Credential source that opens its own session for every lookup."""

    def __init__(
        self,
        database: Database,
        fallback_settings: PlanningCenterSettings | None = None,
    ) -> None:
        self._database = database
        self._fallback = fallback_settings

    async def get_planning_center_credentials(self) -> PlanningCenterCredentials:
        async with self._database.session_scope() as session:
            service = CredentialsService(session, fallback_settings=self._fallback)
            return await service.get_planning_center_credentials()
