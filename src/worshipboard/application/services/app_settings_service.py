"""Key/value access to the settings table."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from worshipboard.infrastructure.persistence.models import AppSettingModel

logger = logging.getLogger(__name__)


class AppSettingsService:
    """Read and write string settings stored in the database."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_string(self, key: str, default: str = "") -> str:
        """
        Get a setting value.

        Args:
            key: Setting key, e.g. "pc_client_id"
            default: Returned when the key is missing or NULL

        Returns:
            The stored value or default
        """
        result = await self._session.execute(
            select(AppSettingModel.value).where(AppSettingModel.key == key)
        )
        value = result.scalar_one_or_none()
        return value if value is not None else default

    async def get_many(self, *keys: str) -> dict[str, str]:
        """Get several settings in one query (missing keys are left out)."""
        result = await self._session.execute(
            select(AppSettingModel.key, AppSettingModel.value).where(
                AppSettingModel.key.in_(keys)
            )
        )
        return {key: value for key, value in result.all() if value is not None}

    async def set(self, key: str, value: str) -> None:
        """Insert or update a setting (flushed, committed by the session scope)."""
        setting = await self._session.get(AppSettingModel, key)
        if setting is None:
            self._session.add(AppSettingModel(key=key, value=value))
        else:
            setting.value = value
        await self._session.flush()
        logger.debug("Setting %s updated", key)
