"""Tests for DB-first credential lookup with env fallback."""

from collections.abc import AsyncIterator

import pytest

from worshipboard.application.services.app_settings_service import AppSettingsService
from worshipboard.application.services.credentials_service import (
    CLIENT_ID_KEY,
    CLIENT_SECRET_KEY,
    CredentialsService,
    DatabaseCredentialSource,
)
from worshipboard.config.settings import DatabaseSettings, PlanningCenterSettings
from worshipboard.infrastructure.persistence.database import Database


@pytest.fixture
async def database(tmp_path) -> AsyncIterator[Database]:
    db = Database(
        DatabaseSettings(_env_file=None, url=f"sqlite+aiosqlite:///{tmp_path}/test.db")
    )
    await db.create_tables()
    yield db
    await db.close()


@pytest.fixture
def env_settings() -> PlanningCenterSettings:
    return PlanningCenterSettings(
        _env_file=None, client_id="env-id", client_secret="env-secret"
    )


async def _store(database: Database, **values: str) -> None:
    async with database.session_scope() as session:
        settings_service = AppSettingsService(session)
        for key, value in values.items():
            await settings_service.set(key, value)


class TestAppSettingsService:
    async def test_get_string_default_when_missing(self, database):
        async with database.session_scope() as session:
            value = await AppSettingsService(session).get_string("nope", "fallback")

        assert value == "fallback"

    async def test_set_then_update(self, database):
        await _store(database, **{CLIENT_ID_KEY: "first"})
        await _store(database, **{CLIENT_ID_KEY: "second"})

        async with database.session_scope() as session:
            value = await AppSettingsService(session).get_string(CLIENT_ID_KEY)

        assert value == "second"

    async def test_get_many_skips_missing_keys(self, database):
        await _store(database, **{CLIENT_ID_KEY: "id"})

        async with database.session_scope() as session:
            values = await AppSettingsService(session).get_many(
                CLIENT_ID_KEY, CLIENT_SECRET_KEY
            )

        assert values == {CLIENT_ID_KEY: "id"}


class TestCredentialsService:
    async def test_database_values_win(self, database, env_settings):
        await _store(
            database, **{CLIENT_ID_KEY: "db-id", CLIENT_SECRET_KEY: "db-secret"}
        )

        async with database.session_scope() as session:
            credentials = await CredentialsService(
                session, fallback_settings=env_settings
            ).get_planning_center_credentials()

        assert credentials.application_id == "db-id"
        assert credentials.secret == "db-secret"

    async def test_env_fallback_per_value(self, database, env_settings):
        await _store(database, **{CLIENT_ID_KEY: "db-id"})

        async with database.session_scope() as session:
            credentials = await CredentialsService(
                session, fallback_settings=env_settings
            ).get_planning_center_credentials()

        assert credentials.application_id == "db-id"
        assert credentials.secret == "env-secret"

    async def test_absence_is_returned_not_raised(self, database):
        async with database.session_scope() as session:
            credentials = await CredentialsService(
                session
            ).get_planning_center_credentials()

        assert credentials.application_id == ""
        assert credentials.secret == ""
        assert credentials.is_configured() is False

    async def test_save_credentials(self, database):
        async with database.session_scope() as session:
            await CredentialsService(session).save_planning_center_credentials(
                "saved-id", "saved-secret"
            )

        async with database.session_scope() as session:
            credentials = await CredentialsService(
                session
            ).get_planning_center_credentials()

        assert credentials.application_id == "saved-id"
        assert credentials.secret == "saved-secret"


class TestDatabaseCredentialSource:
    async def test_opens_own_session(self, database, env_settings):
        await _store(database, **{CLIENT_SECRET_KEY: "db-secret"})
        source = DatabaseCredentialSource(database, fallback_settings=env_settings)

        credentials = await source.get_planning_center_credentials()

        assert credentials.application_id == "env-id"
        assert credentials.secret == "db-secret"

    def test_secret_not_in_repr(self, env_settings):
        from worshipboard.domain.ports import PlanningCenterCredentials

        credentials = PlanningCenterCredentials(application_id="id", secret="hunter2")

        assert "hunter2" not in repr(credentials)
