"""Application services."""

from worshipboard.application.services.app_settings_service import AppSettingsService
from worshipboard.application.services.credentials_service import (
    CredentialsService,
    DatabaseCredentialSource,
)
from worshipboard.application.services.planning_center_sync_service import (
    PlanningCenterSyncService,
)

__all__ = [
    "AppSettingsService",
    "CredentialsService",
    "DatabaseCredentialSource",
    "PlanningCenterSyncService",
]
