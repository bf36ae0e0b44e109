"""Persistence layer."""

from worshipboard.infrastructure.persistence.database import Database
from worshipboard.infrastructure.persistence.models import AppSettingModel, Base

__all__ = ["AppSettingModel", "Base", "Database"]
