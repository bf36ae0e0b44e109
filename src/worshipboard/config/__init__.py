"""Configuration module for WorshipBoard."""

from .settings import (
    DatabaseSettings,
    ObservabilitySettings,
    PlanningCenterSettings,
    Settings,
    get_settings,
)

__all__ = [
    "DatabaseSettings",
    "ObservabilitySettings",
    "PlanningCenterSettings",
    "Settings",
    "get_settings",
]
