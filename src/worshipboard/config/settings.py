"""Application settings loaded from environment variables and .env files."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLANNING_CENTER_SERVICES_URL = "https://api.planningcenteronline.com/services/v2"
PLANNING_CENTER_PEOPLE_URL = "https://api.planningcenteronline.com/people/v2"


# Hey future me - these env values are only the FALLBACK! The Settings UI writes
# pc_client_id / pc_client_secret into the settings table and CredentialsService
# prefers those. Env vars keep working for headless deployments (Docker, CI).
class PlanningCenterSettings(BaseSettings):
    """Planning Center Online API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PLANNING_CENTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    client_id: str = Field(
        default="", description="Personal Access Token application ID"
    )
    client_secret: str = Field(
        default="", description="Personal Access Token secret"
    )
    api_base_url: str = Field(
        default=PLANNING_CENTER_SERVICES_URL,
        description="Base URL of the Services API",
    )
    people_api_base_url: str = Field(
        default=PLANNING_CENTER_PEOPLE_URL,
        description="Base URL of the People API (person lookups)",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout (s)")
    # Planning Center honours at most 100 per page - anything higher is clamped
    # on their side, so don't bother raising this.
    page_size: int = Field(default=100, ge=1, le=100)

    @field_validator("api_base_url", "people_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize base URLs so path joins never produce '//'."""
        return value.rstrip("/")


class DatabaseSettings(BaseSettings):
    """Database configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DATABASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./worshipboard.db",
        description="SQLAlchemy async database URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    pool_pre_ping: bool = Field(default=True)


class ObservabilitySettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(default="INFO", description="Root log level")
    json_format: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Reject unknown log levels early instead of silently using INFO."""
        upper = value.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return upper


class Settings(BaseSettings):
    """Root settings object aggregating all configuration groups."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="worshipboard")
    planning_center: PlanningCenterSettings = Field(
        default_factory=PlanningCenterSettings
    )
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    observability: ObservabilitySettings = Field(
        default_factory=ObservabilitySettings
    )


# Yo, lru_cache makes this a process-wide singleton. Tests that need different
# values should construct Settings(...) directly instead of patching env vars
# after the first call (or call get_settings.cache_clear()).
@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
