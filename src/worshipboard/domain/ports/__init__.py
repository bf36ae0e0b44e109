"""Domain ports (interfaces) for dependency inversion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PlanningCenterCredentials:
    """Planning Center Personal Access Token (application id + secret)."""

    application_id: str
    secret: str

    def is_configured(self) -> bool:
        """Check if credentials are complete."""
        return bool(
            self.application_id
            and self.application_id.strip()
            and self.secret
            and self.secret.strip()
        )

    def __repr__(self) -> str:
        # Never leak the secret into logs or tracebacks
        return f"PlanningCenterCredentials(application_id={self.application_id!r}, secret='***')"


# Hey future me, ICredentialSource is a PORT! The Planning Center client only knows
# "give me credentials" - whether they come from the settings table, env vars or a
# test fixture is the implementation's business. Returning incomplete credentials
# is VALID here; the client decides that this is a ConfigurationError.
class ICredentialSource(ABC):
    """Source of Planning Center credentials."""

    @abstractmethod
    async def get_planning_center_credentials(self) -> PlanningCenterCredentials:
        """Look up the configured application id and secret."""
        pass


__all__ = ["ICredentialSource", "PlanningCenterCredentials"]
