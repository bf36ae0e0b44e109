"""Planning Center Online HTTP client.

Hey future me - this client owns exactly ONE authenticated httpx.AsyncClient (the
"handle"). It does nothing until initialize() is called - no lazy init on first
fetch! Every request method goes through ensure_initialized() and raises
NotInitializedError if you forgot.

Auth is a Personal Access Token: HTTP Basic with the application id as username and
the secret as password. No OAuth dance, no token refresh.

Usage:
    client = PlanningCenterClient(settings.planning_center, credentials_source)
    await client.initialize()  # resolves credentials from the source
    document = await client.get("/service_types", params={"per_page": 100})
    await client.close()
"""

import logging
from typing import Any, cast

import httpx

from worshipboard.config.settings import PlanningCenterSettings
from worshipboard.domain.exceptions import (
    ConfigurationError,
    NotInitializedError,
    ProviderError,
)
from worshipboard.domain.ports import ICredentialSource, PlanningCenterCredentials

logger = logging.getLogger(__name__)


class PlanningCenterClient:
    """Authenticated binding to the Planning Center API."""

    def __init__(
        self,
        settings: PlanningCenterSettings,
        credential_source: ICredentialSource | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Planning Center client (does NOT authenticate yet).

        Args:
            settings: Planning Center configuration settings
            credential_source: Where to look up credentials when initialize()
                is called without explicit ones
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.settings = settings
        self._credential_source = credential_source
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    # Listen up, initialize() is re-entrant: a second call builds a NEW handle and closes
    # the old one, so settings-screen changes take effect without a restart. It is the only
    # thing that mutates shared state here. Two concurrent initialize() calls are NOT
    # ordered - last one wins. Serialize them in the caller if that matters.
    async def initialize(
        self, credentials: PlanningCenterCredentials | None = None
    ) -> None:
        """
        Build the authenticated HTTP binding.

        Args:
            credentials: Explicit credentials. If None or incomplete, they are
                resolved from the credential source.

        Raises:
            ConfigurationError: If no complete credentials are available
        """
        if (
            credentials is None or not credentials.is_configured()
        ) and self._credential_source is not None:
            credentials = await self._credential_source.get_planning_center_credentials()
            logger.debug("Planning Center credentials resolved from credential source")

        if credentials is None or not credentials.is_configured():
            raise ConfigurationError(
                "Planning Center Personal Access Token credentials not configured. "
                "Please configure Application ID and Secret in Settings."
            )

        new_client = httpx.AsyncClient(
            base_url=self.settings.api_base_url,
            auth=httpx.BasicAuth(credentials.application_id, credentials.secret),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=self.settings.timeout,
            transport=self._transport,
        )

        previous, self._client = self._client, new_client
        if previous is not None:
            await previous.aclose()
            logger.info("Planning Center client re-initialized (previous handle closed)")
        else:
            logger.info(
                "Planning Center client initialized (base_url=%s)",
                self.settings.api_base_url,
            )

    def ensure_initialized(self) -> httpx.AsyncClient:
        """
        Return the current handle or fail.

        Raises:
            NotInitializedError: If initialize() has not succeeded yet
        """
        if self._client is None:
            raise NotInitializedError()
        return self._client

    # Yo, absolute URLs are passed straight through - httpx only applies base_url to
    # relative paths. That's how People lookups reach /people/v2 with the same auth.
    async def get(
        self, resource: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        GET a Planning Center resource and return the decoded JSON:API document.

        Args:
            resource: Path relative to the Services base URL, or an absolute URL
            params: Query parameters, passed through unmodified

        Returns:
            The response document ({"data": ..., "included": [...], ...})

        Raises:
            NotInitializedError: If the client is not initialized
            ProviderError: On any non-2xx response or transport failure
        """
        client = self.ensure_initialized()

        try:
            response = await client.get(resource, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(
                "Planning Center returned %d for %s",
                status_code,
                resource,
                extra={"status_code": status_code, "resource": resource},
            )
            raise ProviderError(
                f"Planning Center API error: {status_code} for {resource}",
                status_code=status_code,
                resource=resource,
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Planning Center request failed for %s: %s",
                resource,
                e,
                extra={"resource": resource, "error_type": type(e).__name__},
            )
            raise ProviderError(
                f"Planning Center request failed for {resource}: {e}",
                resource=resource,
            ) from e

        try:
            return cast(dict[str, Any], response.json())
        except ValueError as e:
            raise ProviderError(
                f"Planning Center returned invalid JSON for {resource}",
                status_code=response.status_code,
                resource=resource,
            ) from e

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "PlanningCenterClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
