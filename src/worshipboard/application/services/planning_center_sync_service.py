"""Planning Center sync facade.

Hey future me - this is THE object the rest of WorshipBoard talks to for Planning
Center data! Routes and display code never touch PlanningCenterClient or the
fetchers directly.

What it does:
- owns one PlanningCenterClient (injected, so tests build isolated instances)
- checks ensure_initialized() before every call - no implicit init
- delegates to PlanningCenterResources and returns DTOs
- NO caching: every call is a fresh round trip. Caching policy belongs to the caller.
- NO error swallowing: ConfigurationError / NotInitializedError / ProviderError go
  straight up. The only designed "empty" answer is get_next_plan() -> None.
"""

import asyncio
import logging

from worshipboard.domain.dtos import (
    ItemDTO,
    PersonDTO,
    PlanDetails,
    PlanDTO,
    ResourceRecord,
    TeamMemberDTO,
)
from worshipboard.domain.ports import PlanningCenterCredentials
from worshipboard.infrastructure.integrations.planning_center_client import (
    PlanningCenterClient,
)
from worshipboard.infrastructure.integrations.planning_center_resources import (
    PlanningCenterResources,
)

logger = logging.getLogger(__name__)


class PlanningCenterSyncService:
    """Single entry point for fetching normalized Planning Center data."""

    def __init__(self, client: PlanningCenterClient) -> None:
        """
        Args:
            client: The Planning Center client this facade owns
        """
        self._client = client
        self._resources = PlanningCenterResources(client, client.settings)

    @property
    def is_initialized(self) -> bool:
        return self._client.is_initialized

    async def initialize(
        self, credentials: PlanningCenterCredentials | None = None
    ) -> None:
        """Authenticate against Planning Center (explicit or stored credentials)."""
        await self._client.initialize(credentials)

    async def close(self) -> None:
        await self._client.close()

    async def get_next_plan(self, service_type_id: str) -> PlanDTO | None:
        self._client.ensure_initialized()
        return await self._resources.get_next_plan(service_type_id)

    async def get_plan_team_members(
        self, plan_id: str, service_type_id: str | None = None
    ) -> list[TeamMemberDTO]:
        self._client.ensure_initialized()
        return await self._resources.get_plan_team_members(plan_id, service_type_id)

    async def get_person(self, person_id: str) -> PersonDTO:
        self._client.ensure_initialized()
        return await self._resources.get_person(person_id)

    async def get_plan_items(
        self, plan_id: str, service_type_id: str | None = None
    ) -> list[ItemDTO]:
        self._client.ensure_initialized()
        return await self._resources.get_plan_items(plan_id, service_type_id)

    async def get_all_positions(self, service_type_id: str) -> list[ResourceRecord]:
        self._client.ensure_initialized()
        return await self._resources.get_all_positions(service_type_id)

    async def get_all_service_types(self) -> list[ResourceRecord]:
        self._client.ensure_initialized()
        return await self._resources.get_all_service_types()

    async def get_all_folders(self) -> list[ResourceRecord]:
        self._client.ensure_initialized()
        return await self._resources.get_all_folders()

    # Listen, team and items are independent requests against the same read-only
    # handle, so they run concurrently. If either fails, gather() re-raises it.
    async def get_plan_details(
        self, plan_id: str, service_type_id: str | None = None
    ) -> PlanDetails:
        """
        Get team members and setlist of one plan.

        Args:
            plan_id: Planning Center plan id
            service_type_id: Use the service-type scoped paths when known

        Returns:
            PlanDetails without the plan record itself
        """
        self._client.ensure_initialized()
        team_members, items = await asyncio.gather(
            self._resources.get_plan_team_members(plan_id, service_type_id),
            self._resources.get_plan_items(plan_id, service_type_id),
        )
        return PlanDetails(plan=None, team_members=team_members, items=items)

    async def get_next_plan_details(self, service_type_id: str) -> PlanDetails:
        """
        Get the next plan of a service type plus its team and setlist.

        This is what the live display of one location shows.

        Returns:
            PlanDetails; plan is None (and lists empty) if nothing is upcoming
        """
        plan = await self.get_next_plan(service_type_id)
        if plan is None:
            return PlanDetails()

        details = await self.get_plan_details(plan.id, plan.service_type_id)
        logger.info(
            "Loaded plan %s for service type %s (%d team members, %d items)",
            plan.id,
            service_type_id,
            len(details.team_members),
            len(details.items),
        )
        return PlanDetails(
            plan=plan, team_members=details.team_members, items=details.items
        )
