"""Resource fetchers for the Planning Center Services and People APIs.

Hey future me - one coroutine per resource kind. Each knows its path template, its
filter/order/include params and its page cap. Params go to Planning Center exactly
as written here; their query grammar (filter=future, order=sort_date, ...) is theirs.

PAGINATION: we ask for ONE page of page_size (max 100) and stop. A plan with 120
team members shows 100. If you need everything, add "links.next" continuation
here and nowhere else.

Ordering is whatever Planning Center returns for the requested "order". Never
re-sort in here.
"""

import logging
from typing import Any

from worshipboard.config.settings import PlanningCenterSettings
from worshipboard.domain.dtos import (
    ItemDTO,
    PersonDTO,
    PlanDTO,
    ResourceRecord,
    TeamMemberDTO,
)
from worshipboard.domain.value_objects.arrangement_resolver import resolve_item_keys
from worshipboard.infrastructure.integrations.planning_center_client import (
    PlanningCenterClient,
)

logger = logging.getLogger(__name__)


def _plan_scoped_path(plan_id: str, suffix: str, service_type_id: str | None) -> str:
    """Pick the service-type scoped plan path when we know the service type."""
    if service_type_id:
        return f"/service_types/{service_type_id}/plans/{plan_id}/{suffix}"
    return f"/plans/{plan_id}/{suffix}"


class PlanningCenterResources:
    """Resource-specific fetchers built on PlanningCenterClient."""

    def __init__(
        self, client: PlanningCenterClient, settings: PlanningCenterSettings
    ) -> None:
        self._client = client
        self.settings = settings

    @property
    def page_size(self) -> int:
        return self.settings.page_size

    async def _fetch(
        self, resource: str, params: dict[str, Any] | None = None
    ) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
        """Fetch one page and split it into (data, included)."""
        document = await self._client.get(resource, params=params)
        data = document.get("data") or []
        included = document.get("included") or []
        logger.debug(
            "Fetched %s: %d records, %d included", resource, len(data), len(included)
        )
        return data, included

    async def get_next_plan(self, service_type_id: str) -> PlanDTO | None:
        """
        Get the next upcoming plan of a service type.

        Returns:
            The plan stamped with service_type_id, or None if nothing is scheduled
        """
        plans, _ = await self._fetch(
            f"/service_types/{service_type_id}/plans",
            params={"filter": "future", "order": "sort_date", "per_page": 1},
        )
        if not plans:
            logger.info("No upcoming plan for service type %s", service_type_id)
            return None
        return PlanDTO.from_api(plans[0], service_type_id=service_type_id)

    async def get_plan_team_members(
        self, plan_id: str, service_type_id: str | None = None
    ) -> list[TeamMemberDTO]:
        """Get up to one page of team members (person referenced, not expanded)."""
        members, _ = await self._fetch(
            _plan_scoped_path(plan_id, "team_members", service_type_id),
            params={"include": "person", "per_page": self.page_size},
        )
        return [TeamMemberDTO.from_api(record) for record in members]

    # People live under a different API (/people/v2), so we hand the client an
    # absolute URL. A 404 here surfaces as ProviderError - the person is gone.
    async def get_person(self, person_id: str) -> PersonDTO:
        """Get one person from the People API."""
        document = await self._client.get(
            f"{self.settings.people_api_base_url}/people/{person_id}"
        )
        return PersonDTO.from_api(document.get("data") or {})

    async def get_plan_items(
        self, plan_id: str, service_type_id: str | None = None
    ) -> list[ItemDTO]:
        """Get the setlist of a plan with arrangement keys resolved."""
        records, included = await self._fetch(
            _plan_scoped_path(plan_id, "items", service_type_id),
            params={
                "order": "sequence",
                "per_page": self.page_size,
                "include": "arrangement",
            },
        )
        items = [ItemDTO.from_api(record) for record in records]
        return resolve_item_keys(items, included)

    async def get_all_positions(self, service_type_id: str) -> list[ResourceRecord]:
        """Get team positions of a service type."""
        records, _ = await self._fetch(
            f"/service_types/{service_type_id}/team_positions",
            params={"per_page": self.page_size},
        )
        return [ResourceRecord.from_api(record) for record in records]

    async def get_all_service_types(self) -> list[ResourceRecord]:
        """Get service types (locations) with their folder reference left raw."""
        records, _ = await self._fetch(
            "/service_types",
            params={"per_page": self.page_size, "include": "folder"},
        )
        return [ResourceRecord.from_api(record) for record in records]

    async def get_all_folders(self) -> list[ResourceRecord]:
        """Get service type folders."""
        records, _ = await self._fetch(
            "/folders", params={"per_page": self.page_size}
        )
        return [ResourceRecord.from_api(record) for record in records]
