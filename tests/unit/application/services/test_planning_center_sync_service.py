"""Unit tests for PlanningCenterSyncService (the sync facade)."""

from unittest.mock import AsyncMock

import pytest

from worshipboard.application.services.planning_center_sync_service import (
    PlanningCenterSyncService,
)
from worshipboard.domain.dtos import ItemDTO, PlanDTO, TeamMemberDTO
from worshipboard.domain.exceptions import (
    ConfigurationError,
    NotInitializedError,
    ProviderError,
)
from worshipboard.domain.ports import ICredentialSource, PlanningCenterCredentials
from worshipboard.infrastructure.integrations.planning_center_client import (
    PlanningCenterClient,
)

PLAN = {
    "type": "Plan",
    "id": "900",
    "attributes": {"title": "Sunday", "sort_date": "2024-06-02T10:00:00Z"},
}


@pytest.fixture
def uninitialized_service(pc_settings, fake_pc) -> PlanningCenterSyncService:
    return PlanningCenterSyncService(
        PlanningCenterClient(pc_settings, transport=fake_pc.transport)
    )


@pytest.fixture
def service(pc_client) -> PlanningCenterSyncService:
    return PlanningCenterSyncService(pc_client)


class TestInitializationGuard:
    """Every facade call must refuse to run before initialize()."""

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("get_next_plan", ("12",)),
            ("get_plan_team_members", ("900",)),
            ("get_plan_team_members", ("900", "12")),
            ("get_person", ("p1",)),
            ("get_plan_items", ("900",)),
            ("get_all_positions", ("12",)),
            ("get_all_service_types", ()),
            ("get_all_folders", ()),
            ("get_plan_details", ("900",)),
            ("get_next_plan_details", ("12",)),
        ],
    )
    async def test_calls_before_initialize_raise(
        self, uninitialized_service, fake_pc, method, args
    ):
        with pytest.raises(NotInitializedError):
            await getattr(uninitialized_service, method)(*args)

        assert fake_pc.requests == []

    async def test_initialize_then_fetch_succeeds(
        self, uninitialized_service, fake_pc, credentials
    ):
        fake_pc.add("/services/v2/folders", {"data": []})

        await uninitialized_service.initialize(credentials)

        assert uninitialized_service.is_initialized
        assert await uninitialized_service.get_all_folders() == []
        await uninitialized_service.close()

    async def test_initialize_from_credential_source(self, pc_settings, fake_pc):
        source = AsyncMock(spec=ICredentialSource)
        source.get_planning_center_credentials.return_value = (
            PlanningCenterCredentials(application_id="id", secret="secret")
        )
        service = PlanningCenterSyncService(
            PlanningCenterClient(pc_settings, source, transport=fake_pc.transport)
        )

        await service.initialize()

        assert service.is_initialized
        await service.close()

    async def test_missing_configuration_propagates(self, pc_settings):
        source = AsyncMock(spec=ICredentialSource)
        source.get_planning_center_credentials.return_value = (
            PlanningCenterCredentials(application_id="", secret="")
        )
        service = PlanningCenterSyncService(PlanningCenterClient(pc_settings, source))

        with pytest.raises(ConfigurationError):
            await service.initialize()
        assert not service.is_initialized


class TestDelegation:
    async def test_get_next_plan(self, service, fake_pc):
        fake_pc.add("/services/v2/service_types/12/plans", {"data": [PLAN]})

        plan = await service.get_next_plan("12")

        assert plan == PlanDTO(
            id="900",
            service_type_id="12",
            title="Sunday",
            sort_date="2024-06-02T10:00:00Z",
        )

    async def test_get_next_plan_none(self, service, fake_pc):
        fake_pc.add("/services/v2/service_types/12/plans", {"data": []})

        assert await service.get_next_plan("12") is None

    async def test_no_caching_between_calls(self, service, fake_pc):
        fake_pc.add("/services/v2/folders", {"data": []})

        await service.get_all_folders()
        await service.get_all_folders()

        assert fake_pc.paths == ["/services/v2/folders", "/services/v2/folders"]

    async def test_provider_errors_propagate_unchanged(self, service, fake_pc):
        fake_pc.add("/services/v2/service_types", {"errors": []}, status_code=401)

        with pytest.raises(ProviderError) as exc_info:
            await service.get_all_service_types()

        assert exc_info.value.status_code == 401


class TestPlanDetails:
    async def test_get_plan_details_combines_team_and_items(self, service, mocker):
        members = [TeamMemberDTO(id="tm1", name="Amy")]
        items = [ItemDTO(id="i1", title="Song", key_name="G")]
        team_mock = mocker.patch.object(
            service._resources, "get_plan_team_members", AsyncMock(return_value=members)
        )
        items_mock = mocker.patch.object(
            service._resources, "get_plan_items", AsyncMock(return_value=items)
        )

        details = await service.get_plan_details("900", "12")

        assert details.plan is None
        assert details.team_members == members
        assert details.items == items
        team_mock.assert_awaited_once_with("900", "12")
        items_mock.assert_awaited_once_with("900", "12")

    async def test_get_plan_details_error_propagates(self, service, mocker):
        mocker.patch.object(
            service._resources,
            "get_plan_team_members",
            AsyncMock(side_effect=ProviderError("boom", status_code=500)),
        )
        mocker.patch.object(
            service._resources, "get_plan_items", AsyncMock(return_value=[])
        )

        with pytest.raises(ProviderError):
            await service.get_plan_details("900")

    async def test_next_plan_details_uses_scoped_paths(self, service, fake_pc):
        fake_pc.add("/services/v2/service_types/12/plans", {"data": [PLAN]})
        fake_pc.add(
            "/services/v2/service_types/12/plans/900/team_members",
            {"data": [{"id": "tm1", "attributes": {"name": "Amy"}}]},
        )
        fake_pc.add(
            "/services/v2/service_types/12/plans/900/items",
            {"data": [{"id": "i1", "attributes": {"title": "Welcome"}}]},
        )

        details = await service.get_next_plan_details("12")

        assert details.plan is not None
        assert details.plan.identity == ("900", "12")
        assert [member.id for member in details.team_members] == ["tm1"]
        assert [item.id for item in details.items] == ["i1"]
        assert "/services/v2/plans/900/items" not in fake_pc.paths

    async def test_next_plan_details_without_upcoming_plan(self, service, fake_pc):
        fake_pc.add("/services/v2/service_types/12/plans", {"data": []})

        details = await service.get_next_plan_details("12")

        assert details.plan is None
        assert details.team_members == []
        assert details.items == []
        assert len(fake_pc.requests) == 1
