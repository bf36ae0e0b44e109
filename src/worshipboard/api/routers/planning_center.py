"""Planning Center API endpoints.

Hey future me - thin HTTP layer over PlanningCenterSyncService. No logic lives here:
every route is one facade call, and errors are mapped by exception_handlers.py.

ENDPOINTS:
- POST /planning-center/initialize                        → (re)authenticate
- GET  /planning-center/service-types                     → service types (locations)
- GET  /planning-center/folders                           → service type folders
- GET  /planning-center/service-types/{id}/positions      → team positions
- GET  /planning-center/service-types/{id}/next-plan      → next plan (null if none)
- GET  /planning-center/service-types/{id}/live           → next plan + team + setlist
- GET  /planning-center/plans/{id}/team-members           → team (?service_type_id=)
- GET  /planning-center/plans/{id}/items                  → setlist (?service_type_id=)
- GET  /planning-center/people/{id}                       → one person
"""

import logging

from fastapi import APIRouter, Body, Depends, Query

from worshipboard.api.dependencies import (
    get_credentials_service,
    get_planning_center_service,
)
from worshipboard.api.schemas.planning_center import (
    InitializeRequest,
    InitializeResponse,
    ItemResponse,
    PersonResponse,
    PlanDetailsResponse,
    PlanResponse,
    ResourceResponse,
    TeamMemberResponse,
)
from worshipboard.application.services.credentials_service import CredentialsService
from worshipboard.application.services.planning_center_sync_service import (
    PlanningCenterSyncService,
)
from worshipboard.domain.dtos import (
    ItemDTO,
    PersonDTO,
    PlanDetails,
    PlanDTO,
    ResourceRecord,
    TeamMemberDTO,
)
from worshipboard.domain.ports import PlanningCenterCredentials

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/planning-center", tags=["planning-center"])


# Without a body we re-read stored credentials - that's what the Settings page calls
# after saving. With a body the given credentials win (and are saved if asked).
@router.post("/initialize", response_model=InitializeResponse)
async def initialize(
    body: InitializeRequest | None = Body(default=None),
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
    credentials_service: CredentialsService = Depends(get_credentials_service),
) -> InitializeResponse:
    credentials = None
    if body is not None:
        credentials = PlanningCenterCredentials(
            application_id=body.application_id, secret=body.secret
        )

    await service.initialize(credentials)

    # Only persist what initialize() actually used. Incomplete credentials make the
    # client fall back to the stored ones, and saving them would wipe those.
    if (
        body is not None
        and body.save
        and credentials is not None
        and credentials.is_configured()
    ):
        await credentials_service.save_planning_center_credentials(
            body.application_id, body.secret
        )
    return InitializeResponse(initialized=service.is_initialized)


@router.get("/service-types", response_model=list[ResourceResponse])
async def list_service_types(
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> list[ResourceRecord]:
    return await service.get_all_service_types()


@router.get("/folders", response_model=list[ResourceResponse])
async def list_folders(
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> list[ResourceRecord]:
    return await service.get_all_folders()


@router.get(
    "/service-types/{service_type_id}/positions",
    response_model=list[ResourceResponse],
)
async def list_positions(
    service_type_id: str,
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> list[ResourceRecord]:
    return await service.get_all_positions(service_type_id)


@router.get(
    "/service-types/{service_type_id}/next-plan",
    response_model=PlanResponse | None,
)
async def get_next_plan(
    service_type_id: str,
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> PlanDTO | None:
    return await service.get_next_plan(service_type_id)


@router.get(
    "/service-types/{service_type_id}/live", response_model=PlanDetailsResponse
)
async def get_live_plan(
    service_type_id: str,
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> PlanDetails:
    return await service.get_next_plan_details(service_type_id)


@router.get(
    "/plans/{plan_id}/team-members", response_model=list[TeamMemberResponse]
)
async def list_team_members(
    plan_id: str,
    service_type_id: str | None = Query(default=None),
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> list[TeamMemberDTO]:
    return await service.get_plan_team_members(plan_id, service_type_id)


@router.get("/plans/{plan_id}/items", response_model=list[ItemResponse])
async def list_items(
    plan_id: str,
    service_type_id: str | None = Query(default=None),
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> list[ItemDTO]:
    return await service.get_plan_items(plan_id, service_type_id)


@router.get("/people/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: str,
    service: PlanningCenterSyncService = Depends(get_planning_center_service),
) -> PersonDTO:
    return await service.get_person(person_id)
