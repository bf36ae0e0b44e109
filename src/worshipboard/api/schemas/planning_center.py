"""API schemas for Planning Center data."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InitializeRequest(BaseModel):
    """Explicit credentials for (re)initializing the Planning Center client."""

    application_id: str = Field(..., min_length=1, description="PAT application ID")
    secret: str = Field(..., min_length=1, description="PAT secret")
    save: bool = Field(
        default=False, description="Persist credentials to the settings table"
    )

    # Planning Center treats "   " as no credentials at all, so it must never reach the
    # settings table.
    @field_validator("application_id", "secret")
    @classmethod
    def strip_and_require(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped


class InitializeResponse(BaseModel):
    initialized: bool


class PlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    service_type_id: str
    title: str | None = None
    series_title: str | None = None
    dates: str | None = None
    sort_date: str | None = None


class TeamMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str | None = None
    photo_thumbnail: str | None = None
    team_position_name: str | None = None
    status: str | None = None
    person_id: str | None = None


class PersonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str | None = None
    last_name: str | None = None
    photo_url: str | None = None


class ItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str | None = None
    sequence: int | None = None
    item_type: str | None = None
    key_name: str | None = None
    arrangement_id: str | None = None


class ResourceResponse(BaseModel):
    """Pass-through record (positions, service types, folders)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    relationships: dict[str, Any] = Field(default_factory=dict)


class PlanDetailsResponse(BaseModel):
    """Everything the live display of one location needs."""

    model_config = ConfigDict(from_attributes=True)

    plan: PlanResponse | None = None
    team_members: list[TeamMemberResponse] = Field(default_factory=list)
    items: list[ItemResponse] = Field(default_factory=list)
