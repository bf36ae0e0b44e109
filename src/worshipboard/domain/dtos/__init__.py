"""
Standard Data Transfer Objects for Planning Center data.

Hey future me - these DTOs are the stable shape the rest of WorshipBoard consumes!
Planning Center speaks JSON:API: every record is {"id", "type", "attributes",
"relationships"} and relationships only carry {"data": {"type", "id"}} references.
Each DTO has a from_api() that flattens exactly the attributes we display and keeps
relationship references as plain ids. Nothing here does I/O.

Flow: Provider JSON:API record -> DTO (from_api) -> Sync Facade -> API router / display

DTOs are frozen - a fetched record is a snapshot. Enrichment (arrangement keys) makes
a NEW record with dataclasses.replace(), never mutates the old one.
"""

from dataclasses import dataclass, field
from typing import Any

from worshipboard.domain.exceptions import ValidationError


def _record_id(record: dict[str, Any], kind: str) -> str:
    """Extract the id of a JSON:API record or fail loudly."""
    record_id = record.get("id")
    if record_id is None or str(record_id).strip() == "":
        raise ValidationError(f"Invalid {kind} record: missing id")
    return str(record_id)


def _attributes(record: dict[str, Any]) -> dict[str, Any]:
    return record.get("attributes") or {}


def relationship_id(record: dict[str, Any], name: str) -> str | None:
    """Get the referenced id of a to-one relationship, or None if absent.

    Handles every partial shape Planning Center sends: no "relationships" key,
    relationship missing, "data": null, or data without an id.
    """
    relationships = record.get("relationships") or {}
    relation = relationships.get(name) or {}
    data = relation.get("data")
    if not isinstance(data, dict):
        return None
    related_id = data.get("id")
    return str(related_id) if related_id is not None else None


@dataclass(frozen=True)
class PlanDTO:
    """One scheduled service instance.

    Identity is (id, service_type_id) - plan ids alone are ambiguous across
    service types once normalized. service_type_id is stamped by the fetcher
    because the raw plan record does not carry it.
    """

    id: str
    service_type_id: str
    title: str | None = None
    series_title: str | None = None
    dates: str | None = None  # Human-readable range, e.g. "March 3, 2024"
    sort_date: str | None = None  # ISO timestamp Planning Center sorts by

    @classmethod
    def from_api(cls, record: dict[str, Any], service_type_id: str) -> "PlanDTO":
        attributes = _attributes(record)
        return cls(
            id=_record_id(record, "Plan"),
            service_type_id=str(service_type_id),
            title=attributes.get("title"),
            series_title=attributes.get("series_title"),
            dates=attributes.get("dates"),
            sort_date=attributes.get("sort_date"),
        )

    @property
    def identity(self) -> tuple[str, str]:
        return (self.id, self.service_type_id)


@dataclass(frozen=True)
class TeamMemberDTO:
    """A person scheduled on a plan.

    person_id is a REFERENCE into PersonDTO - the Person is never expanded here.
    Fetch it separately with get_person() if you need first/last name.
    """

    id: str
    name: str | None = None
    photo_thumbnail: str | None = None
    team_position_name: str | None = None
    status: str | None = None  # "C" confirmed, "U" unconfirmed, "D" declined
    person_id: str | None = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "TeamMemberDTO":
        attributes = _attributes(record)
        return cls(
            id=_record_id(record, "PlanPerson"),
            name=attributes.get("name"),
            photo_thumbnail=attributes.get("photo_thumbnail"),
            team_position_name=attributes.get("team_position_name"),
            status=attributes.get("status"),
            person_id=relationship_id(record, "person"),
        )


@dataclass(frozen=True)
class PersonDTO:
    """A person from the People API."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    photo_url: str | None = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "PersonDTO":
        attributes = _attributes(record)
        return cls(
            id=_record_id(record, "Person"),
            first_name=attributes.get("first_name"),
            last_name=attributes.get("last_name"),
            photo_url=attributes.get("photo_url"),
        )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass(frozen=True)
class ItemDTO:
    """One row of a plan's order of service (song, header, announcement...).

    key_name is ONLY filled by the arrangement resolver, and only from an
    arrangement with complete musical metadata. The item's own key_name
    attribute is not read.
    """

    id: str
    title: str | None = None
    sequence: int | None = None
    item_type: str | None = None
    key_name: str | None = None
    arrangement_id: str | None = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "ItemDTO":
        attributes = _attributes(record)
        return cls(
            id=_record_id(record, "Item"),
            title=attributes.get("title"),
            sequence=attributes.get("sequence"),
            item_type=attributes.get("item_type"),
            arrangement_id=relationship_id(record, "arrangement"),
        )


@dataclass(frozen=True)
class ArrangementDTO:
    """Musical metadata of a song arrangement (resolver-local, never returned)."""

    id: str
    bpm: float | None = None
    meter: str | None = None
    key_name: str | None = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "ArrangementDTO":
        attributes = _attributes(record)
        return cls(
            id=_record_id(record, "Arrangement"),
            bpm=attributes.get("bpm"),
            meter=attributes.get("meter"),
            key_name=attributes.get("key_name"),
        )

    def is_complete(self) -> bool:
        """Check if tempo, meter AND key are all populated."""
        return bool(self.bpm and self.meter and self.key_name)


# Yo, positions / service types / folders are displayed as-is, so we don't invent a
# schema for them. relationships stay RAW (e.g. service_type -> folder) for callers.
@dataclass(frozen=True)
class ResourceRecord:
    """Flat pass-through record for resources without relationship resolution."""

    id: str
    type: str | None = None
    attributes: dict[str, Any] = field(default_factory=dict)
    relationships: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "ResourceRecord":
        return cls(
            id=_record_id(record, str(record.get("type") or "Resource")),
            type=record.get("type"),
            attributes=dict(_attributes(record)),
            relationships=dict(record.get("relationships") or {}),
        )

    @property
    def name(self) -> str | None:
        return self.attributes.get("name")


@dataclass(frozen=True)
class PlanDetails:
    """Team and setlist of one plan, as shown on the live display."""

    plan: PlanDTO | None = None
    team_members: list[TeamMemberDTO] = field(default_factory=list)
    items: list[ItemDTO] = field(default_factory=list)


__all__ = [
    "ArrangementDTO",
    "ItemDTO",
    "PersonDTO",
    "PlanDTO",
    "PlanDetails",
    "ResourceRecord",
    "TeamMemberDTO",
    "relationship_id",
]
