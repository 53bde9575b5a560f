from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from models.api_object import APIDetails, APIListObject, APIModel, APIObject, APIReference

STATUS_TRIGGERED = "triggered"
STATUS_ACKNOWLEDGED = "acknowledged"
STATUS_RESOLVED = "resolved"


class Acknowledgement(APIModel):
    """A past acknowledgement of an incident and who made it."""

    model_config = ConfigDict(frozen=True)

    at: str | None = None
    acknowledger: APIObject | None = None


class PendingAction(APIModel):
    """An action the API will take on the incident at time ``at``
    (e.g. ``unacknowledge``, ``escalate``, ``resolve``, ``urgency_change``).
    """

    model_config = ConfigDict(frozen=True)

    type: str | None = None
    at: str | None = None


class Assignment(APIModel):
    """An assignment of the incident to a user."""

    model_config = ConfigDict(frozen=True)

    at: str | None = None
    assignee: APIObject | None = None


class Incident(APIObject):
    """A normalized, de-duplicated event generated by an integration.

    Incidents are never deleted; they move through
    ``triggered -> acknowledged -> resolved``. The same record is used as
    the payload of bulk updates, where only ``id``, ``type`` and the
    fields being changed need to be set.
    """

    incident_number: int | None = None
    title: str | None = None
    description: str | None = None
    created_at: str | None = None
    pending_actions: list[PendingAction] | None = None
    incident_key: str | None = None
    service: APIObject | None = None
    assignments: list[Assignment] | None = None
    acknowledgements: list[Acknowledgement] | None = None
    last_status_change_at: str | None = None
    last_status_change_by: APIObject | None = None
    first_trigger_log_entry: APIObject | None = None
    escalation_policy: APIObject | None = None
    teams: list[APIObject] | None = None
    urgency: str | None = None
    status: str | None = None
    priority: APIObject | None = None


class IncidentNote(APIModel):
    id: str | None = None
    user: APIObject | None = None
    content: str | None = None
    created_at: str | None = None


class CreateIncidentOptions(APIModel):
    """Body of a manual incident creation.

    ``service`` is required by the API; ``escalation_policy`` and
    ``assignments`` are mutually exclusive there.
    """

    title: str | None = None
    service: APIReference | None = None
    type: str = "incident"
    priority: APIReference | None = None
    urgency: str | None = None
    incident_key: str | None = None
    body: APIDetails | None = None
    escalation_policy: APIReference | None = None
    assignments: list[Assignment] | None = None


class CreateIncident(APIModel):
    """The ``{"incident": ...}`` envelope POSTed to ``/incidents``."""

    incident: CreateIncidentOptions = Field(default_factory=CreateIncidentOptions)


class ListIncidentsOptions(APIListObject):
    since: str | None = None
    until: str | None = None
    date_range: str | None = None
    statuses: list[str] | None = None
    incident_key: str | None = None
    service_ids: list[str] | None = None
    team_ids: list[str] | None = None
    user_ids: list[str] | None = None
    urgencies: list[str] | None = None
    time_zone: str | None = None
    sort_by: str | None = None
    includes: list[str] | None = Field(default=None, alias="include")


class ListIncidentsResponse(APIListObject):
    incidents: list[Incident] = Field(default_factory=list)

    @field_validator("incidents", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
