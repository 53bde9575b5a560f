from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator

from models.api_object import APIListObject, APIModel, APIObject
from models.incident import Incident


class LogEntryContext(APIModel):
    """A link, image or text attached to a log entry by its source."""

    model_config = ConfigDict(frozen=True)

    alt: str | None = None
    href: str | None = None
    src: str | None = None
    text: str | None = None
    type: str | None = None


class LogEntry(APIObject):
    """Audit record of something that happened to an incident.

    ``channel`` is kept as the raw object: its shape depends on
    ``channel["type"]`` (``email``, ``api``, ``web_trigger``, ...).
    """

    created_at: str | None = None
    agent: APIObject | None = None
    channel: dict[str, Any] | None = None
    teams: list[APIObject] | None = None
    contexts: list[LogEntryContext] | None = None
    acknowledgement_timeout: int | None = None
    event_details: dict[str, str] | None = None
    incident: Incident | None = None


class ListIncidentLogEntriesOptions(APIListObject):
    includes: list[str] | None = Field(default=None, alias="include")
    is_overview: bool | None = None
    time_zone: str | None = None


class ListIncidentLogEntriesResponse(APIListObject):
    log_entries: list[LogEntry] = Field(default_factory=list)

    @field_validator("log_entries", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
