from __future__ import annotations

import logging
from typing import Sequence

from core.errors import MissingFieldError
from core.query import encode_query
from models.incident import (
    CreateIncident,
    CreateIncidentOptions,
    Incident,
    IncidentNote,
    ListIncidentsOptions,
    ListIncidentsResponse,
)
from models.log_entry import ListIncidentLogEntriesOptions, ListIncidentLogEntriesResponse
from resources.base import Resource

log = logging.getLogger(__name__)


class IncidentsResource(Resource):
    """Binding for the ``/incidents`` endpoints.

    Every method is a single round trip. Errors are never handled here:
    transport failures come from httpx, non-2xx statuses and bad bodies
    from ``core.errors``.
    """

    def list_incidents(
        self, options: ListIncidentsOptions | None = None
    ) -> ListIncidentsResponse:
        """List existing incidents matching the filters in ``options``."""
        resp = self._client.get("/incidents", params=encode_query(options))
        return self._decode(ListIncidentsResponse, self._client.decode_json(resp))

    def create_incident(
        self,
        from_email: str,
        incident: CreateIncident | CreateIncidentOptions,
    ) -> Incident:
        """Create an incident without a corresponding monitoring event."""
        if isinstance(incident, CreateIncidentOptions):
            incident = CreateIncident(incident=incident)
        resp = self._client.post(
            "/incidents",
            incident.to_wire(),
            headers=self._from_headers(from_email),
        )
        data = self._client.decode_json(resp)
        created = self._decode(Incident, self._unwrap(data, "incident"))
        log.info("Created incident %s (#%s)", created.id, created.incident_number)
        return created

    def manage_incidents(self, from_email: str, incidents: Sequence[Incident]) -> None:
        """Acknowledge, resolve, escalate or reassign incidents in one request.

        The response body is not read; success means a 2xx status.
        """
        payload = {"incidents": [i.to_wire() for i in incidents]}
        self._client.put("/incidents", payload, headers=self._from_headers(from_email))
        log.info("Updated %d incident(s)", len(incidents))

    def get_incident(self, incident_id: str) -> Incident:
        resp = self._client.get(f"/incidents/{incident_id}")
        data = self._client.decode_json(resp)
        return self._decode(Incident, self._unwrap(data, "incident"))

    def list_incident_notes(self, incident_id: str) -> list[IncidentNote]:
        resp = self._client.get(f"/incidents/{incident_id}/notes")
        data = self._client.decode_json(resp)
        if "notes" not in data:
            raise MissingFieldError("notes")
        return [self._decode(IncidentNote, n) for n in data["notes"] or []]

    def create_incident_note(
        self, incident_id: str, from_email: str, note: IncidentNote
    ) -> None:
        self._client.post(
            f"/incidents/{incident_id}/notes",
            {"note": note.to_wire()},
            headers=self._from_headers(from_email),
        )
        log.info("Added note to incident %s", incident_id)

    def snooze_incident(self, incident_id: str, duration: int) -> None:
        """Stop the incident from alerting for ``duration`` seconds."""
        self._client.post(f"/incidents/{incident_id}/snooze", {"duration": duration})
        log.info("Snoozed incident %s for %ds", incident_id, duration)

    def list_incident_log_entries(
        self,
        incident_id: str,
        options: ListIncidentLogEntriesOptions | None = None,
    ) -> ListIncidentLogEntriesResponse:
        resp = self._client.get(
            f"/incidents/{incident_id}/log_entries",
            params=encode_query(options),
        )
        return self._decode(
            ListIncidentLogEntriesResponse, self._client.decode_json(resp)
        )
