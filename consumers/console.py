from __future__ import annotations

import sys
from typing import TextIO

from models.api_object import APIObject
from models.incident import Incident, IncidentNote
from models.log_entry import LogEntry


def _name(obj: APIObject | None) -> str:
    if obj is None:
        return "-"
    return obj.summary or obj.id or "-"


class ConsoleRenderer:
    """Prints incidents, notes and log entries as plain text."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out or sys.stdout

    def incident_line(self, incident: Incident) -> None:
        print(
            f"#{incident.incident_number or '?'} {incident.id or '-'} "
            f"[{incident.status or 'unknown'}/{incident.urgency or '-'}] "
            f"{incident.title or incident.summary or ''}".rstrip(),
            file=self._out,
            flush=True,
        )

    def incident_detail(self, incident: Incident) -> None:
        assignees = ", ".join(_name(a.assignee) for a in incident.assignments or []) or "-"
        print(
            f"Incident #{incident.incident_number or '?'} ({incident.id or '-'})\n"
            f"  Title: {incident.title or incident.summary or '-'}\n"
            f"  Status: {incident.status or '-'}  Urgency: {incident.urgency or '-'}\n"
            f"  Service: {_name(incident.service)}\n"
            f"  Escalation policy: {_name(incident.escalation_policy)}\n"
            f"  Assigned to: {assignees}\n"
            f"  Created: {incident.created_at or '-'}\n",
            file=self._out,
            flush=True,
        )

    def note(self, note: IncidentNote) -> None:
        print(
            f"[{note.created_at or '-'}] {_name(note.user)}: {note.content or ''}",
            file=self._out,
            flush=True,
        )

    def log_entry(self, entry: LogEntry) -> None:
        print(
            f"[{entry.created_at or '-'}] {entry.type or '-'}: {entry.summary or ''}".rstrip(),
            file=self._out,
            flush=True,
        )

    def message(self, text: str) -> None:
        print(text, file=self._out, flush=True)
