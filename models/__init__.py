from models.api_object import APIDetails, APIListObject, APIModel, APIObject, APIReference
from models.incident import (
    Acknowledgement,
    Assignment,
    CreateIncident,
    CreateIncidentOptions,
    Incident,
    IncidentNote,
    ListIncidentsOptions,
    ListIncidentsResponse,
    PendingAction,
)
from models.log_entry import (
    ListIncidentLogEntriesOptions,
    ListIncidentLogEntriesResponse,
    LogEntry,
    LogEntryContext,
)

__all__ = [
    "APIModel",
    "APIDetails",
    "APIListObject",
    "APIObject",
    "APIReference",
    "Acknowledgement",
    "Assignment",
    "CreateIncident",
    "CreateIncidentOptions",
    "Incident",
    "IncidentNote",
    "ListIncidentLogEntriesOptions",
    "ListIncidentLogEntriesResponse",
    "ListIncidentsOptions",
    "ListIncidentsResponse",
    "LogEntry",
    "LogEntryContext",
    "PendingAction",
]
