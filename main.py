"""PagerDuty incidents -- command-line entry point.

Wires the layers together:

    Settings (environment)
        -> httpx.Client (auth headers, base URL, timeout)
        -> APIClient (one request per call, error mapping)
        -> IncidentsResource (typed incident operations)
        -> ConsoleRenderer (plain-text output)

Mutating commands (create, ack, resolve, reassign, add-note) need a
``From`` address: pass ``--from`` or set PAGERDUTY_FROM_EMAIL.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import httpx

from consumers.console import ConsoleRenderer
from core.config import Settings
from core.errors import ClientError
from core.http_client import APIClient, build_http_client
from models.api_object import APIDetails, APIObject, APIReference
from models.incident import (
    STATUS_ACKNOWLEDGED,
    STATUS_RESOLVED,
    Assignment,
    CreateIncidentOptions,
    Incident,
    IncidentNote,
    ListIncidentsOptions,
)
from models.log_entry import ListIncidentLogEntriesOptions
from resources.incidents import IncidentsResource

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pd-incidents",
        description="Inspect and manage PagerDuty incidents.",
    )
    parser.add_argument(
        "--from",
        dest="from_email",
        default=None,
        help="email of the acting user (default: $PAGERDUTY_FROM_EMAIL)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("list", help="list incidents")
    p.add_argument("--status", dest="statuses", action="append")
    p.add_argument("--urgency", dest="urgencies", action="append")
    p.add_argument("--service", dest="service_ids", action="append")
    p.add_argument("--team", dest="team_ids", action="append")
    p.add_argument("--user", dest="user_ids", action="append")
    p.add_argument("--include", dest="includes", action="append")
    p.add_argument("--since")
    p.add_argument("--until")
    p.add_argument("--date-range")
    p.add_argument("--sort-by")
    p.add_argument("--time-zone")
    p.add_argument("--limit", type=int)
    p.add_argument("--offset", type=int)
    p.add_argument("--all", action="store_true", help="follow pagination to the end")

    p = sub.add_parser("get", help="show one incident")
    p.add_argument("incident_id")

    p = sub.add_parser("create", help="create an incident")
    p.add_argument("--title", required=True)
    p.add_argument("--service", required=True, help="service id")
    p.add_argument("--urgency")
    p.add_argument("--incident-key")
    p.add_argument("--priority", help="priority id")
    p.add_argument("--escalation-policy", help="escalation policy id")
    p.add_argument("--details", help="incident body text")

    for name, verb in (("ack", "acknowledge"), ("resolve", "resolve")):
        p = sub.add_parser(name, help=f"{verb} incidents")
        p.add_argument("incident_ids", nargs="+")

    p = sub.add_parser("reassign", help="assign incidents to users")
    p.add_argument("incident_ids", nargs="+")
    p.add_argument("--user", dest="user_ids", action="append", required=True)

    p = sub.add_parser("snooze", help="snooze an incident")
    p.add_argument("incident_id")
    p.add_argument("duration", type=int, help="seconds")

    p = sub.add_parser("notes", help="list notes on an incident")
    p.add_argument("incident_id")

    p = sub.add_parser("add-note", help="add a note to an incident")
    p.add_argument("incident_id")
    p.add_argument("content")

    p = sub.add_parser("log-entries", help="list log entries of an incident")
    p.add_argument("incident_id")
    p.add_argument("--overview", action="store_true")
    p.add_argument("--time-zone")
    p.add_argument("--include", dest="includes", action="append")
    p.add_argument("--limit", type=int)
    p.add_argument("--offset", type=int)

    return parser


def _incident_refs(ids: Sequence[str], **changes) -> list[Incident]:
    return [Incident(id=i, type="incident_reference", **changes) for i in ids]


def _require_from(args: argparse.Namespace, settings: Settings) -> str:
    from_email = args.from_email or settings.from_email
    if not from_email:
        raise SystemExit(f"{args.command}: --from or PAGERDUTY_FROM_EMAIL is required")
    return from_email


def dispatch(
    args: argparse.Namespace,
    incidents: IncidentsResource,
    settings: Settings,
    out: ConsoleRenderer,
) -> None:
    if args.command == "list":
        options: ListIncidentsOptions | None = ListIncidentsOptions(
            limit=args.limit,
            offset=args.offset,
            statuses=args.statuses,
            urgencies=args.urgencies,
            service_ids=args.service_ids,
            team_ids=args.team_ids,
            user_ids=args.user_ids,
            includes=args.includes,
            since=args.since,
            until=args.until,
            date_range=args.date_range,
            sort_by=args.sort_by,
            time_zone=args.time_zone,
        )
        while options is not None:
            page = incidents.list_incidents(options)
            for incident in page.incidents:
                out.incident_line(incident)
            options = page.next_page(options) if args.all else None

    elif args.command == "get":
        out.incident_detail(incidents.get_incident(args.incident_id))

    elif args.command == "create":
        created = incidents.create_incident(
            _require_from(args, settings),
            CreateIncidentOptions(
                title=args.title,
                service=APIReference(id=args.service, type="service_reference"),
                urgency=args.urgency,
                incident_key=args.incident_key,
                priority=(
                    APIReference(id=args.priority, type="priority_reference")
                    if args.priority
                    else None
                ),
                escalation_policy=(
                    APIReference(
                        id=args.escalation_policy,
                        type="escalation_policy_reference",
                    )
                    if args.escalation_policy
                    else None
                ),
                body=(
                    APIDetails(type="incident_body", details=args.details)
                    if args.details
                    else None
                ),
            ),
        )
        out.incident_line(created)

    elif args.command in ("ack", "resolve"):
        status = STATUS_ACKNOWLEDGED if args.command == "ack" else STATUS_RESOLVED
        incidents.manage_incidents(
            _require_from(args, settings),
            _incident_refs(args.incident_ids, status=status),
        )
        out.message(f"{len(args.incident_ids)} incident(s) {status}")

    elif args.command == "reassign":
        assignments = [
            Assignment(assignee=APIObject(id=u, type="user_reference"))
            for u in args.user_ids
        ]
        incidents.manage_incidents(
            _require_from(args, settings),
            _incident_refs(args.incident_ids, assignments=assignments),
        )
        out.message(f"{len(args.incident_ids)} incident(s) reassigned")

    elif args.command == "snooze":
        incidents.snooze_incident(args.incident_id, args.duration)
        out.message(f"{args.incident_id} snoozed for {args.duration}s")

    elif args.command == "notes":
        for note in incidents.list_incident_notes(args.incident_id):
            out.note(note)

    elif args.command == "add-note":
        incidents.create_incident_note(
            args.incident_id,
            _require_from(args, settings),
            IncidentNote(content=args.content),
        )
        out.message(f"note added to {args.incident_id}")

    elif args.command == "log-entries":
        page = incidents.list_incident_log_entries(
            args.incident_id,
            ListIncidentLogEntriesOptions(
                limit=args.limit,
                offset=args.offset,
                includes=args.includes,
                is_overview=True if args.overview else None,
                time_zone=args.time_zone,
            ),
        )
        for entry in page.log_entries:
            out.log_entry(entry)


def run(
    argv: Sequence[str] | None = None,
    settings: Settings | None = None,
    http: httpx.Client | None = None,
    out: ConsoleRenderer | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if http is None and not settings.auth_token:
        print("PAGERDUTY_AUTH_TOKEN is not set", file=sys.stderr)
        return 1

    client = http or build_http_client(settings)
    incidents = IncidentsResource(APIClient(client))
    try:
        dispatch(args, incidents, settings, out or ConsoleRenderer())
    except (ClientError, httpx.HTTPError) as exc:
        log.debug("%s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if http is None:
            client.close()
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
