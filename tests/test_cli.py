"""
Tests for the command-line entry point, driven through ``run()`` with a
mocked transport.
"""

import io

import pytest

from consumers.console import ConsoleRenderer
from core.config import Settings
from main import run

SETTINGS = Settings(auth_token="tok", from_email="ops@example.com")


@pytest.fixture
def output():
    return io.StringIO()


def _run(argv, http, output, settings=SETTINGS):
    return run(argv, settings=settings, http=http, out=ConsoleRenderer(output))


def test_list_prints_incidents(recorder, http, output):
    recorder.reply(json_body={
        "incidents": [
            {"id": "P1", "incident_number": 7, "status": "triggered", "urgency": "high", "title": "Disk full"},
        ],
        "more": False,
    })

    code = _run(["list", "--status", "triggered", "--limit", "5"], http, output)

    assert code == 0
    assert recorder.last.url.params.get_list("statuses[]") == ["triggered"]
    assert recorder.last.url.params["limit"] == "5"
    assert output.getvalue() == "#7 P1 [triggered/high] Disk full\n"


def test_list_all_follows_pages(recorder, http, output):
    recorder.reply(json_body={"incidents": [{"id": "P1"}], "limit": 1, "offset": 0, "more": True})
    recorder.reply(json_body={"incidents": [{"id": "P2"}], "limit": 1, "offset": 1, "more": False})

    code = _run(["list", "--all", "--limit", "1"], http, output)

    assert code == 0
    assert [r.url.params.get("offset") for r in recorder.requests] == [None, "1"]
    assert "P1" in output.getvalue() and "P2" in output.getvalue()


def test_ack_uses_manage_incidents(recorder, http, output):
    recorder.reply(json_body={"incidents": []})

    code = _run(["ack", "P1", "P2"], http, output)

    assert code == 0
    assert recorder.last.method == "PUT"
    assert recorder.last.headers["From"] == "ops@example.com"
    assert recorder.last_json() == {
        "incidents": [
            {"id": "P1", "type": "incident_reference", "status": "acknowledged"},
            {"id": "P2", "type": "incident_reference", "status": "acknowledged"},
        ]
    }


def test_reassign_builds_assignments(recorder, http, output):
    recorder.reply(json_body={"incidents": []})

    _run(["--from", "lead@example.com", "reassign", "P1", "--user", "U9"], http, output)

    assert recorder.last.headers["From"] == "lead@example.com"
    assert recorder.last_json()["incidents"][0]["assignments"] == [
        {"assignee": {"id": "U9", "type": "user_reference"}}
    ]


def test_add_note_requires_from(http, output):
    with pytest.raises(SystemExit):
        _run(["add-note", "P1", "hello"], http, output, settings=Settings(auth_token="tok"))


def test_snooze(recorder, http, output):
    recorder.reply(201, json_body={"incident": {"id": "P1"}})

    code = _run(["snooze", "P1", "600"], http, output)

    assert code == 0
    assert recorder.last.url.path == "/incidents/P1/snooze"
    assert recorder.last_json() == {"duration": 600}


def test_notes(recorder, http, output):
    recorder.reply(json_body={"notes": [{"content": "on it", "user": {"summary": "Jane"}, "created_at": "t"}]})

    _run(["notes", "P1"], http, output)

    assert output.getvalue() == "[t] Jane: on it\n"


def test_create(recorder, http, output):
    recorder.reply(201, json_body={"incident": {"id": "NEW", "incident_number": 9, "status": "triggered"}})

    code = _run(["create", "--title", "Down", "--service", "S1", "--priority", "PR1"], http, output)

    assert code == 0
    assert recorder.last_json() == {
        "incident": {
            "type": "incident",
            "title": "Down",
            "service": {"id": "S1", "type": "service_reference"},
            "priority": {"id": "PR1", "type": "priority_reference"},
        }
    }
    assert output.getvalue().startswith("#9 NEW [triggered/-]")


def test_api_error_exits_nonzero(recorder, http, output, capsys):
    recorder.reply(404, json_body={"error": {"code": 2100, "message": "Not Found"}})

    code = _run(["get", "missing"], http, output)

    assert code == 1
    assert "Not Found" in capsys.readouterr().err


def test_missing_token(output, capsys):
    code = run(["list"], settings=Settings(), out=ConsoleRenderer(output))

    assert code == 1
    assert "PAGERDUTY_AUTH_TOKEN" in capsys.readouterr().err


def test_get_prints_detail(recorder, http, output):
    recorder.reply(json_body={"incident": {
        "id": "P1",
        "incident_number": 3,
        "title": "Disk full",
        "status": "acknowledged",
        "service": {"id": "S1", "summary": "Storage"},
        "assignments": [{"assignee": {"id": "U1", "summary": "Jane"}}],
    }})

    code = _run(["get", "P1"], http, output)

    text = output.getvalue()
    assert code == 0
    assert "Incident #3 (P1)" in text
    assert "Service: Storage" in text
    assert "Assigned to: Jane" in text


def test_log_entries_overview(recorder, http, output):
    recorder.reply(json_body={"log_entries": [{"type": "acknowledge_log_entry", "summary": "Acked by Jane", "created_at": "t"}]})

    _run(["log-entries", "P1", "--overview"], http, output)

    assert recorder.last.url.params["is_overview"] == "true"
    assert output.getvalue() == "[t] acknowledge_log_entry: Acked by Jane\n"
