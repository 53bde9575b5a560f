"""
Pytest configuration and fixtures.

Every test talks to the API through ``httpx.MockTransport``; the
``recorder`` fixture queues canned responses and keeps the requests the
client sent so tests can inspect method, path, query, headers and body.
"""

import json
from typing import Any, Callable

import httpx
import pytest

from core.http_client import APIClient
from resources.incidents import IncidentsResource

BASE_URL = "https://api.pagerduty.test"


class Recorder:
    """Callable MockTransport handler replaying queued responses in order."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[Callable[[httpx.Request], httpx.Response]] = []

    def reply(self, status_code: int = 200, json_body: Any = None, content: bytes | None = None) -> None:
        def _respond(request: httpx.Request) -> httpx.Response:
            if json_body is not None:
                return httpx.Response(status_code, json=json_body)
            return httpx.Response(status_code, content=content or b"")

        self._responses.append(_respond)

    def fail(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self._responses.append(_raise)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        assert self._responses, f"unexpected request {request.method} {request.url}"
        return self._responses.pop(0)(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def http(recorder: Recorder):
    with httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(recorder)) as client:
        yield client


@pytest.fixture
def api(http: httpx.Client) -> APIClient:
    return APIClient(http)


@pytest.fixture
def incidents(api: APIClient) -> IncidentsResource:
    return IncidentsResource(api)
