from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import Settings
from core.errors import APIResponseError, DecodeError

log = logging.getLogger(__name__)

_ACCEPT = "application/vnd.pagerduty+json;version=2"


def build_http_client(settings: Settings) -> httpx.Client:
    """Create the ``httpx.Client`` every resource shares.

    Auth, content negotiation and timeout live here so that ``APIClient``
    only ever deals with paths, payloads and per-call headers.
    """
    return httpx.Client(
        base_url=settings.base_url,
        timeout=settings.timeout,
        headers={
            "Accept": _ACCEPT,
            "Authorization": f"Token token={settings.auth_token}",
            "Content-Type": "application/json",
        },
    )


class APIClient:
    """Thin request/response layer over an injected ``httpx.Client``.

    Each method performs exactly one HTTP request. Transport errors from
    httpx propagate untouched; a non-2xx status becomes an
    ``APIResponseError``. Nothing is retried.
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def get(
        self,
        path: str,
        params: httpx.QueryParams | None = None,
    ) -> httpx.Response:
        return self._do("GET", path, params=params)

    def post(
        self,
        path: str,
        payload: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return self._do("POST", path, payload=payload, headers=headers)

    def put(
        self,
        path: str,
        payload: Any,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return self._do("PUT", path, payload=payload, headers=headers)

    def decode_json(self, resp: httpx.Response) -> dict[str, Any]:
        """Parse the response body, which must be a JSON object."""
        try:
            data = resp.json()
        except ValueError as exc:
            raise DecodeError(
                f"{resp.request.method} {resp.request.url.path}: invalid JSON body: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise DecodeError(
                f"{resp.request.method} {resp.request.url.path}: "
                f"expected a JSON object, got {type(data).__name__}"
            )
        return data

    def _do(
        self,
        method: str,
        path: str,
        *,
        params: httpx.QueryParams | None = None,
        payload: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        log.debug("%s %s params=%s", method, path, params)
        resp = self._client.request(
            method,
            path,
            params=params,
            json=payload,
            headers=headers,
        )
        self._check_response(resp)
        return resp

    @staticmethod
    def _check_response(resp: httpx.Response) -> None:
        if resp.is_success:
            return

        message = resp.reason_phrase
        code: int | None = None
        errors: list[str] = []
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            err = body["error"]
            message = err.get("message") or message
            code = err.get("code")
            errors = [str(e) for e in err.get("errors") or []]
        elif resp.text:
            message = resp.text

        log.warning(
            "%s %s failed with status %d: %s",
            resp.request.method,
            resp.request.url.path,
            resp.status_code,
            message,
        )
        raise APIResponseError(resp.status_code, message, code=code, errors=errors)
