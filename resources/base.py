from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.errors import DecodeError, MissingFieldError
from core.http_client import APIClient

M = TypeVar("M", bound=BaseModel)


class Resource:
    """Base for API resource bindings.

    A shared ``APIClient`` is injected at construction time; resources
    keep no other state, so one instance may serve any number of calls.
    """

    def __init__(self, client: APIClient) -> None:
        self._client = client

    @staticmethod
    def _unwrap(data: dict[str, Any], key: str) -> Any:
        """Return the payload stored under an envelope key.

        Raises ``MissingFieldError`` when the key is absent or its value is
        null, which keeps a malformed envelope distinct from a transport or
        decode failure.
        """
        value = data.get(key)
        if value is None:
            raise MissingFieldError(key)
        return value

    @staticmethod
    def _decode(model: type[M], payload: Any) -> M:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"unexpected {model.__name__} payload: {exc}") from exc

    @staticmethod
    def _from_headers(from_email: str) -> dict[str, str]:
        """Headers naming the acting user, required on mutating calls."""
        return {"From": from_email}
