from __future__ import annotations


class ClientError(Exception):
    """Base class for every error raised by the incident client.

    Transport failures are not wrapped: ``httpx.HTTPError`` subclasses
    reach the caller unchanged so they can be told apart from problems
    with the response itself.
    """


class APIResponseError(ClientError):
    """The API answered with a non-2xx status code.

    PagerDuty error bodies look like
    ``{"error": {"code": 2001, "message": "...", "errors": ["..."]}}``;
    whatever part of that is present is kept on the exception.
    """

    def __init__(
        self,
        status_code: int,
        message: str = "",
        code: int | None = None,
        errors: list[str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        self.errors = list(errors or [])
        detail = f"HTTP response code: {status_code}"
        if message:
            detail += f". Error: {message}"
        if self.errors:
            detail += f" ({'; '.join(self.errors)})"
        super().__init__(f"Failed call API endpoint. {detail}")


class DecodeError(ClientError):
    """The response body is not valid JSON, or not a JSON object."""


class MissingFieldError(ClientError):
    """A well-formed JSON response lacks its expected envelope key."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"JSON response does not have {field} field")
