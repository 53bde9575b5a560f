from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field

O = TypeVar("O", bound="APIListObject")


class APIModel(BaseModel):
    """Base for every API payload.

    Unknown keys from the API are ignored. Fields renamed on the wire
    declare an alias and can still be populated by their Python name.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with wire names and unset (``None``) fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


class APIObject(APIModel):
    """Common header shared by every PagerDuty resource representation."""

    id: str | None = None
    type: str | None = None
    summary: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    html_url: str | None = None


class APIReference(APIModel):
    """Minimal ``{"id", "type"}`` pointer to another resource."""

    id: str | None = None
    type: str | None = None


class APIDetails(APIModel):
    type: str | None = None
    details: str | None = None


class APIListObject(APIModel):
    """Pagination fields carried by list requests and list responses.

    On a request they select the page; on a response they describe the
    page that came back, with ``more`` telling whether another follows.
    ``more`` and ``total`` are never sent as query parameters.
    """

    query_exclude: ClassVar[frozenset[str]] = frozenset({"more", "total"})

    limit: int | None = None
    offset: int | None = None
    more: bool | None = None
    total: int | None = None

    def next_page(self, options: O) -> O | None:
        """Return ``options`` advanced to the page after this response.

        Returns None when the response is the last page. The step is the
        limit the server applied, falling back to the one requested.
        """
        if not self.more:
            return None
        limit = self.limit if self.limit is not None else options.limit
        if not limit:
            return None
        offset = self.offset if self.offset is not None else (options.offset or 0)
        return options.model_copy(update={"offset": offset + limit, "limit": limit})
