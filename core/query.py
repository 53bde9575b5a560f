from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(options: BaseModel | None) -> httpx.QueryParams:
    """Encode an options model into query parameters.

    Unset (``None``) fields are left out, as are the names a model lists
    in ``query_exclude``. Fields go out under their alias. Sequence fields
    become one ``name[]=value`` pair per item. Keys come out sorted,
    values of a repeated key keep their order.
    """
    if options is None:
        return httpx.QueryParams()

    data = options.model_dump(
        by_alias=True,
        exclude_none=True,
        exclude=set(getattr(options, "query_exclude", ())),
    )
    params: list[tuple[str, str]] = []
    for name, value in data.items():
        if isinstance(value, (list, tuple)):
            params.extend((f"{name}[]", _format(item)) for item in value)
        else:
            params.append((name, _format(value)))

    params.sort(key=lambda pair: pair[0])
    return httpx.QueryParams(params)
