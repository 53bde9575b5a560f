from core.config import Settings
from core.errors import APIResponseError, ClientError, DecodeError, MissingFieldError
from core.http_client import APIClient, build_http_client
from core.query import encode_query

__all__ = [
    "APIClient",
    "APIResponseError",
    "ClientError",
    "DecodeError",
    "MissingFieldError",
    "Settings",
    "build_http_client",
    "encode_query",
]
