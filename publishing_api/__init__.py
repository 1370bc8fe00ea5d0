"""
Publishing API adapter.

``get_publishing_api()`` returns the process-wide client, built lazily from
environment configuration.  Tests and embedding applications can swap it
with ``set_publishing_api()``.
"""

from typing import Optional

from publishing_api.client import PublishingApiClient, encode_params
from publishing_api.errors import (
    HTTPConflict,
    HTTPErrorResponse,
    HTTPNotFound,
    HTTPUnprocessableEntity,
)
from utils.config import AppConfig

_client: Optional[PublishingApiClient] = None


def get_publishing_api():
    """Return the default Publishing API client, creating it on first use."""
    global _client
    if _client is None:
        _client = PublishingApiClient.from_config(AppConfig.from_env())
    return _client


def set_publishing_api(client) -> None:
    """Replace the default client (pass None to rebuild from config)."""
    global _client
    _client = client


__all__ = [
    "PublishingApiClient",
    "encode_params",
    "HTTPErrorResponse",
    "HTTPNotFound",
    "HTTPConflict",
    "HTTPUnprocessableEntity",
    "get_publishing_api",
    "set_publishing_api",
]
