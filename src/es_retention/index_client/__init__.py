"""Client for listing and deleting indices over HTTP."""

from es_retention.index_client.client import HttpIndexClient
from es_retention.index_client.types import (
    AuthError,
    IndexClientError,
    IndexStore,
    NotFoundError,
    ProtocolError,
    StoreConnectionError,
)

__all__ = [
    "HttpIndexClient",
    "IndexStore",
    "IndexClientError",
    "StoreConnectionError",
    "AuthError",
    "ProtocolError",
    "NotFoundError",
]
