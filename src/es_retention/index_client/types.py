"""Type definitions for the index client module.

This module defines:
- IndexStore: the two operations a retention run needs from the store
- Error classes: hierarchy of index client errors
"""

from typing import Protocol


class IndexStore(Protocol):
    """Anything that can list and delete indices.

    ``HttpIndexClient`` talks to a real cluster; tests use an in-memory fake.
    """

    def list_indices(self) -> list[str]:
        """Return index names under the configured prefix, in store order."""
        ...

    def delete_index(self, name: str) -> bool:
        """Delete one index; return whether the store acknowledged it."""
        ...


# Error hierarchy


class IndexClientError(Exception):
    """Base exception for all index client errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StoreConnectionError(IndexClientError):
    """Raised when the store cannot be reached or the request times out."""

    pass


class AuthError(IndexClientError):
    """Raised when the store rejects the credentials (401/403)."""

    pass


class ProtocolError(IndexClientError):
    """Raised on an unexpected status code or response body."""

    pass


class NotFoundError(IndexClientError):
    """Raised when the index to delete does not exist (404)."""

    pass
