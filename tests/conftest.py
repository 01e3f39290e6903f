"""Shared fixtures: environment isolation and an in-memory index store."""

import os
from collections.abc import Callable, Iterable

import pytest

from es_retention.index_client.types import IndexClientError, NotFoundError


class FakeIndexStore:
    """In-memory IndexStore.

    Deleting an index removes it from the listing; deleting a missing index
    raises NotFoundError, like the HTTP client on a 404.
    """

    def __init__(
        self,
        names: Iterable[str] = (),
        failures: dict[str, IndexClientError] | None = None,
        list_error: IndexClientError | None = None,
        unacknowledged: Iterable[str] = (),
    ) -> None:
        self.names = list(names)
        self.failures = dict(failures or {})
        self.list_error = list_error
        self.unacknowledged = set(unacknowledged)
        self.deleted: list[str] = []
        self.delete_calls: list[str] = []
        self.closed = False

    def __enter__(self) -> "FakeIndexStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.closed = True

    def list_indices(self) -> list[str]:
        if self.list_error is not None:
            raise self.list_error
        return list(self.names)

    def delete_index(self, name: str) -> bool:
        self.delete_calls.append(name)
        if name in self.failures:
            raise self.failures[name]
        if name not in self.names:
            raise NotFoundError(f"Index {name} does not exist", status_code=404)
        self.names.remove(name)
        self.deleted.append(name)
        return name not in self.unacknowledged


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ES_RETENTION_* and APP_* variables of the host out of tests."""
    for key in list(os.environ):
        if key.startswith("ES_RETENTION_") or key in ("APP_ENV", "APP_LOG_LEVEL"):
            monkeypatch.delenv(key)


@pytest.fixture
def make_store() -> Callable[..., FakeIndexStore]:
    """Factory for FakeIndexStore instances."""
    return FakeIndexStore
