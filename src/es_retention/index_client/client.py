"""HTTP client for the Elasticsearch index management API.

Two calls are used:

- ``GET /_cat/indices/<prefix>*?format=json&h=index`` to list index names
- ``DELETE /<index>`` to delete one index

There is no retry: a failed call raises and the caller decides what to do.
"""

from typing import Any
from urllib.parse import quote

import httpx

from es_retention.index_client.types import (
    AuthError,
    NotFoundError,
    ProtocolError,
    StoreConnectionError,
)
from es_retention.telemetry import get_logger
from es_retention.telemetry.events import STORE_REQUEST, STORE_REQUEST_FAILED

log = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def _quote_segment(value: str) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(value, safe="")


def _is_index_not_found(response: httpx.Response) -> bool:
    """True for Elasticsearch's own 404, not one from a proxy or a wrong path."""
    if response.status_code != 404:
        return False
    try:
        body = response.json()
    except ValueError:
        return False
    error = body.get("error") if isinstance(body, dict) else None
    return isinstance(error, dict) and error.get("type") == "index_not_found_exception"


class HttpIndexClient:
    """Index store backed by an Elasticsearch-compatible REST endpoint.

    Usage:
        with HttpIndexClient("http://localhost:9200", index_prefix="zis-audit-") as client:
            names = client.list_indices()

    Attributes:
        base_url: Base URL of the endpoint, without trailing slash.
        index_prefix: Prefix used to narrow the listing.
    """

    def __init__(
        self,
        base_url: str,
        index_prefix: str = "",
        auth: tuple[str, str] | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the endpoint (may include a path, e.g. behind a proxy).
            index_prefix: Only indices starting with this prefix are listed.
            auth: Optional (username, password) for basic auth.
            timeout_seconds: Per-request timeout.
            transport: Optional httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.index_prefix = index_prefix
        self._client = httpx.Client(
            auth=httpx.BasicAuth(*auth) if auth else None,
            headers={"Accept": "application/json"},
            timeout=timeout_seconds,
            transport=transport,
        )

    def __enter__(self) -> "HttpIndexClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send one request, translating transport and auth failures."""
        url = f"{self.base_url}/{path}"
        log.debug(STORE_REQUEST, method=method, path=path)
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            log.debug(STORE_REQUEST_FAILED, method=method, path=path, error=str(e))
            raise StoreConnectionError(f"{method} {path} failed: {e}") from e
        except httpx.HTTPError as e:
            raise ProtocolError(f"{method} {path} failed: {e}") from e

        if response.status_code in (401, 403):
            raise AuthError(
                f"{method} {path} rejected with {response.status_code}: check credentials",
                status_code=response.status_code,
            )
        return response

    def list_indices(self) -> list[str]:
        """List index names matching ``<index_prefix>*``.

        Returns:
            Index names in the order the store returned them.

        Raises:
            StoreConnectionError: If the store cannot be reached.
            AuthError: On 401/403.
            ProtocolError: On any other error status or an unexpected body.
        """
        path = f"_cat/indices/{_quote_segment(self.index_prefix)}*"
        response = self._request("GET", path, params={"format": "json", "h": "index"})

        if _is_index_not_found(response):
            # Some versions answer a wildcard without matches this way
            return []
        if not response.is_success:
            raise ProtocolError(
                f"Listing indices failed ({response.status_code}): {response.text[:300]}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ProtocolError(f"Listing indices returned invalid JSON: {e}") from e

        if not isinstance(body, list):
            raise ProtocolError(f"Expected a JSON list of indices, got {type(body).__name__}")

        names: list[str] = []
        for item in body:
            name = item.get("index") if isinstance(item, dict) else None
            if not isinstance(name, str):
                raise ProtocolError(f"Unexpected index entry in listing: {item!r}")
            names.append(name)
        return names

    def delete_index(self, name: str) -> bool:
        """Delete one index.

        Args:
            name: Index name.

        Returns:
            The ``acknowledged`` flag of the response (True when absent).

        Raises:
            NotFoundError: If the index does not exist.
            StoreConnectionError: If the store cannot be reached.
            AuthError: On 401/403.
            ProtocolError: On any other error status.
        """
        path = _quote_segment(name)
        response = self._request("DELETE", path)

        if _is_index_not_found(response):
            raise NotFoundError(f"Index {name} does not exist", status_code=404)
        if not response.is_success:
            raise ProtocolError(
                f"DELETE {name} failed ({response.status_code}): {response.text[:300]}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError:
            return True
        return bool(body.get("acknowledged", True)) if isinstance(body, dict) else True

