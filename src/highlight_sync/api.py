"""Siteleaf API client for document collections."""

from typing import Any

import requests
from loguru import logger

from highlight_sync.config import API_BASE_URL, DEFAULT_LIST_LIMIT


class SiteleafApi:
    """Thin Siteleaf v1 client: list and create documents in a collection."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = API_BASE_URL,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self.sess = requests.Session()
        self.sess.auth = (api_key, api_secret)
        self.sess.headers.update({"Accept": "application/json"})
        logger.debug("API ready: base_url {!r}, timeout {!r}", self.base_url, self.timeout)

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Invoke a Siteleaf endpoint, return decoded json."""
        logger.debug("Making request: {} {!r} {}", method, path, repr(params or body)[:32])

        r = self.sess.request(
            method,
            self.base_url + path,
            params=params,
            json=body,
            timeout=self.timeout,
        )
        r.raise_for_status()
        try:
            return r.json()
        except ValueError as e:
            msg = f"API call returned invalid JSON: ({method} {path!r}) -> {r.text[:64]!r}"
            raise RuntimeError(msg) from e

    def list_documents(self, collection: str, *, limit: int = DEFAULT_LIST_LIMIT) -> list[dict[str, Any]]:
        """Return all documents of a collection, up to ``limit``."""
        rv = self.request(f"collections/{collection}/documents", params={"limit": limit})
        if not isinstance(rv, list):
            msg = f"bad listing for collection {collection!r}: {type(rv).__name__}"
            raise RuntimeError(msg)
        return rv

    def create_document(self, collection: str, body: dict[str, Any]) -> dict[str, Any]:
        """Create a document in a collection, return the stored record."""
        rv = self.request(f"collections/{collection}/documents", method="POST", body=body)
        if not isinstance(rv, dict):
            msg = f"bad create response for collection {collection!r}: {type(rv).__name__}"
            raise RuntimeError(msg)
        return rv
