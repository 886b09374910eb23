"""Per-run mirror of remote collection listings."""

from typing import Any

from loguru import logger

from highlight_sync.config import DEFAULT_LIST_LIMIT
from highlight_sync.protocols import StoreProtocol


class CollectionCache:
    """Lazily list each collection once, then serve it from memory.

    The listing is never refreshed: the cache assumes it is the only writer to
    these collections for the lifetime of a run. Every successful create must
    be passed to ``record`` so later lookups in the same run can see it.
    """

    def __init__(self, store: StoreProtocol, *, limit: int = DEFAULT_LIST_LIMIT) -> None:
        self._store = store
        self.limit = limit
        self._listings: dict[str, list[dict[str, Any]]] = {}

    def listing(self, collection: str) -> list[dict[str, Any]]:
        """Return the memoized listing, fetching it on first access."""
        if collection not in self._listings:
            documents = list(self._store.list_documents(collection, limit=self.limit))
            logger.debug("Cached {} documents from {!r}", len(documents), collection)
            self._listings[collection] = documents
        return self._listings[collection]

    def record(self, collection: str, document: dict[str, Any]) -> None:
        """Append a freshly created document to its collection listing."""
        if collection not in self._listings:
            msg = f"collection {collection!r} was never listed"
            raise KeyError(msg)
        self._listings[collection].append(document)
