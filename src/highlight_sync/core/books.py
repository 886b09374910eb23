"""Find-or-create books keyed on their original title."""

from datetime import datetime
from typing import Any

from loguru import logger

from highlight_sync.core.cache import CollectionCache
from highlight_sync.core.dates import book_timestamp
from highlight_sync.protocols import StoreProtocol


def find_book(books: list[dict[str, Any]], title: str) -> dict[str, Any] | None:
    """Return the first book whose ``metadata.original_title`` equals ``title``."""
    for book in books:
        if (book.get("metadata") or {}).get("original_title") == title:
            return book
    return None


def resolve_book(
    cache: CollectionCache,
    store: StoreProtocol,
    candidate: dict[str, Any],
    *,
    books_collection: str,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Return the stored book matching ``candidate``, creating it if needed.

    Matching uses the original title only, so a display title corrected in the
    store does not cause a second copy. An existing record is returned as-is;
    its ``metadata.uuid`` wins over the one generated for ``candidate``.

    Args:
        cache: Per-run collection cache.
        store: Remote store client.
        candidate: Proposed book with ``title`` and partial ``metadata``.
        books_collection: Name of the books collection.
        now: Creation time override.
    """
    existing = find_book(cache.listing(books_collection), candidate["title"])
    if existing is not None:
        logger.debug("Found existing book {!r}", candidate["title"])
        return existing

    params = {
        **candidate,
        "metadata": {
            **candidate.get("metadata", {}),
            "original_title": candidate["title"],
            "date": book_timestamp(now),
        },
    }
    book = store.create_document(books_collection, params)
    cache.record(books_collection, book)
    logger.info("Created book {!r}", candidate["title"])
    return book
