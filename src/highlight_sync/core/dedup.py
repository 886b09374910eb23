"""Drop highlights that the store already holds for a book."""

from collections.abc import Sequence
from typing import Any

from loguru import logger

from highlight_sync.core.cache import CollectionCache
from highlight_sync.core.text import truncate
from highlight_sync.models import Highlight


def filter_new_highlights(
    cache: CollectionCache,
    book: dict[str, Any],
    candidates: Sequence[Highlight],
    *,
    highlights_collection: str,
) -> list[Highlight]:
    """Return the candidates whose trimmed content is not stored for ``book`` yet.

    Only highlights linked to the resolved book's ``metadata.uuid`` are
    compared. Comparison is exact after stripping surrounding whitespace.
    Order of ``candidates`` is preserved.
    """
    existing = cache.listing(highlights_collection)
    if not existing:
        return list(candidates)

    book_uuid = book["metadata"]["uuid"]
    scoped = [h for h in existing if (h.get("metadata") or {}).get("book_uuid") == book_uuid]
    if not scoped:
        return list(candidates)

    logger.info("Filtering through {} existing highlights for {}", len(scoped), book["title"])
    bodies = {(h.get("body") or "").strip() for h in scoped}

    kept: list[Highlight] = []
    for highlight in candidates:
        if highlight.content.strip() in bodies:
            logger.debug("Found existing highlight matching: {}", truncate(highlight.content, 30))
            continue
        kept.append(highlight)
    return kept
