"""Persist highlights to the store one at a time."""

import uuid
from collections.abc import Sequence
from typing import Any

from loguru import logger

from highlight_sync.config import SNIPPET_TRUNCATE, TITLE_TRUNCATE
from highlight_sync.core.cache import CollectionCache
from highlight_sync.core.dates import normalize_date
from highlight_sync.core.text import slugify, truncate
from highlight_sync.models import Highlight
from highlight_sync.protocols import StoreProtocol


def build_highlight_record(book: dict[str, Any], highlight: Highlight) -> dict[str, Any]:
    """Build the document body for ``highlight`` under the stored ``book``.

    The path embeds a fresh uuid so two highlights never collide, even with
    identical titles.
    """
    short_title = truncate(book["title"], TITLE_TRUNCATE, ellipsis=None)

    metadata: dict[str, Any] = {
        "book_uuid": book["metadata"]["uuid"],
        "comments": highlight.comments,
        # Stringified for sorting in Liquid templates.
        "location": str(highlight.location) if highlight.location else None,
        "source": highlight.source,
    }

    if highlight.date:
        highlighted_on = normalize_date(highlight.date)
        if highlighted_on is not None:
            metadata["highlighted_on"] = highlighted_on
        else:
            logger.warning("Invalid date: {}", highlight.date)

    if highlight.user:
        metadata["highlight_by"] = highlight.user

    return {
        "body": highlight.content,
        "title": f"{short_title}: {truncate(highlight.content, SNIPPET_TRUNCATE)}",
        "path": slugify(f"{short_title}-{uuid.uuid4()}", lower=True),
        "metadata": metadata,
    }


def write_highlights(
    cache: CollectionCache,
    store: StoreProtocol,
    book: dict[str, Any],
    highlights: Sequence[Highlight],
    *,
    highlights_collection: str,
) -> list[dict[str, Any]]:
    """Create each highlight in order, recording it in the cache as it lands.

    Only one create is in flight at a time. Any failure propagates and the
    remaining highlights are not attempted.

    Returns:
        The created records, in creation order.
    """
    if not highlights:
        return []

    total = len(highlights)
    logger.info("Creating {} highlights for {}", total, book["title"])

    created: list[dict[str, Any]] = []
    for i, highlight in enumerate(highlights, start=1):
        record = store.create_document(highlights_collection, build_highlight_record(book, highlight))
        cache.record(highlights_collection, record)
        created.append(record)
        logger.info("Created {} of {} for {}", i, total, book["title"])
    return created
