"""Synchronize parsed exports into the remote store."""

import time
import uuid
from collections.abc import Iterable, Sequence
from typing import Any

from loguru import logger

from highlight_sync.config import TITLE_TRUNCATE
from highlight_sync.core.books import resolve_book
from highlight_sync.core.cache import CollectionCache
from highlight_sync.core.dedup import filter_new_highlights
from highlight_sync.core.text import slugify, truncate
from highlight_sync.core.writer import write_highlights
from highlight_sync.models import Book, Highlight, ParsedExport
from highlight_sync.protocols import ExportParser, StoreProtocol


class Synchronizer:
    """Resolve, deduplicate and write each export, strictly in sequence.

    Nothing here runs concurrently: the shared cache and the remote rate limit
    both depend on one request being in flight at a time.
    """

    def __init__(
        self,
        store: StoreProtocol,
        cache: CollectionCache,
        *,
        books_collection: str = "books",
        highlights_collection: str = "highlights",
    ) -> None:
        self._store = store
        self._cache = cache
        self.books_collection = books_collection
        self.highlights_collection = highlights_collection

    def add_book_and_highlights(self, book: Book, highlights: Sequence[Highlight]) -> list[dict[str, Any]]:
        """Sync one book and its highlights. Returns the created highlight records."""
        if not highlights:
            return []

        label = slugify(truncate(book.title, TITLE_TRUNCATE, ellipsis=None))
        started = time.perf_counter()

        metadata = {"author": book.author, "asin": book.asin, "uuid": str(uuid.uuid4())}
        stored_book = resolve_book(
            self._cache,
            self._store,
            # Unknown fields are left out rather than stored as null.
            {"title": book.title, "metadata": {k: v for k, v in metadata.items() if v is not None}},
            books_collection=self.books_collection,
        )
        fresh = filter_new_highlights(
            self._cache,
            stored_book,
            highlights,
            highlights_collection=self.highlights_collection,
        )
        created = write_highlights(
            self._cache,
            self._store,
            stored_book,
            fresh,
            highlights_collection=self.highlights_collection,
        )

        logger.info(
            "add_book_and_highlights__{}: {:.3f}s ({} new, {} skipped)",
            label,
            time.perf_counter() - started,
            len(created),
            len(highlights) - len(fresh),
        )
        return created

    def synchronize(self, exports: Iterable[ParsedExport]) -> int:
        """Sync every export in order, stopping at the first failure.

        Returns:
            Number of highlights created.
        """
        started = time.perf_counter()
        created = 0
        for export in exports:
            created += len(self.add_book_and_highlights(export.book, export.highlights))
        logger.info("complete: {:.3f}s, {} highlights created", time.perf_counter() - started, created)
        return created


def collect_exports(raw: bytes, parsers: Sequence[ExportParser]) -> list[ParsedExport]:
    """Run every parser that accepts ``raw``, concatenating their results in parser order.

    One input can hold several exports, so all parsers get a look.
    """
    exports: list[ParsedExport] = []
    for parser in parsers:
        if parser.parseable(raw):
            parsed = parser.parse(raw)
            logger.debug("{} parsed {} books", type(parser).__name__, len(parsed))
            exports.extend(parsed)
    return exports


def ingest(raw: bytes, parsers: Sequence[ExportParser], synchronizer: Synchronizer) -> int:
    """Parse ``raw`` with the known parsers and sync the results."""
    return synchronizer.synchronize(collect_exports(raw, parsers))
