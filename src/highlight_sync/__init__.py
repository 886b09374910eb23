"""Sync e-book highlight exports into Siteleaf collections."""

from highlight_sync.api import SiteleafApi
from highlight_sync.core.cache import CollectionCache
from highlight_sync.models import Book, Highlight, ParsedExport
from highlight_sync.protocols import ExportParser, StoreProtocol
from highlight_sync.sync import Synchronizer, ingest

__all__ = [
    "Book",
    "CollectionCache",
    "ExportParser",
    "Highlight",
    "ParsedExport",
    "SiteleafApi",
    "StoreProtocol",
    "Synchronizer",
    "ingest",
]
