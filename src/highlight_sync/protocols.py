"""Protocols for dependency injection in the sync engine."""

from typing import Any, Protocol, runtime_checkable

from highlight_sync.models import ParsedExport


@runtime_checkable
class StoreProtocol(Protocol):
    """Protocol for remote document-collection clients."""

    def list_documents(self, collection: str, *, limit: int) -> list[dict[str, Any]]:
        """Return the documents of a collection."""
        ...

    def create_document(self, collection: str, body: dict[str, Any]) -> dict[str, Any]:
        """Create a document and return the stored record."""
        ...


@runtime_checkable
class ExportParser(Protocol):
    """Protocol for highlight export readers."""

    def parseable(self, raw: bytes) -> bool:
        """Whether this parser understands the raw input."""
        ...

    def parse(self, raw: bytes) -> list[ParsedExport]:
        """Turn raw input into (book, highlights) units."""
        ...
