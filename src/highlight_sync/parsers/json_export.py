"""Parse JSON highlight exports into domain models."""

import json
from typing import Any

from highlight_sync.models import Book, Highlight, ParsedExport


def _load(raw: bytes) -> list[dict[str, Any]] | None:
    """Decode ``raw`` into a list of export objects, or None if it is not one."""
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, ValueError):
        return None

    entries = data if isinstance(data, list) else [data]
    for entry in entries:
        if not isinstance(entry, dict):
            return None
        if not isinstance(entry.get("book"), dict) or not isinstance(entry.get("highlights"), list):
            return None
        if not entry["book"].get("title"):
            return None
    return entries


def parse_highlight(data: dict[str, Any]) -> Highlight | None:
    """Map one exported highlight, or None if it has no text."""
    content = data.get("content") or data.get("text") or ""
    if not str(content).strip():
        return None
    date = data.get("date")
    return Highlight(
        content=str(content),
        date=date if date is None or isinstance(date, str) else str(date),
        location=data.get("location"),
        comments=data.get("comments") or data.get("note"),
        source=data.get("source"),
        user=data.get("user"),
    )


class JsonExportParser:
    """Reads ``{"book": {...}, "highlights": [...]}`` objects, alone or in a list.

    This is the shape produced by the bookmarklet export.
    """

    def parseable(self, raw: bytes) -> bool:
        return _load(raw) is not None

    def parse(self, raw: bytes) -> list[ParsedExport]:
        entries = _load(raw)
        if entries is None:
            msg = "input is not a JSON highlight export"
            raise ValueError(msg)

        exports: list[ParsedExport] = []
        for entry in entries:
            book_data = entry["book"]
            book = Book(
                title=str(book_data["title"]),
                author=book_data.get("author"),
                asin=book_data.get("asin"),
            )
            highlights = tuple(
                h for h in (parse_highlight(item) for item in entry["highlights"] if isinstance(item, dict)) if h
            )
            exports.append(ParsedExport(book=book, highlights=highlights))
        return exports
