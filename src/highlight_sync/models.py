"""Domain models for parsed highlight exports."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """A book as described by an export, before it reaches the store."""

    title: str
    author: str | None = None
    asin: str | None = None


@dataclass(frozen=True)
class Highlight:
    """A single highlighted passage."""

    content: str
    date: str | None = None
    location: str | int | None = None
    comments: str | None = None
    source: str | None = None
    user: str | None = None


@dataclass(frozen=True)
class ParsedExport:
    """One book with its highlights, as produced by a parser."""

    book: Book
    highlights: tuple[Highlight, ...] = ()
