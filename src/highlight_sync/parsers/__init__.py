"""Readers for the supported highlight export formats."""

from highlight_sync.parsers.json_export import JsonExportParser
from highlight_sync.protocols import ExportParser

DEFAULT_PARSERS: list[ExportParser] = [JsonExportParser()]

__all__ = ["DEFAULT_PARSERS", "JsonExportParser"]
