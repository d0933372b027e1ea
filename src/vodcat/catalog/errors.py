"""Catalog error taxonomy.

Routes map these to HTTP statuses: EntryNotFoundError and
InvalidSegmentError to 404, ScanError and EntryLoadError to 500.
"""

from __future__ import annotations

from pathlib import Path


class CatalogError(Exception):
    """Base class for catalog failures."""


class ScanError(CatalogError):
    """A collection directory could not be opened."""

    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"Cannot scan collection {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class EntryNotFoundError(CatalogError):
    """No entry file exists at the requested location."""

    def __init__(self, kind: str, entry_id: str) -> None:
        super().__init__(f"Entry not found: {kind}/{entry_id}")
        self.kind = kind
        self.entry_id = entry_id


class EntryLoadError(CatalogError):
    """An entry file exists but is unreadable or invalid."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load entry {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidSegmentError(CatalogError):
    """A collection name or entry id is not a single safe path segment."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Invalid path segment: {segment!r}")
        self.segment = segment
