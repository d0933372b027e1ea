"""Catalog operations exposed to the API.

KNOWN_COLLECTIONS is fixed; configuration may append extra names but
never removes these four.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from vodcat.catalog.lookup import check_segment, get_entry
from vodcat.catalog.scanner import scan_collection
from vodcat.models.domain import EntryEntity

KNOWN_COLLECTIONS: tuple[str, ...] = ("vods", "highlights", "clips", "rplay")

__all__ = ["KNOWN_COLLECTIONS", "get_entry", "list_collections", "list_entries"]


def list_collections(extra: Iterable[str] = ()) -> list[str]:
    """Return collection names: the fixed four, then any extras.

    Args:
        extra: Additional configured names; duplicates are dropped.

    Returns:
        Ordered list of collection names.
    """
    names = list(KNOWN_COLLECTIONS)
    for name in extra:
        if name and name not in names:
            names.append(name)
    return names


def list_entries(root: Path, kind: str) -> list[EntryEntity]:
    """List visible entries of a collection, newest first.

    The collection need not be one of the listed names; any directory
    under the root can be scanned.

    Raises:
        InvalidSegmentError: If kind is not a safe path segment.
        ScanError: If the collection directory cannot be opened.
    """
    check_segment(kind)
    return scan_collection(root / kind)
