"""Collection directory scanning.

Lists the direct children of a collection directory, loads every
candidate entry file, drops hidden and invalid entries, and sorts the
rest newest first.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vodcat.catalog.errors import ScanError
from vodcat.catalog.loader import ENTRY_SUFFIX, load_entry
from vodcat.models.domain import EntryEntity

logger = logging.getLogger(__name__)


def is_candidate(name: str) -> bool:
    """Check whether a directory child name can hold an entry.

    The name must end in ".json" and its stem must not contain another
    dot: "foo.meta.json" is a sidecar, not an entry.

    Args:
        name: File name (not a path).

    Returns:
        True if the name is a candidate entry file.
    """
    if not name.endswith(ENTRY_SUFFIX):
        return False
    stem = name[: -len(ENTRY_SUFFIX)]
    return bool(stem) and "." not in stem


def scan_collection(directory: Path) -> list[EntryEntity]:
    """Load all visible entries of a collection directory.

    Candidates that fail to load are skipped; they never fail the scan.

    Args:
        directory: Collection directory.

    Returns:
        Visible entries ordered by created_at descending.

    Raises:
        ScanError: If the directory cannot be listed.
    """
    try:
        children = list(directory.iterdir())
    except OSError as e:
        logger.warning(f"Cannot list collection directory {directory}: {e}")
        raise ScanError(directory, str(e)) from e

    entries: list[EntryEntity] = []
    for child in children:
        if not is_candidate(child.name):
            continue
        entry = load_entry(child)
        if entry is None or entry.is_hidden:
            continue
        entries.append(entry)

    entries.sort(key=lambda e: e.created_at, reverse=True)
    return entries
