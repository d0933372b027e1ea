"""Single-entry lookup by collection and id.

Existence is checked before loading so that a missing file (404) stays
distinct from a malformed one (500). The hidden flag is not applied:
hidden entries remain fetchable by id.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vodcat.catalog.errors import EntryLoadError, EntryNotFoundError, InvalidSegmentError
from vodcat.catalog.loader import ENTRY_SUFFIX, read_entry
from vodcat.models.domain import EntryEntity

logger = logging.getLogger(__name__)


def check_segment(segment: str) -> str:
    """Validate a single path segment before joining it to a directory.

    Raises:
        InvalidSegmentError: If the segment is empty, "." or "..", or
            contains a path separator or NUL.
    """
    if (
        not segment
        or segment in (".", "..")
        or "/" in segment
        or "\\" in segment
        or "\x00" in segment
    ):
        raise InvalidSegmentError(segment)
    return segment


def entry_path(root: Path, kind: str, entry_id: str) -> Path:
    """Compute `<root>/<kind>/<entry_id>.json`.

    Raises:
        InvalidSegmentError: If kind or entry_id is not a safe segment.
    """
    check_segment(kind)
    check_segment(entry_id)
    return root / kind / f"{entry_id}{ENTRY_SUFFIX}"


def get_entry(root: Path, kind: str, entry_id: str) -> EntryEntity:
    """Fetch one entry by id, hidden or not.

    Args:
        root: Catalog root directory.
        kind: Collection name.
        entry_id: Entry id (file stem).

    Returns:
        Loaded entry.

    Raises:
        EntryNotFoundError: If the id is unsafe, contains a dot (never a
            candidate file), or no file exists for it.
        EntryLoadError: If the file exists but cannot be loaded.
    """
    try:
        path = entry_path(root, kind, entry_id)
    except InvalidSegmentError as e:
        raise EntryNotFoundError(kind, entry_id) from e

    # Dotted stems are reserved for sidecar files
    if "." in entry_id or not path.exists():
        raise EntryNotFoundError(kind, entry_id)

    try:
        return read_entry(path)
    except EntryLoadError as e:
        logger.warning(str(e))
        raise
