"""Entry file loading.

read_entry raises EntryLoadError with the reason; load_entry collapses
every failure to None for callers that only need "entry or nothing".
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from vodcat.catalog.errors import EntryLoadError
from vodcat.models.domain import EntryEntity
from vodcat.models.types import EntryDocument

logger = logging.getLogger(__name__)

ENTRY_SUFFIX = ".json"


def read_entry(path: Path) -> EntryEntity:
    """Read and validate one entry file.

    The entry id is the file stem; no id-to-filename check is made
    against the document contents.

    Args:
        path: Path to the entry JSON file.

    Returns:
        Loaded entry.

    Raises:
        EntryLoadError: On I/O failure, malformed JSON, schema violation
            or an undecodable duration.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EntryLoadError(path, f"read failed: {e}") from e

    try:
        doc = EntryDocument.model_validate_json(text)
    except ValidationError as e:
        raise EntryLoadError(path, f"{e.error_count()} validation error(s)") from e

    return EntryEntity(
        entry_id=path.stem,
        title=doc.title,
        description=doc.description,
        created_at=doc.created_at,
        duration=doc.duration,
        hidden=doc.hidden,
    )


def load_entry(path: Path) -> EntryEntity | None:
    """Load an entry file, returning None on any failure.

    Args:
        path: Path to the entry JSON file.

    Returns:
        Loaded entry, or None if missing, unreadable or invalid.
    """
    try:
        return read_entry(path)
    except EntryLoadError as e:
        logger.debug(f"Skipping entry: {e}")
        return None
