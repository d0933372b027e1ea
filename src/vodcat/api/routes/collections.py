"""Collections API endpoints.

GET /api/                  - List collection names
GET /api/{kind}            - List visible entries, newest first
GET /api/{kind}/{entry_id} - Get one entry (hidden entries included)
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from vodcat.api.app import get_catalog_root, get_settings
from vodcat.catalog import collections as catalog
from vodcat.catalog.errors import (
    EntryLoadError,
    EntryNotFoundError,
    InvalidSegmentError,
    ScanError,
)
from vodcat.config import Settings
from vodcat.core.duration import encode
from vodcat.models.domain import EntryEntity
from vodcat.models.types import EntryDetail

router = APIRouter()


def format_timestamp(value: datetime) -> str:
    """Format a UTC timestamp as RFC 3339 with a Z suffix.

    Fractional seconds are emitted only when non-zero, as milliseconds
    when that is exact, otherwise as microseconds.
    """
    text = value.replace(microsecond=0, tzinfo=None).isoformat()
    micros = value.microsecond
    if micros and micros % 1000 == 0:
        text += f".{micros // 1000:03d}"
    elif micros:
        text += f".{micros:06d}"
    return text + "Z"


def _entry_to_detail(entry: EntryEntity) -> EntryDetail:
    """Convert EntryEntity to EntryDetail."""
    return EntryDetail(
        id=entry.entry_id,
        title=entry.title,
        description=entry.description,
        created_at=format_timestamp(entry.created_at),
        duration=encode(entry.duration),
        hidden=entry.hidden,
    )


@router.get("/", response_model=list[str])
def index(settings: Settings = Depends(get_settings)) -> list[str]:
    """List known collection names."""
    return catalog.list_collections(settings.extra_collections)


@router.get("/{kind}", response_model=list[EntryDetail], response_model_exclude_none=True)
def list_entries(
    kind: str,
    root: Path = Depends(get_catalog_root),
) -> list[EntryDetail]:
    """List the visible entries of a collection.

    Args:
        kind: Collection name.
        root: Catalog root directory (injected).

    Returns:
        Entries ordered by created_at descending.

    Raises:
        HTTPException: 404 if kind is not a valid name, 500 if the
            collection directory cannot be opened.
    """
    try:
        entries = catalog.list_entries(root, kind)
    except InvalidSegmentError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ScanError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return [_entry_to_detail(entry) for entry in entries]


@router.get(
    "/{kind}/{entry_id}",
    response_model=EntryDetail,
    response_model_exclude_none=True,
)
def get_entry(
    kind: str,
    entry_id: str,
    root: Path = Depends(get_catalog_root),
) -> EntryDetail:
    """Get a single entry by id.

    Args:
        kind: Collection name.
        entry_id: Entry id (file name without ".json").
        root: Catalog root directory (injected).

    Returns:
        EntryDetail for the entry.

    Raises:
        HTTPException: 404 if no entry file exists, 500 if it exists but
            cannot be loaded.
    """
    try:
        entry = catalog.get_entry(root, kind, entry_id)
    except EntryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except EntryLoadError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return _entry_to_detail(entry)
