"""Domain models for vodcat.

Pure Python dataclasses, independent of pydantic, used by the catalog
layer. Entries are frozen: each request re-reads them from disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class EntryEntity:
    """One media item loaded from `<collection>/<entry_id>.json`."""

    entry_id: str
    title: str
    created_at: datetime
    duration: timedelta
    description: str = ""
    hidden: bool | None = None

    @property
    def is_hidden(self) -> bool:
        """Absent hidden flag means visible."""
        return bool(self.hidden)
