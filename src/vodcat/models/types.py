"""Pydantic models for vodcat.

EntryDocument is the on-disk schema of an entry file; EntryDetail and
ErrorStatus are the API payloads.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    field_validator,
)

from vodcat.core import duration as duration_codec


class EntryDocument(BaseModel):
    """Contents of an entry JSON file.

    The entry id is not part of the document: it comes from the file name,
    so an `id` key (like any unknown key) is ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: StrictStr
    description: StrictStr = ""
    created_at: AwareDatetime
    duration: timedelta
    hidden: StrictBool | None = None

    @field_validator("duration", mode="plain")
    @classmethod
    def decode_duration(cls, v: object) -> timedelta:
        """Accept seconds (int/float) or a compact string like "1h2m3s"."""
        # DurationError is a ValueError, so pydantic reports it as a validation error
        return duration_codec.decode(v)

    @field_validator("created_at")
    @classmethod
    def normalize_utc(cls, v: datetime) -> datetime:
        """Normalize timestamps to UTC."""
        try:
            return v.astimezone(timezone.utc)
        except OverflowError as e:
            # pydantic only reports ValueError as a validation error
            raise ValueError("timestamp out of range in UTC") from e


class EntryDetail(BaseModel):
    """Entry payload for API responses.

    `hidden` is None when the source document had no hidden flag; routes
    exclude None fields so it is omitted rather than emitted as null.
    """

    id: str
    title: str
    description: str
    created_at: str
    duration: str
    hidden: bool | None = None


class ErrorStatus(BaseModel):
    """Error payload: the HTTP status code, nothing else."""

    error: int
