"""
Models for clock snapshots served by the API.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

SOURCE_TAG = "vedicstandardtime.com"
TIME_PATTERN = r"^[0-9]{2}:[0-9]{2}:[0-9]{2}$"
MAX_LOCATION_LENGTH = 60


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """Format a moment as ISO-8601 UTC with milliseconds, e.g. 2026-10-19T08:15:42.123Z."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ClockReading(BaseModel):
    """Raw result of one extraction pass over the rendered page."""

    time_text: Optional[str] = None
    location: Optional[str] = None


class Snapshot(BaseModel):
    """The cached time/location record returned to clients."""

    time: str = Field(..., pattern=TIME_PATTERN)
    location: Optional[str] = Field(default=None, max_length=MAX_LOCATION_LENGTH)
    source: str = SOURCE_TAG
    fetched_at: str

    @classmethod
    def from_reading(cls, reading: ClockReading, fetched_at: Optional[str] = None) -> "Snapshot":
        """Build a snapshot from a reading that carries a time string."""
        return cls(
            time=reading.time_text,
            location=reading.location or None,
            fetched_at=fetched_at or utc_timestamp(),
        )


class ErrorBody(BaseModel):
    """Body of the 503 response."""

    error: str = "upstream_unavailable"
    detail: str
