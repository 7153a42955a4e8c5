"""Data models for the clock API."""

from .snapshot import (
    ClockReading,
    ErrorBody,
    Snapshot,
    SOURCE_TAG,
    TIME_PATTERN,
    utc_timestamp
)

__all__ = [
    'ClockReading',
    'ErrorBody',
    'Snapshot',
    'SOURCE_TAG',
    'TIME_PATTERN',
    'utc_timestamp'
]
