"""
DateTime Utilities
==================

Timestamps are persisted to MongoDB as UTC BSON dates. PyMongo/Motor return
them as naive datetimes representing UTC, so everything read back goes
through `ensure_utc`.

Functions:
- utc_now(): current UTC time, timezone-aware
- ensure_utc(): normalize a datetime into timezone-aware UTC
- from_epoch_millis(): convert a client millisecond timestamp to a datetime
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def from_epoch_millis(value: Union[int, float, str, None]) -> datetime:
    """
    Convert a millisecond Unix timestamp into a UTC datetime.

    Accepts numbers and numeric strings ("1718000000000"). Booleans are not
    timestamps.

    Raises:
        ValueError: If the value is not numeric or is outside the representable range
    """
    if value is None or isinstance(value, bool):
        raise ValueError("visitedDate must be a numeric timestamp")

    if isinstance(value, str):
        text = value.strip()
        try:
            millis = int(text)
        except ValueError:
            try:
                millis = float(text)
            except ValueError:
                raise ValueError("visitedDate must be a numeric timestamp")
    else:
        millis = value

    try:
        return datetime.fromtimestamp(millis / 1000, tz=dt_timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ValueError("visitedDate is not a valid date")
