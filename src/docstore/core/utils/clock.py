"""Timestamp helpers: current time and naive/aware normalization"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_aware(value: datetime) -> datetime:
    """Return value unchanged if aware, else interpret it as local time and attach that offset."""
    return value if value.tzinfo is not None else value.astimezone()
