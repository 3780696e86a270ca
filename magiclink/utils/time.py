"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

Instant = Union[datetime, int, float]


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def timestamp(moment: datetime) -> float:
    """Seconds since the epoch; naive datetimes are taken to be UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.timestamp()


def to_unix(instant: Instant) -> int:
    """Convert a datetime or epoch value to whole seconds since the epoch."""
    if isinstance(instant, datetime):
        return int(timestamp(instant))
    if isinstance(instant, bool) or not isinstance(instant, (int, float)):
        raise TypeError(f"expected datetime or epoch seconds, got {type(instant).__name__}")
    return int(instant)

