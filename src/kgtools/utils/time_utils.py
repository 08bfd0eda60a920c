"""Unix timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

UNIX_MINUTE = 60
UNIX_HOUR = 3600
UNIX_DAY = 86400

_INT32_RANGE = 1 << 32
_INT32_OFFSET = 1 << 31


def _to_int32(value: int) -> int:
    return ((value + _INT32_OFFSET) % _INT32_RANGE) - _INT32_OFFSET


def ensure_utc_datetime(value: datetime | str) -> datetime:
    """Ensure datetime values are timezone-aware in UTC; naive values are taken as UTC."""

    if isinstance(value, str):
        iso_value = value[:-1] + "+00:00" if value.endswith("Z") else value
        parsed = datetime.fromisoformat(iso_value)
    else:
        parsed = value
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_unix_time(value: datetime) -> int:
    """Whole seconds between the epoch and ``value``, truncated toward zero."""

    delta = ensure_utc_datetime(value) - EPOCH
    seconds = delta.days * UNIX_DAY + delta.seconds
    if seconds < 0 and delta.microseconds:
        seconds += 1
    return seconds


def to_unix_time32(value: datetime) -> int:
    return _to_int32(to_unix_time(value))


def unix_time() -> int:
    return to_unix_time(datetime.now(timezone.utc))


def unix_time32() -> int:
    return to_unix_time32(datetime.now(timezone.utc))


def to_datetime(value: int) -> datetime:
    """Convert a unix timestamp into an aware UTC datetime."""

    return EPOCH + timedelta(seconds=int(value))


__all__ = [
    "EPOCH",
    "UNIX_MINUTE",
    "UNIX_HOUR",
    "UNIX_DAY",
    "ensure_utc_datetime",
    "to_unix_time",
    "to_unix_time32",
    "unix_time",
    "unix_time32",
    "to_datetime",
]
