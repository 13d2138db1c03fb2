"""Date/time helpers.

Naive datetimes anywhere in the package are organization local time. Aware
values are converted with ``astimezone``. Elapsed time and ordering are always
taken on UTC instants; MySQL DATETIME columns hold naive UTC.
"""
from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing ``Z`` means UTC."""
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    return datetime.fromisoformat(v)


def now_local(tz: tzinfo | None = None) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def to_local(value: datetime, tz: tzinfo) -> datetime:
    """Move a timestamp onto the organization clock.

    Naive values are taken as already local and only get ``tz`` attached.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def to_utc(value: datetime) -> datetime:
    """UTC instant of an aware datetime."""
    return value.astimezone(timezone.utc)


def to_utc_naive(value: datetime, tz: tzinfo) -> datetime:
    """Naive-UTC form of ``value`` for DATETIME columns."""
    return to_utc(to_local(value, tz)).replace(tzinfo=None)


def elapsed_minutes(start: datetime, end: datetime) -> float:
    # same-tzinfo subtraction is wall-clock; go through UTC
    return (to_utc(end) - to_utc(start)).total_seconds() / 60


def local_date(value: datetime, tz: tzinfo) -> date:
    return to_local(value, tz).date()


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5
