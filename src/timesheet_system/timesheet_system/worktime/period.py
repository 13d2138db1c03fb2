from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from ..core.enums import TimeRange


@dataclass(frozen=True)
class Period:
    """Half-open window ``[start, end)`` in the organization timezone."""

    time_range: TimeRange
    start: datetime
    end: datetime

    def contains(self, value: datetime) -> bool:
        return self.start <= value < self.end


def _midnight(day: date, tz: tzinfo) -> datetime:
    return datetime.combine(day, time(0, 0), tzinfo=tz)


def resolve_period(time_range: TimeRange, anchor: date, tz: tzinfo) -> Period:
    """Week = Monday 00:00 to next Monday 00:00; month = 1st to 1st of next month."""
    if time_range == TimeRange.MONTH:
        first = anchor.replace(day=1)
        if first.month == 12:
            following = first.replace(year=first.year + 1, month=1)
        else:
            following = first.replace(month=first.month + 1)
        return Period(time_range, _midnight(first, tz), _midnight(following, tz))

    monday = anchor - timedelta(days=anchor.weekday())
    return Period(time_range, _midnight(monday, tz), _midnight(monday + timedelta(days=7), tz))
