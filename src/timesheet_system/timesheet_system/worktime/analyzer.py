"""Day analyzer: one day's clock events -> ``DayWorkStats``.

IN/OUT events are paired in time order; each paired interval loses the part
that overlaps the lunch window of the IN event's calendar day. Unpaired events
(an IN never closed, an OUT with no open IN) contribute nothing.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from ..clock.model import ClockEvent
from ..common.datetime_utils import elapsed_minutes, to_local, to_utc
from ..core.enums import ClockType, DoubleInPolicy
from .model import DayWorkStats
from .rules import WorkTimeRules, legal_hours
from .split.factory import BucketSplitFactory

logger = logging.getLogger(__name__)

_split_factory = BucketSplitFactory()


def _sorted_local(events: Iterable[ClockEvent], tz: tzinfo) -> list[tuple[ClockType, datetime]]:
    items = [(e.type, to_local(e.timestamp, tz)) for e in events]
    items.sort(key=lambda item: to_utc(item[1]))
    return items


def pair_intervals(
    events: Iterable[ClockEvent],
    *,
    tz: tzinfo,
    policy: DoubleInPolicy = DoubleInPolicy.KEEP_LATEST,
) -> list[tuple[datetime, datetime]]:
    """Pair IN/OUT events into ``(in, out)`` intervals in local time."""
    intervals: list[tuple[datetime, datetime]] = []
    last_in: Optional[datetime] = None

    for kind, ts in _sorted_local(events, tz):
        if kind == ClockType.IN:
            if last_in is not None and policy == DoubleInPolicy.KEEP_EARLIEST:
                logger.debug("Ignoring repeated IN at %s (open since %s)", ts, last_in)
                continue
            last_in = ts
        elif last_in is not None:
            intervals.append((last_in, ts))
            last_in = None

    return intervals


def lunch_overlap_minutes(start: datetime, end: datetime, rules: WorkTimeRules) -> float:
    """Minutes of ``[start, end)`` inside the lunch window of ``start``'s day.

    The window is placed on the local calendar day and compared as UTC instants.
    """
    day = start.date()
    lunch_start = datetime.combine(day, rules.lunch_start, tzinfo=start.tzinfo)
    lunch_end = datetime.combine(day, rules.lunch_end, tzinfo=start.tzinfo)

    overlap_start = max(to_utc(start), to_utc(lunch_start))
    overlap_end = min(to_utc(end), to_utc(lunch_end))
    return max(0.0, elapsed_minutes(overlap_start, overlap_end))


def worked_minutes(start: datetime, end: datetime, rules: WorkTimeRules) -> float:
    """(out - in) - lunch overlap, not below 0."""
    minutes = max(0.0, elapsed_minutes(start, end))
    minutes -= lunch_overlap_minutes(start, end, rules)
    return max(0.0, minutes)


def analyze_day(
    events: Iterable[ClockEvent],
    is_weekend_day: bool,
    *,
    rules: Optional[WorkTimeRules] = None,
    work_date: Optional[date] = None,
) -> DayWorkStats:
    rules = rules or WorkTimeRules()
    tz = rules.tz
    events = list(events)

    if work_date is not None:
        date_key = work_date.isoformat()
    elif events:
        first = min((to_local(e.timestamp, tz) for e in events), key=to_utc)
        date_key = first.date().isoformat()
    else:
        date_key = ""

    intervals = pair_intervals(events, tz=tz, policy=rules.double_in_policy)
    total_minutes = sum(worked_minutes(start, end, rules) for start, end in intervals)
    total_hours = total_minutes / 60 if total_minutes > 0 else 0.0

    buckets = _split_factory.for_day(is_weekend=is_weekend_day).split(total_hours, rules)
    overtime1 = legal_hours(buckets.overtime1_actual_hours)
    overtime2 = legal_hours(buckets.overtime2_actual_hours)

    return DayWorkStats(
        work_date=date_key,
        is_weekend=is_weekend_day,
        regular_hours=buckets.regular_hours,
        overtime1_hours=overtime1,
        overtime1_actual_hours=buckets.overtime1_actual_hours,
        overtime2_hours=overtime2,
        overtime2_actual_hours=buckets.overtime2_actual_hours,
        total_overtime_hours=overtime1 + overtime2,
        exceed_hours=legal_hours(buckets.exceed_actual_hours),
        exceed_actual_hours=buckets.exceed_actual_hours,
        total_work_hours=total_hours,
    )
