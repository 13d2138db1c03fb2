"""Period aggregator: clock events over a week or month -> ``WorkTimeStats``."""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from ..clock.model import ClockEvent
from ..common.datetime_utils import is_weekend, local_date
from ..core.enums import TimeRange
from .analyzer import analyze_day
from .model import DayWorkStats, PeriodTotals, WorkTimeStats
from .rules import WorkTimeRules
from .violations import evaluate_violations

logger = logging.getLogger(__name__)


def group_by_local_date(events: Iterable[ClockEvent], tz: tzinfo) -> dict[date, list[ClockEvent]]:
    groups: dict[date, list[ClockEvent]] = {}
    for e in events:
        groups.setdefault(local_date(e.timestamp, tz), []).append(e)
    return dict(sorted(groups.items()))


def summarize(days: Iterable[DayWorkStats]) -> PeriodTotals:
    totals = PeriodTotals()
    for d in days:
        totals += PeriodTotals(
            regular_hours=d.regular_hours,
            overtime1_hours=d.overtime1_hours,
            overtime1_actual_hours=d.overtime1_actual_hours,
            overtime2_hours=d.overtime2_hours,
            overtime2_actual_hours=d.overtime2_actual_hours,
            total_overtime_hours=d.total_overtime_hours,
            exceed_hours=d.exceed_hours,
            exceed_actual_hours=d.exceed_actual_hours,
            total_hours=d.total_work_hours,
        )
    return totals


def analyze_days(events: Iterable[ClockEvent], rules: WorkTimeRules) -> list[DayWorkStats]:
    return [
        analyze_day(day_events, is_weekend(day), rules=rules, work_date=day)
        for day, day_events in group_by_local_date(events, rules.tz).items()
    ]


def compute_stats(
    events: Iterable[ClockEvent],
    period_start: datetime,
    period_end: datetime,
    *,
    time_range: Optional[TimeRange] = None,
    rules: Optional[WorkTimeRules] = None,
) -> WorkTimeStats:
    rules = rules or WorkTimeRules()
    events = list(events)

    daily = analyze_days(events, rules)
    weekday = summarize(d for d in daily if not d.is_weekend)
    weekend = summarize(d for d in daily if d.is_weekend)

    # Weekends never carry regular hours.
    total = replace(weekday + weekend, regular_hours=weekday.regular_hours)

    violations = evaluate_violations(daily, weekday, total, rules, time_range=time_range)
    logger.debug(
        "Computed stats for %d events over %d days (%s - %s): %d violations",
        len(events), len(daily), period_start, period_end, len(violations),
    )

    return WorkTimeStats(
        period_start=period_start,
        period_end=period_end,
        weekday=weekday,
        weekend=weekend,
        total=total,
        violations=tuple(violations),
        daily_stats=tuple(daily),
        time_range=time_range,
    )
