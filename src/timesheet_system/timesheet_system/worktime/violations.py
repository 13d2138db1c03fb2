"""Statutory checks over analyzed days.

The 40h weekday check and the 46h overtime cap are chosen by the period's
``TimeRange``. With no range given both period checks run on the whole period.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import TimeRange
from .model import DayWorkStats, PeriodTotals
from .rules import WorkTimeRules


def daily_limit_violations(days: Iterable[DayWorkStats], rules: WorkTimeRules) -> list[str]:
    return [
        f"{d.work_date}: worked {d.total_work_hours:.1f}h, over the daily limit of {rules.daily_limit_hours:g}h"
        for d in days
        if d.total_work_hours > rules.daily_limit_hours
    ]


def weekly_hours_violation(weekday_hours: float, rules: WorkTimeRules, *, label: str = "") -> Optional[str]:
    if weekday_hours <= rules.weekly_limit_hours:
        return None
    where = f"{label}: " if label else ""
    return f"{where}weekday work time {weekday_hours:.1f}h, over the weekly limit of {rules.weekly_limit_hours:g}h"


def monthly_overtime_violation(overtime_hours: float, rules: WorkTimeRules) -> Optional[str]:
    if overtime_hours <= rules.monthly_overtime_limit_hours:
        return None
    return (
        f"overtime {overtime_hours:.1f}h in this period, over the monthly limit of "
        f"{rules.monthly_overtime_limit_hours:g}h"
    )


def _weekday_hours_by_iso_week(days: Iterable[DayWorkStats]) -> dict[tuple[int, int], float]:
    weeks: dict[tuple[int, int], float] = {}
    for d in days:
        if d.is_weekend or not d.work_date:
            continue
        year, week, _ = date.fromisoformat(d.work_date).isocalendar()
        weeks[(year, week)] = weeks.get((year, week), 0.0) + d.total_work_hours
    return weeks


def evaluate_violations(
    days: Sequence[DayWorkStats],
    weekday: PeriodTotals,
    total: PeriodTotals,
    rules: WorkTimeRules,
    *,
    time_range: Optional[TimeRange] = None,
) -> list[str]:
    found = daily_limit_violations(days, rules)

    if time_range == TimeRange.MONTH:
        for (year, week), hours in sorted(_weekday_hours_by_iso_week(days).items()):
            v = weekly_hours_violation(hours, rules, label=f"{year}-W{week:02d}")
            if v:
                found.append(v)
    else:
        v = weekly_hours_violation(weekday.total_hours, rules)
        if v:
            found.append(v)

    if time_range in (None, TimeRange.MONTH):
        v = monthly_overtime_violation(total.total_overtime_hours, rules)
        if v:
            found.append(v)

    return found
