from __future__ import annotations

from ..model import HourBuckets
from ..rules import WorkTimeRules
from .base import BucketSplit


class WeekdaySplit(BucketSplit):
    """First 8h regular, then two overtime tiers of 2h each; beyond 12h is exceed."""

    def split(self, total_hours: float, rules: WorkTimeRules) -> HourBuckets:
        regular = min(total_hours, rules.regular_daily_hours)
        overtime = max(0.0, total_hours - rules.regular_daily_hours)
        return HourBuckets(
            regular_hours=regular,
            overtime1_actual_hours=min(overtime, rules.overtime1_cap_hours),
            overtime2_actual_hours=min(max(0.0, overtime - rules.overtime1_cap_hours), rules.weekday_overtime2_cap_hours),
            exceed_actual_hours=max(0.0, total_hours - rules.exceed_threshold_hours),
        )
