from __future__ import annotations

from ..model import HourBuckets
from ..rules import WorkTimeRules
from .base import BucketSplit


class WeekendSplit(BucketSplit):
    """Rest day: every hour is overtime (2h tier 1, next 10h tier 2)."""

    def split(self, total_hours: float, rules: WorkTimeRules) -> HourBuckets:
        return HourBuckets(
            regular_hours=0.0,
            overtime1_actual_hours=min(total_hours, rules.overtime1_cap_hours),
            overtime2_actual_hours=min(max(0.0, total_hours - rules.overtime1_cap_hours), rules.weekend_overtime2_cap_hours),
            exceed_actual_hours=max(0.0, total_hours - rules.exceed_threshold_hours),
        )
