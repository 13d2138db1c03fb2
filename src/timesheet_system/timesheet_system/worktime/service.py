from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..clock.repository import ClockRepository
from ..core.enums import TimeRange
from .aggregator import compute_stats
from .model import WorkTimeStats
from .period import resolve_period
from .rules import WorkTimeRules

logger = logging.getLogger(__name__)


class WorkTimeStatsService:
    """Loads a user's clock events for a week/month and runs the engine."""

    def __init__(self, clocks: ClockRepository, *, rules: Optional[WorkTimeRules] = None):
        self._clocks = clocks
        self._rules = rules or WorkTimeRules()

    @property
    def rules(self) -> WorkTimeRules:
        return self._rules

    def build_stats(self, *, user_id: str, time_range: TimeRange, anchor: date) -> WorkTimeStats:
        period = resolve_period(time_range, anchor, self._rules.tz)
        events = self._clocks.list_for_user_between(str(user_id), period.start, period.end)
        logger.debug(
            "Loaded %d clock events for user %s in %s %s - %s",
            len(events), user_id, time_range.value, period.start.isoformat(), period.end.isoformat(),
        )
        return compute_stats(events, period.start, period.end, time_range=time_range, rules=self._rules)

    def build_report(self, *, user_id: str, time_range: TimeRange, anchor: date) -> dict:
        stats = self.build_stats(user_id=user_id, time_range=time_range, anchor=anchor)
        doc = stats.to_document()
        doc.update(
            {
                "timeRange": time_range.value,
                "periodStart": stats.period_start.isoformat(),
                "periodEnd": stats.period_end.isoformat(),
            }
        )
        return doc
