from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, time, tzinfo
from zoneinfo import ZoneInfo

from ..core import constants
from ..core.enums import DoubleInPolicy


def legal_hours(actual_hours: float) -> float:
    """Statutory hours: round down to the nearest half hour."""
    if not actual_hours or math.isnan(actual_hours) or actual_hours < 0:
        return 0.0
    return math.floor(actual_hours * 2) / 2


def _parse_clock_time(value) -> time:
    if isinstance(value, time):
        return value
    return datetime.strptime(str(value).strip(), "%H:%M").time()


@dataclass(frozen=True)
class WorkTimeRules:
    """Statutory thresholds used by the day analyzer and period aggregator."""

    timezone: str = constants.DEFAULT_TIMEZONE
    lunch_start: time = constants.LUNCH_START
    lunch_end: time = constants.LUNCH_END
    regular_daily_hours: float = constants.REGULAR_DAILY_HOURS
    overtime1_cap_hours: float = constants.OVERTIME1_CAP_HOURS
    weekday_overtime2_cap_hours: float = constants.WEEKDAY_OVERTIME2_CAP_HOURS
    weekend_overtime2_cap_hours: float = constants.WEEKEND_OVERTIME2_CAP_HOURS
    exceed_threshold_hours: float = constants.EXCEED_THRESHOLD_HOURS
    daily_limit_hours: float = constants.DAILY_LIMIT_HOURS
    weekly_limit_hours: float = constants.WEEKLY_LIMIT_HOURS
    monthly_overtime_limit_hours: float = constants.MONTHLY_OVERTIME_LIMIT_HOURS
    double_in_policy: DoubleInPolicy = DoubleInPolicy.KEEP_LATEST

    @property
    def tz(self) -> tzinfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_settings(cls, settings) -> "WorkTimeRules":
        """Build rules from a settings module (see ``config/``)."""
        return cls(
            timezone=str(getattr(settings, "WORK_TIMEZONE", constants.DEFAULT_TIMEZONE)),
            lunch_start=_parse_clock_time(getattr(settings, "LUNCH_START", constants.LUNCH_START)),
            lunch_end=_parse_clock_time(getattr(settings, "LUNCH_END", constants.LUNCH_END)),
            double_in_policy=DoubleInPolicy(
                str(getattr(settings, "DOUBLE_IN_POLICY", DoubleInPolicy.KEEP_LATEST.value)).upper()
            ),
        )
