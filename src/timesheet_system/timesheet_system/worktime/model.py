from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from ..core.enums import TimeRange


@dataclass(frozen=True)
class HourBuckets:
    """Raw (unrounded) split of one day's work hours."""

    regular_hours: float = 0.0
    overtime1_actual_hours: float = 0.0
    overtime2_actual_hours: float = 0.0
    exceed_actual_hours: float = 0.0


@dataclass(frozen=True)
class DayWorkStats:
    work_date: str
    is_weekend: bool
    regular_hours: float = 0.0
    overtime1_hours: float = 0.0
    overtime1_actual_hours: float = 0.0
    overtime2_hours: float = 0.0
    overtime2_actual_hours: float = 0.0
    total_overtime_hours: float = 0.0
    exceed_hours: float = 0.0
    exceed_actual_hours: float = 0.0
    total_work_hours: float = 0.0

    def to_document(self) -> dict:
        return {
            "date": self.work_date,
            "isWeekend": self.is_weekend,
            "regularHours": self.regular_hours,
            "overtime1Hours": self.overtime1_hours,
            "overtime1ActualHours": self.overtime1_actual_hours,
            "overtime2Hours": self.overtime2_hours,
            "overtime2ActualHours": self.overtime2_actual_hours,
            "totalOvertimeHours": self.total_overtime_hours,
            "exceedHours": self.exceed_hours,
            "exceedActualHours": self.exceed_actual_hours,
            "totalWorkHours": self.total_work_hours,
        }


@dataclass(frozen=True)
class PeriodTotals:
    """Sum of the day buckets over a set of days."""

    regular_hours: float = 0.0
    overtime1_hours: float = 0.0
    overtime1_actual_hours: float = 0.0
    overtime2_hours: float = 0.0
    overtime2_actual_hours: float = 0.0
    total_overtime_hours: float = 0.0
    exceed_hours: float = 0.0
    exceed_actual_hours: float = 0.0
    total_hours: float = 0.0

    def __add__(self, other: "PeriodTotals") -> "PeriodTotals":
        return PeriodTotals(**{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)})


# (document suffix, PeriodTotals attribute); "regular" is only emitted for weekday/total
_TOTAL_KEYS = (
    ("Overtime1Hours", "overtime1_hours"),
    ("Overtime1ActualHours", "overtime1_actual_hours"),
    ("Overtime2Hours", "overtime2_hours"),
    ("Overtime2ActualHours", "overtime2_actual_hours"),
    ("TotalOvertimeHours", "total_overtime_hours"),
    ("ExceedHours", "exceed_hours"),
    ("ExceedActualHours", "exceed_actual_hours"),
    ("TotalHours", "total_hours"),
)


@dataclass(frozen=True)
class WorkTimeStats:
    period_start: datetime
    period_end: datetime
    weekday: PeriodTotals
    weekend: PeriodTotals
    total: PeriodTotals
    violations: tuple[str, ...]
    daily_stats: tuple[DayWorkStats, ...]
    time_range: Optional[TimeRange] = None

    def to_document(self) -> dict:
        """Flat key-value document, numeric fields in hours."""
        doc: dict = {"weekdayRegularHours": self.weekday.regular_hours}
        for prefix, totals in (("weekday", self.weekday), ("weekend", self.weekend)):
            for suffix, attr in _TOTAL_KEYS:
                doc[prefix + suffix] = getattr(totals, attr)

        doc["totalRegularHours"] = self.total.regular_hours
        for suffix, attr in _TOTAL_KEYS:
            if suffix == "TotalOvertimeHours":
                doc["totalOvertimeHours"] = self.total.total_overtime_hours
            elif suffix == "TotalHours":
                doc["totalWorkHours"] = self.total.total_hours
            else:
                doc["total" + suffix] = getattr(self.total, attr)

        doc["violations"] = list(self.violations)
        doc["dailyStats"] = [d.to_document() for d in self.daily_stats]
        return doc
