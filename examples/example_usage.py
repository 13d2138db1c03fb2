"""Example: run the work-time engine directly (no Flask, no database).

Controllers are a thin layer; the statistics live in plain service functions.
"""

from datetime import datetime

from src.timesheet_system.timesheet_system.clock.ingest import parse_clock_events
from src.timesheet_system.timesheet_system.core.enums import TimeRange
from src.timesheet_system.timesheet_system.worktime.aggregator import compute_stats
from src.timesheet_system.timesheet_system.worktime.period import resolve_period
from src.timesheet_system.timesheet_system.worktime.rules import WorkTimeRules

ROWS = [
    {"id": "1", "user_id": "demo", "type": "IN", "timestamp": "2025-01-06T09:00:00+08:00"},
    {"id": "2", "user_id": "demo", "type": "OUT", "timestamp": "2025-01-06T20:30:00+08:00"},
    {"id": "3", "user_id": "demo", "type": "IN", "timestamp": "2025-01-11T10:00:00+08:00"},
    {"id": "4", "user_id": "demo", "type": "OUT", "timestamp": "2025-01-11T15:00:00+08:00"},
]


def main():
    rules = WorkTimeRules()
    period = resolve_period(TimeRange.WEEK, datetime(2025, 1, 8).date(), rules.tz)
    stats = compute_stats(parse_clock_events(ROWS), period.start, period.end, time_range=TimeRange.WEEK, rules=rules)
    print(stats.to_document())


if __name__ == "__main__":
    main()
