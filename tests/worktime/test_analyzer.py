from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.timesheet_system.timesheet_system.clock.model import ClockEvent
from src.timesheet_system.timesheet_system.core.enums import ClockType, DoubleInPolicy
from src.timesheet_system.timesheet_system.worktime.analyzer import analyze_day, lunch_overlap_minutes, pair_intervals
from src.timesheet_system.timesheet_system.worktime.rules import WorkTimeRules

MONDAY = "2025-01-06"
SATURDAY = "2025-01-11"


def test_empty_day_is_all_zero():
    stats = analyze_day([], False)

    assert stats.work_date == ""
    assert stats.total_work_hours == 0
    assert stats.regular_hours == 0
    assert stats.total_overtime_hours == 0
    assert stats.exceed_hours == 0


def test_empty_day_uses_caller_date():
    stats = analyze_day([], True, work_date=date(2025, 1, 11))

    assert stats.work_date == "2025-01-11"
    assert stats.is_weekend is True
    assert stats.total_work_hours == 0


def test_single_pair_before_lunch(day):
    stats = analyze_day(day(MONDAY, ("IN", "09:00"), ("OUT", "11:30")), False)

    assert stats.work_date == MONDAY
    assert stats.total_work_hours == pytest.approx(2.5)
    assert stats.regular_hours == pytest.approx(2.5)


def test_pair_containing_lunch_loses_one_hour(day):
    stats = analyze_day(day(MONDAY, ("IN", "09:00"), ("OUT", "18:00")), False)

    assert stats.total_work_hours == pytest.approx(8.0)
    assert stats.regular_hours == pytest.approx(8.0)
    assert stats.overtime1_actual_hours == 0


def test_pair_partially_inside_lunch(day):
    stats = analyze_day(day(MONDAY, ("IN", "12:00"), ("OUT", "13:00")), False)

    assert stats.total_work_hours == pytest.approx(0.5)


def test_gap_over_lunch_is_not_deducted_twice(day):
    events = day(MONDAY, ("IN", "09:00"), ("OUT", "12:00"), ("IN", "13:30"), ("OUT", "20:30"))

    stats = analyze_day(events, False)

    assert stats.total_work_hours == pytest.approx(10.0)
    assert stats.regular_hours == pytest.approx(8.0)
    assert stats.overtime1_actual_hours == pytest.approx(2.0)
    assert stats.overtime2_actual_hours == 0
    assert stats.overtime1_hours == 2.0
    assert stats.total_overtime_hours == 2.0


def test_afternoon_pair_starting_inside_lunch_loses_the_overlap(day):
    # 13:00-20:00 overlaps 13:00-13:30 of the lunch window.
    events = day(MONDAY, ("IN", "09:00"), ("OUT", "12:00"), ("IN", "13:00"), ("OUT", "20:00"))

    stats = analyze_day(events, False)

    assert stats.total_work_hours == pytest.approx(9.5)
    assert stats.overtime1_actual_hours == pytest.approx(1.5)
    assert stats.overtime1_hours == 1.5


def test_weekend_day_is_all_overtime(day):
    stats = analyze_day(day(SATURDAY, ("IN", "09:00"), ("OUT", "23:00")), True)

    assert stats.total_work_hours == pytest.approx(13.0)
    assert stats.regular_hours == 0
    assert stats.overtime1_actual_hours == pytest.approx(2.0)
    assert stats.overtime2_actual_hours == pytest.approx(10.0)
    assert stats.exceed_actual_hours == pytest.approx(1.0)
    assert stats.total_overtime_hours == 12.0
    assert stats.exceed_hours == 1.0


def test_long_weekday_fills_both_tiers_and_exceed(day):
    stats = analyze_day(day(MONDAY, ("IN", "08:00"), ("OUT", "22:00")), False)

    assert stats.total_work_hours == pytest.approx(13.0)
    assert stats.regular_hours == pytest.approx(8.0)
    assert stats.overtime1_actual_hours == pytest.approx(2.0)
    assert stats.overtime2_actual_hours == pytest.approx(2.0)
    assert stats.exceed_actual_hours == pytest.approx(1.0)
    # Exceed hours are reported separately, not inside total overtime.
    assert stats.total_overtime_hours == 4.0


def test_statutory_hours_round_down_to_half_hour(day):
    # 09:00-19:50 minus lunch = 9h50m, overtime 1h50m
    stats = analyze_day(day(MONDAY, ("IN", "09:00"), ("OUT", "19:50")), False)

    assert stats.overtime1_actual_hours == pytest.approx(50 / 60 + 1)
    assert stats.overtime1_hours == 1.5
    assert stats.overtime1_hours <= stats.overtime1_actual_hours


def test_dangling_in_counts_nothing(day):
    stats = analyze_day(day(MONDAY, ("IN", "09:00")), False)

    assert stats.total_work_hours == 0
    assert stats.regular_hours == 0


def test_out_without_in_counts_nothing(day):
    stats = analyze_day(day(MONDAY, ("OUT", "09:00"), ("IN", "10:00"), ("OUT", "11:00")), False)

    assert stats.total_work_hours == pytest.approx(1.0)


def test_unsorted_events_are_sorted_first(day):
    ordered = day(MONDAY, ("IN", "09:00"), ("OUT", "11:00"), ("IN", "14:00"), ("OUT", "16:00"))
    shuffled = [ordered[3], ordered[0], ordered[2], ordered[1]]

    assert analyze_day(shuffled, False) == analyze_day(ordered, False)


def test_double_in_keeps_latest_by_default(day):
    events = day(MONDAY, ("IN", "08:00"), ("IN", "09:00"), ("OUT", "11:00"))

    stats = analyze_day(events, False)

    assert stats.total_work_hours == pytest.approx(2.0)


def test_double_in_keep_earliest_policy(day):
    events = day(MONDAY, ("IN", "08:00"), ("IN", "09:00"), ("OUT", "11:00"))

    stats = analyze_day(events, False, rules=WorkTimeRules(double_in_policy=DoubleInPolicy.KEEP_EARLIEST))

    assert stats.total_work_hours == pytest.approx(3.0)


def test_utc_timestamps_are_moved_to_local_clock():
    events = [
        ClockEvent("a", "u1", ClockType.IN, datetime(2025, 1, 6, 1, 0, tzinfo=timezone.utc)),
        ClockEvent("b", "u1", ClockType.OUT, datetime(2025, 1, 6, 3, 0, tzinfo=timezone.utc)),
    ]

    stats = analyze_day(events, False)

    # 09:00-11:00 in Taipei
    assert stats.work_date == MONDAY
    assert stats.total_work_hours == pytest.approx(2.0)


def test_cross_midnight_pair_uses_in_day_lunch_window(clock):
    events = [clock("IN", "2025-01-06 22:00"), clock("OUT", "2025-01-07 14:00")]

    stats = analyze_day(events, False)

    # Lunch of 2025-01-06 does not overlap; 2025-01-07 lunch is not considered.
    assert stats.work_date == MONDAY
    assert stats.total_work_hours == pytest.approx(16.0)


def test_pair_intervals_skips_unpaired(clock, tz):
    events = [clock("OUT", "2025-01-06 08:00"), clock("IN", "2025-01-06 09:00"), clock("OUT", "2025-01-06 10:00"), clock("IN", "2025-01-06 17:00")]

    intervals = pair_intervals(events, tz=tz)

    assert len(intervals) == 1
    assert intervals[0][0].hour == 9
    assert intervals[0][1].hour == 10


def test_lunch_overlap_outside_window_is_zero(tz, rules):
    start = datetime(2025, 1, 6, 14, 0, tzinfo=tz)
    end = datetime(2025, 1, 6, 18, 0, tzinfo=tz)

    assert lunch_overlap_minutes(start, end, rules) == 0


def test_elapsed_time_across_spring_forward():
    berlin = WorkTimeRules(timezone="Europe/Berlin")
    events = [
        ClockEvent("a", "u1", ClockType.IN, datetime(2025, 3, 30, 0, 30, tzinfo=timezone.utc)),
        ClockEvent("b", "u1", ClockType.OUT, datetime(2025, 3, 30, 3, 30, tzinfo=timezone.utc)),
    ]

    stats = analyze_day(events, True, rules=berlin)

    # 01:30 CET to 05:30 CEST is three real hours
    assert stats.work_date == "2025-03-30"
    assert stats.total_work_hours == pytest.approx(3.0)


def test_events_in_repeated_hour_keep_real_order():
    berlin = WorkTimeRules(timezone="Europe/Berlin")
    # 02:30 CEST, then 02:15 CET 45 minutes later
    events = [
        ClockEvent("b", "u1", ClockType.OUT, datetime(2025, 10, 26, 1, 15, tzinfo=timezone.utc)),
        ClockEvent("a", "u1", ClockType.IN, datetime(2025, 10, 26, 0, 30, tzinfo=timezone.utc)),
    ]

    stats = analyze_day(events, True, rules=berlin)

    assert stats.total_work_hours == pytest.approx(0.75)
