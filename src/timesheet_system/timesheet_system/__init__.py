"""Timesheet System package.

Work-time statistics for clock-in/out records: per-day overtime buckets,
period aggregation with statutory checks, and work-log conflict handling.
Organized by feature modules (clock, worktime, worklogs) with a thin Flask
controller layer over plain service functions.
"""
