"""Constants and defaults.

Note: Keep statutory numbers here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_TIMEZONE = "Asia/Taipei"

LUNCH_START = time(12, 30)
LUNCH_END = time(13, 30)

# Hours
REGULAR_DAILY_HOURS = 8
OVERTIME1_CAP_HOURS = 2
WEEKDAY_OVERTIME2_CAP_HOURS = 2
WEEKEND_OVERTIME2_CAP_HOURS = 10
EXCEED_THRESHOLD_HOURS = 12

DAILY_LIMIT_HOURS = 12
WEEKLY_LIMIT_HOURS = 40
MONTHLY_OVERTIME_LIMIT_HOURS = 46

MERGE_GAP_MINUTES = 1
