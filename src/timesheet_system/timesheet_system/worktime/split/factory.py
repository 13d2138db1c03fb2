from __future__ import annotations

from dataclasses import dataclass

from .base import BucketSplit
from .weekday_split import WeekdaySplit
from .weekend_split import WeekendSplit


@dataclass
class BucketSplitFactory:
    """Factory Pattern: choose the bucket split for a calendar day."""

    def for_day(self, *, is_weekend: bool) -> BucketSplit:
        if is_weekend:
            return WeekendSplit()
        return WeekdaySplit()
