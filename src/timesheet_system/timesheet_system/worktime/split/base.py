from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import HourBuckets
from ..rules import WorkTimeRules


class BucketSplit(ABC):
    """Strategy Pattern: how a day's work hours fall into pay buckets."""

    @abstractmethod
    def split(self, total_hours: float, rules: WorkTimeRules) -> HourBuckets:
        raise NotImplementedError
