from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class ClockType(str, Enum):
    """Punch type: clock in or clock out."""

    IN = "IN"
    OUT = "OUT"


class TimeRange(str, Enum):
    """Statistics window requested by the caller."""

    WEEK = "week"
    MONTH = "month"

    @classmethod
    def parse(cls, value: str | None) -> "TimeRange":
        v = (value or "").strip().lower()
        if not v:
            return cls.WEEK
        try:
            return cls(v)
        except ValueError:
            raise ValidationError(f"Unknown time range: {value!r} (expected week or month)")


class DoubleInPolicy(str, Enum):
    """What to do with a second IN while already clocked in."""

    KEEP_LATEST = "KEEP_LATEST"
    KEEP_EARLIEST = "KEEP_EARLIEST"
