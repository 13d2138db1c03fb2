from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from src.timesheet_system.timesheet_system.clock.model import ClockEvent
from src.timesheet_system.timesheet_system.core.enums import ClockType
from src.timesheet_system.timesheet_system.worktime.rules import WorkTimeRules

TAIPEI = ZoneInfo("Asia/Taipei")


@pytest.fixture
def tz():
    return TAIPEI


@pytest.fixture
def rules():
    return WorkTimeRules()


@pytest.fixture
def clock():
    """Build a ClockEvent from ("IN", "2025-01-06 09:00") in Taipei local time."""
    counter = {"n": 0}

    def _make(kind: str, when: str, *, user_id: str = "u1") -> ClockEvent:
        counter["n"] += 1
        return ClockEvent(
            event_id=f"e{counter['n']}",
            user_id=user_id,
            type=ClockType(kind),
            timestamp=datetime.strptime(when, "%Y-%m-%d %H:%M").replace(tzinfo=TAIPEI),
        )

    return _make


@pytest.fixture
def day(clock):
    """Events for one day from (kind, "HH:MM") pairs."""

    def _make(date_s: str, *punches: tuple[str, str]):
        return [clock(kind, f"{date_s} {hhmm}") for kind, hhmm in punches]

    return _make
