"""Conflicts between a new work log and the user's existing logs of that day."""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, time, timedelta, tzinfo
from enum import Enum
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import to_local
from ..core.exceptions import ValidationError
from .model import WorkLog


class ConflictAction(str, Enum):
    CLOSE = "CLOSE"
    SPLIT = "SPLIT"
    TRIM_END = "TRIM_END"
    TRIM_START = "TRIM_START"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ConflictResolution:
    log: WorkLog
    action: ConflictAction
    # Updated version of ``log``; None for DELETE.
    updated: Optional[WorkLog] = None
    # Second half produced by SPLIT.
    created: Optional[WorkLog] = None


def _overlaps(log: WorkLog, start: datetime, end: datetime) -> bool:
    if log.end_time is None:
        return log.start_time < end
    return (
        start <= log.start_time < end
        or start < log.end_time <= end
        or (log.start_time <= start and log.end_time >= end)
    )


def find_conflicts(logs: Iterable[WorkLog], start: datetime, end: datetime, *, tz: tzinfo) -> list[WorkLog]:
    """Logs on ``start``'s local day that overlap ``[start, end)``."""
    if end <= start:
        raise ValidationError("End time must be after start time")

    local_start = to_local(start, tz)
    day_start = datetime.combine(local_start.date(), time(0, 0), tzinfo=tz)
    day_end = day_start + timedelta(days=1)

    return [
        log
        for log in logs
        if day_start <= to_local(log.start_time, tz) < day_end and _overlaps(log, start, end)
    ]


def plan_conflict_resolution(conflicts: Iterable[WorkLog], start: datetime, end: datetime) -> list[ConflictResolution]:
    plan: list[ConflictResolution] = []
    for log in conflicts:
        if log.end_time is None:
            plan.append(ConflictResolution(log, ConflictAction.CLOSE, updated=replace(log, end_time=start)))
        elif log.start_time < start and log.end_time > end:
            plan.append(
                ConflictResolution(
                    log,
                    ConflictAction.SPLIT,
                    updated=replace(log, end_time=start),
                    created=replace(log, log_id=f"{log.log_id}-split", start_time=end),
                )
            )
        elif log.start_time < start:
            plan.append(ConflictResolution(log, ConflictAction.TRIM_END, updated=replace(log, end_time=start)))
        elif log.end_time > end:
            plan.append(ConflictResolution(log, ConflictAction.TRIM_START, updated=replace(log, start_time=end)))
        else:
            plan.append(ConflictResolution(log, ConflictAction.DELETE))
    return plan


def apply_resolution(logs: Sequence[WorkLog], plan: Iterable[ConflictResolution]) -> list[WorkLog]:
    """Logs after applying ``plan``, ordered by start time."""
    by_id = {r.log.log_id: r for r in plan}
    out: list[WorkLog] = []
    for log in logs:
        r = by_id.get(log.log_id)
        if r is None:
            out.append(log)
            continue
        if r.updated is not None:
            out.append(r.updated)
        if r.created is not None:
            out.append(r.created)
    out.sort(key=lambda log: log.start_time)
    return out
