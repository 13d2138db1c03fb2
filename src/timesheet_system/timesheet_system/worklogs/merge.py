"""Merge preview for fragmented work logs of the same task."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from ..core.constants import MERGE_GAP_MINUTES
from .model import WorkLog


@dataclass(frozen=True)
class MergeGroup:
    logs: tuple[WorkLog, ...]

    @property
    def first(self) -> WorkLog:
        return self.logs[0]

    @property
    def total_minutes(self) -> float:
        return sum(log.duration_minutes for log in self.logs)

    @property
    def duration_label(self) -> str:
        minutes = self.total_minutes
        if minutes < 60:
            return f"{round(minutes)} min"
        return f"{minutes / 60:.1f} h"

    def merged(self) -> WorkLog:
        return replace(self.first, end_time=max(log.end_time for log in self.logs))

    def to_preview(self) -> dict:
        return {
            "projectCode": self.first.project_code,
            "projectName": self.first.project_name,
            "category": self.first.category,
            "content": self.first.content,
            "count": len(self.logs),
            "totalDuration": self.duration_label,
        }


def _task_key(log: WorkLog) -> tuple[str, str, str]:
    return (log.project_code, log.category, log.content.strip())


def _can_chain(last: WorkLog, current: WorkLog, gap_minutes: float) -> bool:
    gap = (current.start_time - last.end_time).total_seconds() / 60
    return current.start_time <= last.end_time or 0 < gap <= gap_minutes


def _blocked(last: WorkLog, current: WorkLog, chain: Sequence[WorkLog], all_logs: Sequence[WorkLog]) -> bool:
    """True if another log sits strictly between ``last`` and ``current``."""
    skip = {log.log_id for log in chain} | {current.log_id}
    return any(
        log.start_time > last.start_time and log.end_time < current.end_time
        for log in all_logs
        if log.log_id not in skip
    )


def preview_merges(logs: Iterable[WorkLog], *, gap_minutes: float = MERGE_GAP_MINUTES) -> list[MergeGroup]:
    closed = sorted((log for log in logs if log.end_time is not None), key=lambda log: log.start_time)

    by_task: dict[tuple[str, str, str], list[WorkLog]] = {}
    for log in closed:
        by_task.setdefault(_task_key(log), []).append(log)

    groups: list[MergeGroup] = []
    for task_logs in by_task.values():
        if len(task_logs) < 2:
            continue

        chain = [task_logs[0]]
        for current in task_logs[1:]:
            last = chain[-1]
            if _can_chain(last, current, gap_minutes) and not _blocked(last, current, chain, closed):
                chain.append(current)
                continue
            if len(chain) > 1:
                groups.append(MergeGroup(tuple(chain)))
            chain = [current]

        if len(chain) > 1:
            groups.append(MergeGroup(tuple(chain)))

    return groups
