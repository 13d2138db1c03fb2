from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class WorkLog:
    """Domain entity: one project work-log entry.

    ``end_time`` is None while the log is still running.
    """

    log_id: str
    user_id: str
    project_code: str
    category: str
    content: str
    start_time: datetime
    end_time: Optional[datetime] = None
    project_name: Optional[str] = None

    @property
    def duration_minutes(self) -> float:
        if self.end_time is None:
            return 0.0
        return max(0.0, (self.end_time - self.start_time).total_seconds() / 60)
