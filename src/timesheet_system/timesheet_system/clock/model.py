from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import ClockType


@dataclass(frozen=True)
class ClockEvent:
    """Domain entity: a single clock punch (IN or OUT).

    Read-only input to the work-time engine; persisted elsewhere.
    """

    event_id: str
    user_id: str
    type: ClockType
    timestamp: datetime
