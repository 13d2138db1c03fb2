from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import ClockEvent


class ClockRepository(Protocol):
    def list_for_user_between(self, user_id: str, start: datetime, end: datetime) -> Sequence[ClockEvent]:
        """Events with ``start <= timestamp < end``, oldest first."""

        raise NotImplementedError
