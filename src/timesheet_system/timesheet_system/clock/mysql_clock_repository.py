from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..common.datetime_utils import to_utc_naive
from ..database.mysql_base import db_cursor, fetchall
from .ingest import parse_clock_event
from .model import ClockEvent
from .repository import ClockRepository


class MySQLClockRepository(ClockRepository):
    """Reads ``clock_records``; timestamps are stored as naive UTC DATETIME.

    Naive query bounds are read as ``tz`` local time.
    """

    def __init__(self, conn_factory: DatabaseConnection, tz: tzinfo):
        self._conn_factory = conn_factory
        self._tz = tz

    def list_for_user_between(self, user_id: str, start: datetime, end: datetime) -> Sequence[ClockEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, user_id, type, timestamp
                FROM clock_records
                WHERE user_id=%s AND timestamp >= %s AND timestamp < %s
                ORDER BY timestamp ASC
                """,
                (str(user_id), to_utc_naive(start, self._tz), to_utc_naive(end, self._tz)),
            )
            rows = fetchall(cur)
            return [
                parse_clock_event(
                    {
                        "id": str(r["id"]),
                        "user_id": str(r["user_id"]),
                        "type": r["type"],
                        "timestamp": r["timestamp"].replace(tzinfo=timezone.utc),
                    }
                )
                for r in rows
            ]
