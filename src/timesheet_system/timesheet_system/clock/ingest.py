"""Ingestion boundary for raw clock rows.

Rows coming from storage or HTTP are validated here so that the work-time
engine only ever receives well-formed ``ClockEvent`` values.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, Mapping

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import require_non_empty
from ..core.enums import ClockType
from ..core.exceptions import ValidationError
from .model import ClockEvent


def _parse_type(value: Any) -> ClockType:
    v = require_non_empty(value, "type").upper()
    try:
        return ClockType(v)
    except ValueError:
        raise ValidationError(f"Unknown clock type: {value!r}")


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("timestamp is required")
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValidationError(f"Invalid timestamp: {value!r}")


def parse_clock_event(row: Mapping[str, Any]) -> ClockEvent:
    user_id = row.get("user_id", row.get("userId"))
    return ClockEvent(
        event_id=require_non_empty(row.get("id"), "id"),
        user_id=require_non_empty(user_id, "user_id"),
        type=_parse_type(row.get("type")),
        timestamp=_parse_timestamp(row.get("timestamp")),
    )


def parse_clock_events(rows: Iterable[Mapping[str, Any]]) -> list[ClockEvent]:
    return [parse_clock_event(r) for r in rows]
