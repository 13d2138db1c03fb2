from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .clock.mysql_clock_repository import MySQLClockRepository
from .database.connection import DBConfig, DatabaseConnection
from .worktime.rules import WorkTimeRules
from .worktime.service import WorkTimeStatsService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    clock_repo: MySQLClockRepository

    work_time_service: WorkTimeStatsService


def build_container(*, db_config: dict, rules: Optional[WorkTimeRules] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    rules = rules or WorkTimeRules()

    clock_repo = MySQLClockRepository(conn, rules.tz)
    work_time_service = WorkTimeStatsService(clock_repo, rules=rules)

    return Container(
        conn=conn,
        clock_repo=clock_repo,
        work_time_service=work_time_service,
    )
