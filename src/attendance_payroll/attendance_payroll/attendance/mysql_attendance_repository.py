from __future__ import annotations

import uuid
from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import to_epoch_ms
from ..core.enums import PunchStatus, PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Punch
from .repository import AttendanceRepository

_COLUMNS = "punch_id, employee_id, punch_type, ts_ms, status, shift_id, remarks"


def _to_punch(r: dict) -> Punch:
    return Punch(
        punch_id=str(r["punch_id"]),
        employee_id=str(r["employee_id"]),
        punch_type=PunchType(r["punch_type"]),
        timestamp=int(r["ts_ms"]),
        status=PunchStatus(r["status"]) if r.get("status") else None,
        shift_id=r.get("shift_id"),
        remarks=r.get("remarks"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[Punch]:
        start_ms = to_epoch_ms(datetime.combine(start, time.min))
        end_ms = to_epoch_ms(datetime.combine(end + timedelta(days=1), time.min))

        clauses = ["ts_ms >= %s", "ts_ms < %s"]
        params: list[object] = [start_ms, end_ms]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM punches WHERE {where} ORDER BY ts_ms ASC", tuple(params))
            return [_to_punch(r) for r in fetchall(cur)]

    def last_clock_in(self, *, employee_id: str, before_ms: int) -> Optional[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punches
                WHERE employee_id=%s AND punch_type=%s AND ts_ms <= %s
                ORDER BY ts_ms DESC
                LIMIT 1
                """,
                (str(employee_id), PunchType.IN.value, int(before_ms)),
            )
            r = fetchone(cur)
            return _to_punch(r) if r else None

    def create(self, punch: Punch) -> str:
        punch_id = punch.punch_id or uuid.uuid4().hex
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punches(punch_id, employee_id, punch_type, ts_ms, status, shift_id, remarks)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    punch_id,
                    punch.employee_id,
                    punch.punch_type.value,
                    int(punch.timestamp),
                    punch.status.value if punch.status else None,
                    punch.shift_id,
                    punch.remarks,
                ),
            )
        return punch_id
