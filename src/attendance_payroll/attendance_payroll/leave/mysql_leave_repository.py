from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday, LeaveRequest
from .repository import LeaveRepository


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_overlapping(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[LeaveRequest]:
        clauses = ["start_date <= %s", "end_date >= %s"]
        params: list[object] = [end, start]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT request_id, employee_id, leave_type, start_date, end_date, reason, status
                FROM leave_requests
                WHERE {where}
                ORDER BY start_date ASC
                """,
                tuple(params),
            )
            return [
                LeaveRequest(
                    request_id=str(r["request_id"]),
                    employee_id=str(r["employee_id"]),
                    leave_type=r.get("leave_type"),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    reason=r.get("reason"),
                    status=RequestStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def list_holidays(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_id, name, holiday_date FROM holidays ORDER BY holiday_date")
            return [
                Holiday(holiday_id=str(r["holiday_id"]), name=r["name"], holiday_date=r["holiday_date"])
                for r in fetchall(cur)
            ]
