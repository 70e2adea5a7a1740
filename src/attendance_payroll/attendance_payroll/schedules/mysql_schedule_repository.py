from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import RosterAssignment
from .repository import ScheduleRepository


def _to_assignment(r: dict) -> RosterAssignment:
    return RosterAssignment(
        assignment_id=int(r["assignment_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        shift_id=str(r["shift_id"]),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, *, employee_id: str, work_date: date, shift_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO roster_assignments(employee_id, work_date, shift_id)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE shift_id=VALUES(shift_id)
                """,
                (str(employee_id), work_date, str(shift_id)),
            )

            # If it was an update, lastrowid can be 0; fetch assignment_id.
            if cur.lastrowid:
                return int(cur.lastrowid)

            cur.execute(
                "SELECT assignment_id FROM roster_assignments WHERE employee_id=%s AND work_date=%s",
                (str(employee_id), work_date),
            )
            r = fetchone(cur)
            return int(r["assignment_id"]) if r else 0

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[RosterAssignment]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT assignment_id, employee_id, work_date, shift_id
                FROM roster_assignments
                WHERE {where}
                ORDER BY work_date ASC, employee_id ASC
                """,
                tuple(params),
            )
            return [_to_assignment(r) for r in fetchall(cur)]
