from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.enums import PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollRecord
from .repository import PayrollRepository

_FIELDS = (
    "record_id",
    "run_id",
    "employee_id",
    "month",
    "month_number",
    "year",
    "total_days",
    "payable_days",
    "unpaid_days",
    "penalty_days",
    "lop_deduction",
    "penalty_deduction",
    "reimbursements",
    "gross_pay",
    "statutory_deductions",
    "deductions",
    "net_pay",
    "created_at",
    "generated_by",
    "status",
)
_COLUMNS = ", ".join(_FIELDS)


def _to_record(r: dict) -> PayrollRecord:
    return PayrollRecord(
        record_id=r["record_id"],
        run_id=r["run_id"],
        employee_id=str(r["employee_id"]),
        month=r["month"],
        month_number=int(r["month_number"]),
        year=int(r["year"]),
        total_days=int(r["total_days"]),
        payable_days=float(r["payable_days"]),
        unpaid_days=float(r["unpaid_days"]),
        penalty_days=int(r["penalty_days"]),
        lop_deduction=int(r["lop_deduction"]),
        penalty_deduction=int(r["penalty_deduction"]),
        reimbursements=float(r["reimbursements"]),
        gross_pay=float(r["gross_pay"]),
        statutory_deductions=float(r["statutory_deductions"]),
        deductions=float(r["deductions"]),
        net_pay=int(r["net_pay"]),
        created_at=int(r["created_at"]),
        generated_by=r["generated_by"],
        status=PayrollStatus(r["status"]),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def exists_for_month(self, month: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM payroll_records WHERE month=%s LIMIT 1", (month,))
            return fetchone(cur) is not None

    def save_many(self, records: Iterable[PayrollRecord]) -> int:
        rows = [
            tuple(getattr(rec, name).value if name == "status" else getattr(rec, name) for name in _FIELDS)
            for rec in records
        ]
        if not rows:
            return 0

        placeholders = ",".join(["%s"] * len(_FIELDS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(f"INSERT INTO payroll_records({_COLUMNS}) VALUES({placeholders})", rows)
        return len(rows)

    def list_for_employee(self, employee_id: str) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM payroll_records WHERE employee_id=%s ORDER BY created_at DESC",
                (str(employee_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get(self, record_id: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payroll_records WHERE record_id=%s", (record_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None
