from __future__ import annotations

from typing import Sequence

from ..core.enums import ExpenseStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import ExpenseClaim
from .repository import ExpenseRepository


class MySQLExpenseRepository(ExpenseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_approved_between(self, *, start_ms: int, end_ms: int) -> Sequence[ExpenseClaim]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT claim_id, employee_id, amount, status, claim_date, approved_at_ms, category, description
                FROM expense_claims
                WHERE status=%s AND approved_at_ms >= %s AND approved_at_ms < %s
                """,
                (ExpenseStatus.APPROVED.value, int(start_ms), int(end_ms)),
            )
            return [
                ExpenseClaim(
                    claim_id=str(r["claim_id"]),
                    employee_id=str(r["employee_id"]),
                    amount=float(r["amount"]),
                    status=ExpenseStatus(r["status"]),
                    claim_date=r.get("claim_date"),
                    approved_at=int(r["approved_at_ms"]) if r.get("approved_at_ms") is not None else None,
                    category=r.get("category"),
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            ]
