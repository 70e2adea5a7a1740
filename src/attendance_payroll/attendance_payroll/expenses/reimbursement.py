from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import from_epoch_ms, is_same_month
from ..core.enums import ExpenseStatus
from .model import ExpenseClaim


def reimbursable_claims(employee_id: str, *, month: int, year: int, claims: Iterable[ExpenseClaim]) -> list[ExpenseClaim]:
    return [
        c
        for c in claims
        if c.employee_id == employee_id
        and c.status == ExpenseStatus.APPROVED
        and c.approved_at
        and is_same_month(from_epoch_ms(c.approved_at), month=month, year=year)
    ]


def reimbursements_for(employee_id: str, *, month: int, year: int, claims: Iterable[ExpenseClaim]) -> float:
    """Sum of approved claims whose approval falls inside (month, year)."""
    return sum(c.amount for c in reimbursable_claims(employee_id, month=month, year=year, claims=claims))
