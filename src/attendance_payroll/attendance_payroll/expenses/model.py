from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import ExpenseStatus


@dataclass(frozen=True)
class ExpenseClaim:
    """A reimbursable expense.

    `approved_at` (epoch ms) decides the payroll month, not the claim date.
    """

    employee_id: str
    amount: float
    status: ExpenseStatus
    claim_date: Optional[date] = None
    approved_at: Optional[int] = None
    claim_id: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
