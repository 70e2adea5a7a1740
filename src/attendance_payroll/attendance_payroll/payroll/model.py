from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..core.enums import DayOutcome, PayrollStatus


@dataclass
class DayTally:
    """Running counts for one employee over one month."""

    worked_days: float = 0
    unpaid_days: float = 0
    infraction_count: int = 0

    def add_free_day(self) -> None:
        self.worked_days += 1

    def add_outcome(self, outcome: DayOutcome) -> None:
        if outcome == DayOutcome.PRESENT:
            self.worked_days += 1
        elif outcome in (DayOutcome.LATE, DayOutcome.EARLY_EXIT):
            self.worked_days += 1
            self.infraction_count += 1
        elif outcome == DayOutcome.HALF_DAY:
            self.worked_days += 0.5
            self.unpaid_days += 0.5
        else:
            self.unpaid_days += 1


@dataclass(frozen=True)
class PayComputation:
    monthly_gross: float
    per_day_salary: float
    penalty_days: int
    payable_days: float
    unpaid_days: float  # LOP days plus penalty days
    lop_deduction: int
    penalty_deduction: int
    statutory_deductions: float
    total_deductions: float
    reimbursements: float
    net_pay: int


@dataclass(frozen=True)
class PayrollRecord:
    """One employee's payroll for one month.

    Records are never updated; a second run for the same month adds new ones.
    """

    record_id: str
    run_id: str
    employee_id: str
    month: str
    month_number: int
    year: int
    total_days: int
    payable_days: float
    unpaid_days: float
    penalty_days: int
    lop_deduction: int
    penalty_deduction: int
    reimbursements: float
    gross_pay: float
    statutory_deductions: float
    deductions: float
    net_pay: int
    created_at: int  # epoch milliseconds
    generated_by: str
    status: PayrollStatus = PayrollStatus.PAID

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "run_id": self.run_id,
            "employee_id": self.employee_id,
            "month": self.month,
            "month_number": self.month_number,
            "year": self.year,
            "total_days": self.total_days,
            "payable_days": self.payable_days,
            "unpaid_days": self.unpaid_days,
            "penalty_days": self.penalty_days,
            "lop_deduction": self.lop_deduction,
            "penalty_deduction": self.penalty_deduction,
            "reimbursements": self.reimbursements,
            "gross_pay": self.gross_pay,
            "statutory_deductions": self.statutory_deductions,
            "deductions": self.deductions,
            "net_pay": self.net_pay,
            "created_at": self.created_at,
            "generated_by": self.generated_by,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class PayrollFailure:
    employee_id: str
    reason: str


@dataclass(frozen=True)
class PayrollBatch:
    run_id: str
    month: str
    records: list[PayrollRecord] = field(default_factory=list)
    failures: list[PayrollFailure] = field(default_factory=list)

    def record_for(self, employee_id: str) -> Optional[PayrollRecord]:
        return next((r for r in self.records if r.employee_id == employee_id), None)
